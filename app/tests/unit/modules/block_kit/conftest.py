"""Unit test fixtures for the block_kit module."""

import pytest
from slack_sdk.models.blocks import (
    ActionsBlock,
    ButtonElement,
    DividerBlock,
    SectionBlock,
    StaticSelectElement,
)

from modules.block_kit.elements import InputElementBuilder


@pytest.fixture
def make_button():
    """Factory for buttons with a given action id."""

    def _factory(action_id: str, text: str = "Click") -> ButtonElement:
        return ButtonElement(text=text, action_id=action_id)

    return _factory


@pytest.fixture
def existing_layout(make_button):
    """A posted layout: section, actions with two buttons, divider."""
    return [
        SectionBlock(block_id="intro", text="Hello"),
        ActionsBlock(
            block_id="buttons",
            elements=[make_button("approve"), make_button("reject")],
        ),
        DividerBlock(block_id="divider"),
    ]


@pytest.fixture
def static_select():
    """Builder around an empty static select menu."""
    return InputElementBuilder(StaticSelectElement(action_id="menu"))
