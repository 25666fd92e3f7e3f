"""Unit tests for modules.block_kit.inputs."""

import pytest
from slack_sdk.models.blocks import InputBlock, PlainTextInputElement

from modules.block_kit import InputBlockBuilder
from modules.block_kit.exceptions import InvalidArgumentError
from modules.block_kit.extensions import text_inputs


@pytest.mark.unit
class TestInputBlockBuilder:
    """Test suite for InputBlockBuilder."""

    def test_block_created_eagerly(self):
        """The input block exists before any configuration."""
        element = PlainTextInputElement()

        builder = InputBlockBuilder(element, "Name")

        assert isinstance(builder.block, InputBlock)
        assert builder.block.element is element
        assert builder.block.label.text == "Name"

    def test_block_level_setters(self):
        """Block setters act on the input block."""
        builder = (
            InputBlockBuilder(PlainTextInputElement(), "Name")
            .block_id("name_block")
            .dispatch_action()
            .hint("Your full name")
            .optional()
        )

        block = builder.block
        assert block.block_id == "name_block"
        assert block.dispatch_action is True
        assert block.hint.text == "Your full name"
        assert block.optional is True

    def test_hint_none_clears(self):
        """Passing None removes the hint."""
        builder = InputBlockBuilder(PlainTextInputElement(), "Name").hint("x").hint(None)

        assert builder.block.hint is None

    def test_element_setters_act_on_element(self):
        """Inherited setters configure the element."""
        builder = InputBlockBuilder(PlainTextInputElement(), "Notes")
        builder.action_id("notes").pipe(text_inputs.multiline).pipe(
            text_inputs.max_length, 500
        )

        element = builder.block.element
        assert element.action_id == "notes"
        assert element.multiline is True
        assert element.max_length == 500

    def test_none_element_raises(self):
        """A missing element is rejected."""
        with pytest.raises(InvalidArgumentError):
            InputBlockBuilder(None, "Name")

    def test_none_label_raises(self):
        """A missing label is rejected."""
        with pytest.raises(InvalidArgumentError):
            InputBlockBuilder(PlainTextInputElement(), None)
