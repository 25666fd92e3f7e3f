"""Fluent builders for Slack Block Kit layouts.

Builds ordered lists of ``slack_sdk.models.blocks`` objects, checks Slack's
structural limits at build time and supports editing existing layouts.

Public API:
    - create(): Start an empty layout
    - from_blocks(): Start from a copy of existing blocks
    - BlockBuilder: Root layout builder
    - ActionsBlockBuilder, ContextBlockBuilder, SectionBuilder,
      RichTextBuilder, InputBlockBuilder: Container builders
    - ActionElementBuilder, InputElementBuilder: Element builders
    - extensions: Typed element helpers (buttons, select_menus, ...)

Example:
    from modules.block_kit import create
    from modules.block_kit.extensions import select_menus

    blocks = (
        create()
        .add_header("On-call handover")
        .add_actions(lambda a: a.add_user_select_menu(
            "next_on_call",
            lambda m: m.pipe(select_menus.placeholder, "Pick someone"),
        ))
        .build()
    )
"""

from typing import Iterable

from slack_sdk.models.blocks import Block

from modules.block_kit.actions import ActionsBlockBuilder
from modules.block_kit.builder import BlockBuilder
from modules.block_kit.context import ContextBlockBuilder
from modules.block_kit.elements import (
    ActionElementBuilder,
    ConfirmationDialogBuilder,
    InputElementBuilder,
)
from modules.block_kit.exceptions import (
    BlockKitError,
    InvalidArgumentError,
    StructuralLimitExceededError,
    TooManyFocusedElementsError,
)
from modules.block_kit.inputs import InputBlockBuilder
from modules.block_kit.option_groups import OptionGroupBuilder
from modules.block_kit.rich_text import (
    RichTextBuilder,
    RichTextListBuilder,
    RichTextSectionElementBuilder,
)
from modules.block_kit.section import SectionBuilder


def create() -> BlockBuilder:
    return BlockBuilder.create()


def from_blocks(blocks: Iterable[Block]) -> BlockBuilder:
    return BlockBuilder.from_blocks(blocks)


__all__ = [
    "create",
    "from_blocks",
    # Builders
    "BlockBuilder",
    "ActionsBlockBuilder",
    "ContextBlockBuilder",
    "SectionBuilder",
    "RichTextBuilder",
    "RichTextListBuilder",
    "RichTextSectionElementBuilder",
    "InputBlockBuilder",
    "ActionElementBuilder",
    "InputElementBuilder",
    "ConfirmationDialogBuilder",
    "OptionGroupBuilder",
    # Exceptions
    "BlockKitError",
    "InvalidArgumentError",
    "StructuralLimitExceededError",
    "TooManyFocusedElementsError",
]
