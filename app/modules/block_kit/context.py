"""Builder for context blocks."""

from typing import List, Optional, Union

from slack_sdk.models.blocks import (
    BlockElement,
    ContextBlock,
    ImageElement,
    MarkdownTextObject,
    PlainTextObject,
    TextObject,
)
from slack_sdk.models.blocks.basic_components import SlackFile

from modules.block_kit.guards import check_block_id, check_count, require


class ContextBlockBuilder:
    """Builds a ``ContextBlock`` of up to 10 text and image elements.

    Example:
        block = (
            ContextBlockBuilder.create()
            .add_markdown("*Last updated* by <@U123>")
            .add_image_from_url("https://example.com/avatar.png", "avatar")
            .build()
        )
    """

    MAX_ELEMENTS = 10

    def __init__(self):
        self._block_id: Optional[str] = None
        self._elements: List[Union[BlockElement, TextObject]] = []

    @classmethod
    def create(cls) -> "ContextBlockBuilder":
        return cls()

    def block_id(self, block_id: Optional[str]) -> "ContextBlockBuilder":
        self._block_id = block_id
        return self

    def add_text(self, text: str, emoji: bool = True) -> "ContextBlockBuilder":
        self._elements.append(PlainTextObject(text=require(text, "text"), emoji=emoji))
        return self

    def add_markdown(self, text: str, verbatim: bool = False) -> "ContextBlockBuilder":
        self._elements.append(
            MarkdownTextObject(text=require(text, "text"), verbatim=verbatim)
        )
        return self

    def add_image_from_url(self, image_url: str, alt_text: str) -> "ContextBlockBuilder":
        self._elements.append(
            ImageElement(
                image_url=require(image_url, "image_url"),
                alt_text=require(alt_text, "alt_text"),
            )
        )
        return self

    def add_image_from_slack_file(
        self, slack_file: Union[SlackFile, str], alt_text: str
    ) -> "ContextBlockBuilder":
        """Add an image hosted on Slack.

        Args:
            slack_file: A ``SlackFile`` or a Slack file URL.
            alt_text: Plain-text summary of the image.
        """
        require(slack_file, "slack_file")
        if isinstance(slack_file, str):
            slack_file = SlackFile(url=slack_file)
        self._elements.append(
            ImageElement(slack_file=slack_file, alt_text=require(alt_text, "alt_text"))
        )
        return self

    def build(self) -> ContextBlock:
        """Check structural limits and return the block.

        Raises:
            StructuralLimitExceededError: If the block id exceeds 255
                characters or more than 10 elements were added.
        """
        check_block_id(self._block_id, "Context")
        check_count(len(self._elements), self.MAX_ELEMENTS, "Context", "elements")
        return ContextBlock(block_id=self._block_id, elements=list(self._elements))
