"""Builder for section blocks."""

from typing import Any, Callable, List, Optional, Union

from slack_sdk.models.blocks import (
    BlockElement,
    MarkdownTextObject,
    PlainTextObject,
    SectionBlock,
    TextObject,
)

from modules.block_kit.elements import ActionElementBuilder, builder_for, instantiate
from modules.block_kit.exceptions import StructuralLimitExceededError
from modules.block_kit.guards import check_block_id, check_count, require


class SectionBuilder:
    """Builds a ``SectionBlock``.

    The main text and the accessory are single slots: a later call replaces
    the earlier value. Fields are capped at 10, each at 2000 characters.

    Example:
        block = (
            SectionBuilder.create()
            .markdown("*Incident* opened")
            .add_markdown_field("*Severity*\\nSEV2")
            .accessory(ButtonElement, action_id="ack", text="Acknowledge")
            .build()
        )
    """

    MAX_FIELDS = 10
    MAX_FIELD_LENGTH = 2000

    def __init__(self):
        self._block_id: Optional[str] = None
        self._text: Optional[TextObject] = None
        self._fields: List[TextObject] = []
        self._accessory: Optional[BlockElement] = None
        self._expand: Optional[bool] = None

    @classmethod
    def create(cls) -> "SectionBuilder":
        return cls()

    def block_id(self, block_id: Optional[str]) -> "SectionBuilder":
        self._block_id = block_id
        return self

    def text(self, text: str, emoji: bool = True) -> "SectionBuilder":
        """Set the main text as plain text."""
        self._text = PlainTextObject(text=require(text, "text"), emoji=emoji)
        return self

    def markdown(self, text: str, verbatim: bool = False) -> "SectionBuilder":
        """Set the main text as markdown."""
        self._text = MarkdownTextObject(text=require(text, "text"), verbatim=verbatim)
        return self

    def fields(self, *fields: Union[str, TextObject]) -> "SectionBuilder":
        """Replace all fields. Plain strings become markdown fields."""
        self._fields = [
            MarkdownTextObject(text=f) if isinstance(f, str) else require(f, "field")
            for f in fields
        ]
        return self

    def add_text_field(self, text: str, emoji: bool = True) -> "SectionBuilder":
        self._fields.append(PlainTextObject(text=require(text, "text"), emoji=emoji))
        return self

    def add_markdown_field(self, text: str, verbatim: bool = False) -> "SectionBuilder":
        self._fields.append(
            MarkdownTextObject(text=require(text, "text"), verbatim=verbatim)
        )
        return self

    def accessory(
        self,
        element: Any,
        configure: Optional[Callable[[ActionElementBuilder], Any]] = None,
        **fields,
    ) -> "SectionBuilder":
        """Set the accessory element.

        Args:
            element: Element class to instantiate with ``fields``, or an
                already-constructed element.
            configure: Optional configurator receiving the element builder.
            **fields: Constructor arguments for the element class.
        """
        instance = instantiate(element, **fields)
        if configure is not None:
            configure(builder_for(instance))
        self._accessory = instance
        return self

    def expand(self, expand: bool = True) -> "SectionBuilder":
        """Always show the full text instead of a "see more" link."""
        self._expand = expand
        return self

    def build(self) -> SectionBlock:
        """Check structural limits and return the block.

        Raises:
            StructuralLimitExceededError: If the block id exceeds 255
                characters, more than 10 fields were added or a field is
                longer than 2000 characters.
        """
        check_block_id(self._block_id, "Section")
        check_count(len(self._fields), self.MAX_FIELDS, "Section", "fields")
        for field in self._fields:
            if len(field.text or "") > self.MAX_FIELD_LENGTH:
                raise StructuralLimitExceededError(
                    f"Section field text cannot be longer than "
                    f"{self.MAX_FIELD_LENGTH} characters",
                    limit_name="field_length",
                    limit=self.MAX_FIELD_LENGTH,
                )
        return SectionBlock(
            block_id=self._block_id,
            text=self._text,
            fields=list(self._fields),
            accessory=self._accessory,
            expand=self._expand,
        )
