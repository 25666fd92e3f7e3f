"""Builders for rich text blocks.

A rich text block holds a sequence of sections, lists, preformatted runs and
quotes. Sections, preformatted runs and quotes hold inline leaves (text,
links, emoji, mentions); lists hold sections.

Example:
    block = (
        RichTextBuilder.create()
        .add_section(lambda s: s.add_text("Deploy ").add_text("done", bold=True))
        .add_text_list("bullet", lambda l: (
            l.add_section(lambda s: s.add_text("api"))
            .add_section(lambda s: s.add_text("worker"))
        ))
        .add_preformatted_text("make deploy")
        .build()
    )
"""

from typing import Any, Callable, List, Optional, Union

from slack_sdk.models.blocks import (
    RichTextBlock,
    RichTextElement,
    RichTextElementParts,
    RichTextListElement,
    RichTextPreformattedElement,
    RichTextQuoteElement,
    RichTextSectionElement,
)

from modules.block_kit.exceptions import InvalidArgumentError
from modules.block_kit.guards import check_block_id, require

LIST_STYLES = ("bullet", "ordered")


def _style(
    bold: bool = False,
    italic: bool = False,
    strike: bool = False,
    code: bool = False,
) -> Optional[RichTextElementParts.TextStyle]:
    if not (bold or italic or strike or code):
        return None
    return RichTextElementParts.TextStyle(
        bold=bold or None,
        italic=italic or None,
        strike=strike or None,
        code=code or None,
    )


class RichTextSectionElementBuilder:
    """Collects inline leaves for a section, preformatted run or quote."""

    def __init__(self):
        self._elements: List[RichTextElement] = []

    @property
    def elements(self) -> List[RichTextElement]:
        return list(self._elements)

    def add(self, element: RichTextElement) -> "RichTextSectionElementBuilder":
        self._elements.append(require(element, "element"))
        return self

    def add_text(
        self,
        text: str,
        bold: bool = False,
        italic: bool = False,
        strike: bool = False,
        code: bool = False,
    ) -> "RichTextSectionElementBuilder":
        return self.add(
            RichTextElementParts.Text(
                text=require(text, "text"),
                style=_style(bold, italic, strike, code),
            )
        )

    def add_link(self, url: str, text: Optional[str] = None) -> "RichTextSectionElementBuilder":
        return self.add(RichTextElementParts.Link(url=require(url, "url"), text=text))

    def add_emoji(self, name: str, skin_tone: Optional[int] = None) -> "RichTextSectionElementBuilder":
        return self.add(
            RichTextElementParts.Emoji(name=require(name, "name"), skin_tone=skin_tone)
        )

    def add_user(self, user_id: str) -> "RichTextSectionElementBuilder":
        return self.add(RichTextElementParts.User(user_id=require(user_id, "user_id")))

    def add_channel(self, channel_id: str) -> "RichTextSectionElementBuilder":
        return self.add(
            RichTextElementParts.Channel(channel_id=require(channel_id, "channel_id"))
        )

    def build(self) -> RichTextSectionElement:
        return RichTextSectionElement(elements=self.elements)


SectionConfigurator = Callable[[RichTextSectionElementBuilder], Any]


def _section(configure: SectionConfigurator) -> RichTextSectionElementBuilder:
    builder = RichTextSectionElementBuilder()
    require(configure, "configure")(builder)
    return builder


class RichTextListBuilder:
    """Collects the sections of a bulleted or ordered list."""

    def __init__(self, style: str):
        self._style = style
        self._sections: List[RichTextSectionElement] = []
        self._indent: Optional[int] = None
        self._offset: Optional[int] = None
        self._border: Optional[int] = None

    def add_section(self, configure: SectionConfigurator) -> "RichTextListBuilder":
        self._sections.append(_section(configure).build())
        return self

    def indent(self, indent: Optional[int]) -> "RichTextListBuilder":
        self._indent = indent
        return self

    def offset(self, offset: Optional[int]) -> "RichTextListBuilder":
        """Number the first item of an ordered list ``offset + 1``."""
        self._offset = offset
        return self

    def border(self, border: Optional[int]) -> "RichTextListBuilder":
        self._border = border
        return self

    def build(self) -> RichTextListElement:
        return RichTextListElement(
            elements=list(self._sections),
            style=self._style,
            indent=self._indent,
            offset=self._offset,
            border=self._border,
        )


class RichTextBuilder:
    """Builds a ``RichTextBlock``."""

    def __init__(self):
        self._block_id: Optional[str] = None
        self._elements: List[RichTextElement] = []

    @classmethod
    def create(cls) -> "RichTextBuilder":
        return cls()

    def block_id(self, block_id: Optional[str]) -> "RichTextBuilder":
        self._block_id = block_id
        return self

    def add_section(self, configure: SectionConfigurator) -> "RichTextBuilder":
        self._elements.append(_section(configure).build())
        return self

    def add_text_list(
        self, style: str, configure: Callable[[RichTextListBuilder], Any]
    ) -> "RichTextBuilder":
        """Add a list.

        Args:
            style: ``"bullet"`` or ``"ordered"``.
            configure: Configurator receiving a ``RichTextListBuilder``.
        """
        if style not in LIST_STYLES:
            raise InvalidArgumentError(f"Unknown list style: {style}", argument="style")
        require(configure, "configure")
        list_builder = RichTextListBuilder(style)
        configure(list_builder)
        self._elements.append(list_builder.build())
        return self

    def add_preformatted_text(
        self,
        content: Union[str, SectionConfigurator],
        border: Optional[int] = None,
    ) -> "RichTextBuilder":
        """Add a code block from a string or from configured leaves."""
        require(content, "content")
        if isinstance(content, str):
            elements = [RichTextElementParts.Text(text=content)]
        else:
            elements = _section(content).elements
        self._elements.append(RichTextPreformattedElement(elements=elements, border=border))
        return self

    def add_quote(
        self, configure: SectionConfigurator, border: Optional[int] = None
    ) -> "RichTextBuilder":
        """Add a quote built from configured leaves.

        Args:
            configure: Configurator receiving a ``RichTextSectionElementBuilder``.
            border: Stored as ``quote.border`` for callers that read the
                object. slack_sdk does not serialize it, so it is absent from
                ``to_dict()`` and from the payload sent to Slack.
        """
        quote = RichTextQuoteElement(elements=_section(configure).elements)
        if border is not None:
            # not a constructor argument of RichTextQuoteElement
            quote.border = border
        self._elements.append(quote)
        return self

    def build(self) -> RichTextBlock:
        """Check the block id and return the block.

        Raises:
            StructuralLimitExceededError: If the block id exceeds 255 characters.
        """
        check_block_id(self._block_id, "Rich text")
        return RichTextBlock(block_id=self._block_id, elements=list(self._elements))
