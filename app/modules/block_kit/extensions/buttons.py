"""Button element extensions."""

from typing import Optional

from slack_sdk.models.blocks import ButtonStyles, PlainTextObject

from modules.block_kit.elements import ActionElementBuilder
from modules.block_kit.exceptions import InvalidArgumentError
from modules.block_kit.guards import require

DEFAULT_STYLE = "default"


def text(builder: ActionElementBuilder, text: str, emoji: bool = True) -> ActionElementBuilder:
    label = PlainTextObject(text=require(text, "text"), emoji=emoji)
    return builder.set(lambda b: setattr(b, "text", label))


def url(builder: ActionElementBuilder, url: Optional[str]) -> ActionElementBuilder:
    return builder.set(lambda b: setattr(b, "url", url))


def value(builder: ActionElementBuilder, value: Optional[str]) -> ActionElementBuilder:
    return builder.set(lambda b: setattr(b, "value", value))


def style(builder: ActionElementBuilder, style: Optional[str]) -> ActionElementBuilder:
    """Set the button style.

    Args:
        builder: Button builder
        style: ``"primary"``, ``"danger"``, or ``"default"``/None for the
            default appearance.

    Raises:
        InvalidArgumentError: For any other style name.
    """
    if style == DEFAULT_STYLE:
        style = None
    if style is not None and style not in ButtonStyles:
        raise InvalidArgumentError(f"Unknown button style: {style}", argument="style")
    return builder.set(lambda b: setattr(b, "style", style))


def accessibility_label(builder: ActionElementBuilder, label: Optional[str]) -> ActionElementBuilder:
    return builder.set(lambda b: setattr(b, "accessibility_label", label))
