"""Overflow menu extensions."""

from typing import Optional

from modules.block_kit.elements import ActionElementBuilder
from modules.block_kit.extensions.options import append_option
from modules.block_kit.option_groups import make_option


def add_option(
    builder: ActionElementBuilder,
    value: str,
    text: str,
    description: Optional[str] = None,
    url: Optional[str] = None,
) -> ActionElementBuilder:
    """Append an option; ``url`` makes the option open a link when chosen."""
    option = make_option(value, text, description, url)
    return builder.set(lambda e: append_option(e, option))
