"""Radio button group extensions."""

from typing import Optional

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.extensions.options import append_option, find_option
from modules.block_kit.option_groups import make_option


def add_option(
    builder: InputElementBuilder,
    value: str,
    text: str,
    description: Optional[str] = None,
) -> InputElementBuilder:
    option = make_option(value, text, description)
    return builder.set(lambda e: append_option(e, option))


def initial_option(builder: InputElementBuilder, value: str) -> InputElementBuilder:
    """Pre-select the first option with ``value``; no match clears the selection."""
    return builder.set(lambda e: setattr(e, "initial_option", find_option(e, value)))


def focus_on_load(builder: InputElementBuilder, focus: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "focus_on_load", focus))
