"""Checkbox group extensions."""

from typing import Callable, Optional

from slack_sdk.models.blocks import Option

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.extensions.options import (
    append_option,
    options_with_values,
    select_options,
)
from modules.block_kit.option_groups import make_option
from modules.block_kit.guards import require


def add_option(
    builder: InputElementBuilder,
    value: str,
    text: str,
    description: Optional[str] = None,
) -> InputElementBuilder:
    option = make_option(value, text, description)
    return builder.set(lambda e: append_option(e, option))


def initial_options(builder: InputElementBuilder, *values: str) -> InputElementBuilder:
    """Pre-select the already-added options whose values are in ``values``."""
    return builder.set(
        lambda e: setattr(e, "initial_options", options_with_values(e, values))
    )


def select_initial_options(
    builder: InputElementBuilder, selector: Callable[[Option], bool]
) -> InputElementBuilder:
    require(selector, "selector")
    return builder.set(
        lambda e: setattr(e, "initial_options", select_options(e, selector))
    )


def focus_on_load(builder: InputElementBuilder, focus: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "focus_on_load", focus))
