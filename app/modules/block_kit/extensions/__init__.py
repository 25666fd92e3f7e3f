"""Typed element extensions.

Each module holds free functions for one element kind. Every function takes
the element builder first, mutates the element through ``builder.set`` and
returns the builder, so calls chain with ``builder.pipe``.
"""

from modules.block_kit.extensions import (
    buttons,
    checkboxes,
    date_time_pickers,
    overflow_menus,
    radio_buttons,
    select_menus,
    text_inputs,
)

__all__ = [
    "buttons",
    "checkboxes",
    "date_time_pickers",
    "overflow_menus",
    "radio_buttons",
    "select_menus",
    "text_inputs",
]
