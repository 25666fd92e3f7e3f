"""Plain text input extensions."""

from typing import Optional, Sequence

from slack_sdk.models.blocks import PlainTextObject
from slack_sdk.models.blocks.basic_components import DispatchActionConfig

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.guards import require


def placeholder(builder: InputElementBuilder, text: str) -> InputElementBuilder:
    label = PlainTextObject(text=require(text, "placeholder"))
    return builder.set(lambda e: setattr(e, "placeholder", label))


def initial_value(builder: InputElementBuilder, value: Optional[str]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_value", value))


def multiline(builder: InputElementBuilder, multiline: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "multiline", multiline))


def min_length(builder: InputElementBuilder, length: Optional[int]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "min_length", length))


def max_length(builder: InputElementBuilder, length: Optional[int]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "max_length", length))


def dispatch_action_on(builder: InputElementBuilder, triggers: Sequence[str]) -> InputElementBuilder:
    """Dispatch block actions on the given triggers.

    Triggers are ``"on_enter_pressed"`` and ``"on_character_entered"``.
    """
    config = DispatchActionConfig(trigger_actions_on=list(triggers))
    return builder.set(lambda e: setattr(e, "dispatch_action_config", config))


def focus_on_load(builder: InputElementBuilder, focus: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "focus_on_load", focus))
