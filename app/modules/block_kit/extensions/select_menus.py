"""Select menu extensions.

Covers the static, external, user, conversation and channel select menus in
both single and multi-select form. Helpers only touch attributes the target
element declares; calling a helper on a menu kind that lacks the attribute
sets an attribute ``slack_sdk`` will not serialize.

Example:
    actions.add_static_select_menu("fruit", lambda m: (
        m.pipe(select_menus.add_option, "apple", "Apple")
        .pipe(select_menus.add_option, "pear", "Pear")
        .pipe(select_menus.initial_option, "pear")
    ))
"""

from typing import Any, Callable, Iterable, Optional, Union

from slack_sdk.models.blocks import (
    ConversationFilter,
    Option,
    PlainTextObject,
)

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.extensions.options import (
    append_option,
    find_option,
    options_with_values,
    select_options,
)
from modules.block_kit.guards import require
from modules.block_kit.option_groups import OptionGroupBuilder, make_option


def placeholder(builder: InputElementBuilder, text: str) -> InputElementBuilder:
    label = PlainTextObject(text=require(text, "placeholder"))
    return builder.set(lambda e: setattr(e, "placeholder", label))


def focus_on_load(builder: InputElementBuilder, focus: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "focus_on_load", focus))


def max_selected_items(builder: InputElementBuilder, count: Optional[int]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "max_selected_items", count))


# Static menus


def add_option(
    builder: InputElementBuilder,
    value: str,
    text: str,
    description: Optional[str] = None,
) -> InputElementBuilder:
    option = make_option(value, text, description)
    return builder.set(lambda e: append_option(e, option))


def add_option_group(
    builder: InputElementBuilder,
    label: str,
    options: Union[Callable[[OptionGroupBuilder], Any], Iterable[Option]],
) -> InputElementBuilder:
    """Append an option group.

    Args:
        builder: Static select builder
        label: Group label
        options: Either a configurator receiving an ``OptionGroupBuilder``
            or an iterable of prebuilt options.
    """
    require(options, "options")
    group_builder = OptionGroupBuilder(label)
    if callable(options):
        options(group_builder)
    else:
        for option in options:
            group_builder.add_option(option)
    group = group_builder.group

    def _append(element):
        if element.option_groups is None:
            element.option_groups = []
        element.option_groups.append(group)

    return builder.set(_append)


def initial_option(builder: InputElementBuilder, value: str) -> InputElementBuilder:
    """Pre-select the first added option with ``value``.

    No matching option leaves ``initial_option`` as None.
    """
    return builder.set(lambda e: setattr(e, "initial_option", find_option(e, value)))


def initial_options(builder: InputElementBuilder, *values: str) -> InputElementBuilder:
    """Pre-select options by value, preserving the order options were added."""
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


# External menus


def min_query_length(builder: InputElementBuilder, length: Optional[int]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "min_query_length", length))


def initial_external_option(
    builder: InputElementBuilder, option: Optional[Option]
) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_option", option))


def initial_external_options(
    builder: InputElementBuilder, options: Iterable[Option]
) -> InputElementBuilder:
    selected = list(require(options, "options"))
    return builder.set(lambda e: setattr(e, "initial_options", selected))


# User menus


def initial_user(builder: InputElementBuilder, user_id: Optional[str]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_user", user_id))


def initial_users(builder: InputElementBuilder, *user_ids: str) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_users", list(user_ids)))


# Conversation menus


def initial_conversation(
    builder: InputElementBuilder, conversation_id: Optional[str]
) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_conversation", conversation_id))


def initial_conversations(
    builder: InputElementBuilder, *conversation_ids: str
) -> InputElementBuilder:
    return builder.set(
        lambda e: setattr(e, "initial_conversations", list(conversation_ids))
    )


def default_to_current_conversation(
    builder: InputElementBuilder, default: bool = True
) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "default_to_current_conversation", default))


def response_url_enabled(builder: InputElementBuilder, enabled: bool = True) -> InputElementBuilder:
    """Only honoured by single conversation menus in modals."""
    return builder.set(lambda e: setattr(e, "response_url_enabled", enabled))


def _filter(element) -> ConversationFilter:
    if element.filter is None:
        element.filter = ConversationFilter()
    return element.filter


def conversation_filter(
    builder: InputElementBuilder, configure: Callable[[ConversationFilter], Any]
) -> InputElementBuilder:
    """Configure the conversation filter, creating it on first use."""
    require(configure, "configure")
    return builder.set(lambda e: configure(_filter(e)))


def include(builder: InputElementBuilder, *kinds: str) -> InputElementBuilder:
    """Restrict the list to conversation kinds.

    Kinds are ``"im"``, ``"mpim"``, ``"private"`` and ``"public"``.
    """
    return conversation_filter(builder, lambda f: setattr(f, "include", list(kinds)))


def exclude_bot_users(builder: InputElementBuilder, exclude: bool = True) -> InputElementBuilder:
    return conversation_filter(builder, lambda f: setattr(f, "exclude_bot_users", exclude))


def exclude_external_shared_channels(
    builder: InputElementBuilder, exclude: bool = True
) -> InputElementBuilder:
    return conversation_filter(
        builder, lambda f: setattr(f, "exclude_external_shared_channels", exclude)
    )


# Channel menus


def initial_channel(builder: InputElementBuilder, channel_id: Optional[str]) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_channel", channel_id))


def initial_channels(builder: InputElementBuilder, *channel_ids: str) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "initial_channels", list(channel_ids)))
