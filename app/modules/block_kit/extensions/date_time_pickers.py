"""Date, time and date-time picker extensions.

Slack expects dates as ``YYYY-MM-DD``, times as ``HH:mm`` and date-times as
UNIX timestamps in seconds. The helpers accept either the wire form or the
corresponding ``datetime`` type.
"""

from datetime import date, datetime, time
from typing import Optional, Union

from slack_sdk.models.blocks import PlainTextObject

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.guards import require, require_text


def _format_date(value: Union[date, str]) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def _format_time(value: Union[time, str]) -> str:
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value


def _placeholder(text: str) -> PlainTextObject:
    return PlainTextObject(text=require_text(text, "placeholder"))


def initial_date(builder: InputElementBuilder, value: Union[date, str]) -> InputElementBuilder:
    formatted = _format_date(require(value, "initial_date"))
    return builder.set(lambda e: setattr(e, "initial_date", formatted))


def date_placeholder(builder: InputElementBuilder, text: str) -> InputElementBuilder:
    placeholder = _placeholder(text)
    return builder.set(lambda e: setattr(e, "placeholder", placeholder))


def initial_time(builder: InputElementBuilder, value: Union[time, str]) -> InputElementBuilder:
    formatted = _format_time(require(value, "initial_time"))
    return builder.set(lambda e: setattr(e, "initial_time", formatted))


def time_placeholder(builder: InputElementBuilder, text: str) -> InputElementBuilder:
    placeholder = _placeholder(text)
    return builder.set(lambda e: setattr(e, "placeholder", placeholder))


def timezone(builder: InputElementBuilder, tz: Optional[str]) -> InputElementBuilder:
    """Set the IANA timezone the time picker displays in."""
    return builder.set(lambda e: setattr(e, "timezone", tz))


def initial_date_time(
    builder: InputElementBuilder, value: Union[datetime, int]
) -> InputElementBuilder:
    """Set the initial date-time; naive datetimes are taken as local time."""
    require(value, "initial_date_time")
    timestamp = int(value.timestamp()) if isinstance(value, datetime) else int(value)
    return builder.set(lambda e: setattr(e, "initial_date_time", timestamp))


def focus_on_load(builder: InputElementBuilder, focus: bool = True) -> InputElementBuilder:
    return builder.set(lambda e: setattr(e, "focus_on_load", focus))
