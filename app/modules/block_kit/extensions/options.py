"""Option list helpers shared by checkbox, radio and select extensions."""

from typing import Any, Callable, Iterable, List, Optional

from slack_sdk.models.blocks import Option


def append_option(element: Any, option: Option) -> None:
    """Append ``option`` to ``element.options``, creating the list if needed."""
    if element.options is None:
        element.options = []
    element.options.append(option)


def all_options(element: Any) -> List[Option]:
    """Options of ``element`` in order, followed by options inside its groups."""
    options = list(element.options or [])
    for group in getattr(element, "option_groups", None) or []:
        options.extend(group.options or [])
    return options


def find_option(element: Any, value: str) -> Optional[Option]:
    """First option whose value equals ``value``, or None."""
    return next((o for o in all_options(element) if o.value == value), None)


def select_options(element: Any, selector: Callable[[Option], bool]) -> List[Option]:
    """Options accepted by ``selector``, in the element's own order."""
    return [o for o in all_options(element) if selector(o)]


def options_with_values(element: Any, values: Iterable[str]) -> List[Option]:
    wanted = set(values)
    return select_options(element, lambda o: o.value in wanted)
