"""Builders wrapping a single interactive block element.

An element builder holds one already-instantiated ``slack_sdk`` element and
exposes a small chainable surface for mutating it. Kind-specific helpers live
in :mod:`modules.block_kit.extensions` as free functions taking the builder
first; ``pipe`` chains them:

    builder.action_id("approve").pipe(buttons.style, "primary")
"""

from typing import Any, Callable, Generic, Optional, TypeVar, Union

from slack_sdk.models.blocks import (
    ConfirmObject,
    InputInteractiveElement,
    InteractiveElement,
    MarkdownTextObject,
    PlainTextObject,
)

from modules.block_kit.guards import require

E = TypeVar("E", bound=InteractiveElement)
B = TypeVar("B", bound="ActionElementBuilder")


class ConfirmationDialogBuilder:
    """Collects the fields of a confirmation dialog.

    ``title`` and ``text`` are required; ``confirm`` and ``deny`` default to
    Slack's "Yes" and "No".
    """

    def __init__(self):
        self._title: Optional[str] = None
        self._text: Optional[Union[PlainTextObject, MarkdownTextObject]] = None
        self._confirm = "Yes"
        self._deny = "No"
        self._style: Optional[str] = None

    def title(self, title: str) -> "ConfirmationDialogBuilder":
        self._title = require(title, "title")
        return self

    def text(self, text: str) -> "ConfirmationDialogBuilder":
        self._text = PlainTextObject(text=require(text, "text"))
        return self

    def markdown(self, text: str) -> "ConfirmationDialogBuilder":
        self._text = MarkdownTextObject(text=require(text, "text"))
        return self

    def confirm(self, confirm: str) -> "ConfirmationDialogBuilder":
        self._confirm = require(confirm, "confirm")
        return self

    def deny(self, deny: str) -> "ConfirmationDialogBuilder":
        self._deny = require(deny, "deny")
        return self

    def style(self, style: Optional[str]) -> "ConfirmationDialogBuilder":
        """Set the confirm button style (``"primary"``, ``"danger"`` or None)."""
        self._style = style
        return self

    def build(self) -> ConfirmObject:
        return ConfirmObject(
            title=require(self._title, "title"),
            text=require(self._text, "text"),
            confirm=self._confirm,
            deny=self._deny,
            style=self._style,
        )


class ActionElementBuilder(Generic[E]):
    """Chainable wrapper around one interactive element.

    Args:
        element: The element to configure. Mutations are applied in place.

    Raises:
        InvalidArgumentError: If element is None.

    Example:
        builder = ActionElementBuilder(ButtonElement(text="Go"))
        builder.action_id("go").set(lambda b: setattr(b, "value", "1"))
    """

    def __init__(self, element: E):
        self._element = require(element, "element")

    @property
    def element(self) -> E:
        return self._element

    def set(self: B, modifier: Callable[[E], Any]) -> B:
        """Apply ``modifier`` to the wrapped element."""
        require(modifier, "modifier")(self._element)
        return self

    def action_id(self: B, action_id: Optional[str]) -> B:
        return self.set(lambda e: setattr(e, "action_id", action_id))

    def confirmation_dialog(
        self: B, configure: Callable[[ConfirmationDialogBuilder], Any]
    ) -> B:
        """Attach a confirmation dialog built by ``configure``."""
        require(configure, "configure")
        dialog = ConfirmationDialogBuilder()
        configure(dialog)
        confirm = dialog.build()
        return self.set(lambda e: setattr(e, "confirm", confirm))

    def pipe(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        """Call ``func(self, *args, **kwargs)`` and return its result."""
        return require(func, "func")(self, *args, **kwargs)


class InputElementBuilder(ActionElementBuilder[E]):
    """Element builder for elements usable inside an input block."""

    pass


def builder_for(element: InteractiveElement) -> ActionElementBuilder:
    """Wrap ``element`` in the most specific builder for its capabilities."""
    if isinstance(element, InputInteractiveElement):
        return InputElementBuilder(element)
    return ActionElementBuilder(element)


def instantiate(element: Any, **fields) -> InteractiveElement:
    """Return ``element`` itself, or a new instance when given a class."""
    require(element, "element")
    if isinstance(element, type):
        return element(**fields)
    for name, value in fields.items():
        if value is not None:
            setattr(element, name, value)
    return element
