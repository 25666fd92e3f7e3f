"""Builder for input blocks."""

from typing import Optional

from slack_sdk.models.blocks import (
    InputBlock,
    InputInteractiveElement,
    PlainTextObject,
)

from modules.block_kit.elements import InputElementBuilder
from modules.block_kit.guards import require


class InputBlockBuilder(InputElementBuilder):
    """Configures an ``InputBlock`` and its single input element.

    Block-level setters (``block_id``, ``hint``, ``optional``,
    ``dispatch_action``) act on the block; the inherited element setters act
    on the element. The block is created up front, so there is no
    ``build()`` step.

    Args:
        element: Input-capable element held by the block.
        label: Plain-text label shown above the element.

    Raises:
        InvalidArgumentError: If element or label is None.

    Example:
        builder = InputBlockBuilder(PlainTextInputElement(), "Summary")
        builder.action_id("summary").hint("One line").optional()
        block = builder.block
    """

    def __init__(self, element: InputInteractiveElement, label: str):
        super().__init__(element)
        self._block = InputBlock(
            label=PlainTextObject(text=require(label, "label")),
            element=element,
        )

    @property
    def block(self) -> InputBlock:
        return self._block

    def block_id(self, block_id: Optional[str]) -> "InputBlockBuilder":
        self._block.block_id = block_id
        return self

    def dispatch_action(self, dispatch: bool = True) -> "InputBlockBuilder":
        self._block.dispatch_action = dispatch
        return self

    def hint(self, hint: Optional[str]) -> "InputBlockBuilder":
        self._block.hint = PlainTextObject(text=hint) if hint is not None else None
        return self

    def optional(self, optional: bool = True) -> "InputBlockBuilder":
        self._block.optional = optional
        return self
