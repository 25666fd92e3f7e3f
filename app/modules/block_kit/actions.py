"""Builder for actions blocks."""

from typing import Any, Callable, List, Optional

from slack_sdk.models.blocks import (
    ActionsBlock,
    ButtonElement,
    ChannelMultiSelectElement,
    ChannelSelectElement,
    CheckboxesElement,
    ConversationMultiSelectElement,
    ConversationSelectElement,
    DatePickerElement,
    DateTimePickerElement,
    ExternalDataMultiSelectElement,
    ExternalDataSelectElement,
    InteractiveElement,
    OverflowMenuElement,
    RadioButtonsElement,
    StaticMultiSelectElement,
    StaticSelectElement,
    TimePickerElement,
    UserMultiSelectElement,
    UserSelectElement,
)

from modules.block_kit.elements import ActionElementBuilder, builder_for, instantiate
from modules.block_kit.extensions import buttons
from modules.block_kit.guards import check_block_id, check_count

ElementConfigurator = Optional[Callable[[ActionElementBuilder], Any]]


class ActionsBlockBuilder:
    """Builds an ``ActionsBlock`` holding up to 25 interactive elements.

    Example:
        block = (
            ActionsBlockBuilder.create()
            .block_id("approval")
            .add_button("approve", "Approve", style="primary")
            .add_button("reject", "Reject", style="danger")
            .build()
        )
    """

    MAX_ELEMENTS = 25

    def __init__(self):
        self._block_id: Optional[str] = None
        self._elements: List[InteractiveElement] = []

    @classmethod
    def create(cls) -> "ActionsBlockBuilder":
        return cls()

    def block_id(self, block_id: Optional[str]) -> "ActionsBlockBuilder":
        self._block_id = block_id
        return self

    def add_element(
        self,
        element: Any,
        action_id: Optional[str] = None,
        configure: ElementConfigurator = None,
        **fields,
    ) -> "ActionsBlockBuilder":
        """Append an interactive element.

        Args:
            element: Element class to instantiate with ``fields``, or an
                already-constructed element.
            action_id: Action id assigned to the element.
            configure: Optional configurator receiving the element builder.
                Input-capable elements get an ``InputElementBuilder``.
            **fields: Constructor arguments for the element class.

        Raises:
            InvalidArgumentError: If element is None.
        """
        instance = instantiate(element, action_id=action_id, **fields)
        element_builder = builder_for(instance)
        if configure is not None:
            configure(element_builder)
        self._elements.append(instance)
        return self

    def add_button(
        self,
        action_id: Optional[str],
        text: str,
        configure: ElementConfigurator = None,
        *,
        style: Optional[str] = None,
        url: Optional[str] = None,
        value: Optional[str] = None,
    ) -> "ActionsBlockBuilder":
        def _configure(builder):
            builder.pipe(buttons.text, text).pipe(buttons.style, style)
            builder.pipe(buttons.url, url).pipe(buttons.value, value)
            if configure is not None:
                configure(builder)

        return self.add_element(ButtonElement, action_id, _configure, text=text)

    def add_checkbox_group(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(CheckboxesElement, action_id, configure)

    def add_date_picker(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(DatePickerElement, action_id, configure)

    def add_time_picker(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(TimePickerElement, action_id, configure)

    def add_date_time_picker(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(DateTimePickerElement, action_id, configure)

    def add_overflow_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(OverflowMenuElement, action_id, configure, options=[])

    def add_radio_button_group(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(RadioButtonsElement, action_id, configure)

    def add_static_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(StaticSelectElement, action_id, configure)

    def add_external_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ExternalDataSelectElement, action_id, configure)

    def add_user_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(UserSelectElement, action_id, configure)

    def add_conversation_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ConversationSelectElement, action_id, configure)

    def add_channel_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ChannelSelectElement, action_id, configure)

    def add_multi_static_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(StaticMultiSelectElement, action_id, configure)

    def add_multi_external_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ExternalDataMultiSelectElement, action_id, configure)

    def add_multi_user_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(UserMultiSelectElement, action_id, configure)

    def add_multi_conversation_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ConversationMultiSelectElement, action_id, configure)

    def add_multi_channel_select_menu(
        self, action_id: Optional[str], configure: ElementConfigurator = None
    ) -> "ActionsBlockBuilder":
        return self.add_element(ChannelMultiSelectElement, action_id, configure)

    def build(self) -> ActionsBlock:
        """Check structural limits and return the block.

        Raises:
            StructuralLimitExceededError: If the block id exceeds 255
                characters or more than 25 elements were added.
        """
        check_block_id(self._block_id, "Actions")
        check_count(len(self._elements), self.MAX_ELEMENTS, "Actions", "elements")
        return ActionsBlock(block_id=self._block_id, elements=list(self._elements))
