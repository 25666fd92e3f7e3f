"""Unit tests for modules.block_kit.actions."""

import pytest
from slack_sdk.models.blocks import (
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
    OverflowMenuElement,
    RadioButtonsElement,
    StaticMultiSelectElement,
    StaticSelectElement,
    TimePickerElement,
    UserMultiSelectElement,
    UserSelectElement,
)

from modules.block_kit import ActionsBlockBuilder
from modules.block_kit.elements import ActionElementBuilder, InputElementBuilder
from modules.block_kit.exceptions import (
    InvalidArgumentError,
    StructuralLimitExceededError,
)
from modules.block_kit.extensions import overflow_menus


def _with_buttons(count: int) -> ActionsBlockBuilder:
    builder = ActionsBlockBuilder.create()
    for i in range(count):
        builder.add_button(f"button_{i}", f"Button {i}")
    return builder


@pytest.mark.unit
class TestActionsBlockLimits:
    """Test suite for actions block structural limits."""

    def test_twenty_five_elements_build(self):
        """25 elements is the maximum allowed."""
        block = _with_buttons(25).build()

        assert len(block.elements) == 25

    def test_twenty_six_elements_raise(self):
        """The 26th element fails the build."""
        with pytest.raises(StructuralLimitExceededError) as exc_info:
            _with_buttons(26).build()

        assert exc_info.value.limit_name == "elements"
        assert exc_info.value.limit == 25

    def test_block_id_of_255_characters_builds(self):
        """A 255-character block id is allowed."""
        block = _with_buttons(1).block_id("a" * 255).build()

        assert block.block_id == "a" * 255

    def test_block_id_of_256_characters_raises(self):
        """A 256-character block id fails the build."""
        with pytest.raises(StructuralLimitExceededError) as exc_info:
            _with_buttons(1).block_id("a" * 256).build()

        assert exc_info.value.limit_name == "block_id"
        assert exc_info.value.limit == 255

    def test_block_id_checked_before_element_count(self):
        """The block id violation is reported first."""
        with pytest.raises(StructuralLimitExceededError) as exc_info:
            _with_buttons(26).block_id("a" * 256).build()

        assert exc_info.value.limit_name == "block_id"


@pytest.mark.unit
class TestAddElement:
    """Test suite for adding elements."""

    def test_input_capable_element_gets_input_builder(self):
        """Input-capable elements are configured through InputElementBuilder."""
        captured = []

        ActionsBlockBuilder.create().add_element(
            DatePickerElement, "when", captured.append
        )

        assert isinstance(captured[0], InputElementBuilder)

    def test_action_only_element_gets_action_builder(self):
        """Buttons are configured through a plain ActionElementBuilder."""
        captured = []

        ActionsBlockBuilder.create().add_element(
            ButtonElement, "go", captured.append, text="Go"
        )

        assert isinstance(captured[0], ActionElementBuilder)
        assert not isinstance(captured[0], InputElementBuilder)

    def test_add_prebuilt_element(self):
        """An element instance is appended and given the action id."""
        button = ButtonElement(text="Go")

        block = ActionsBlockBuilder.create().add_element(button, "go").build()

        assert block.elements[0] is button
        assert button.action_id == "go"

    def test_add_none_element_raises(self):
        """add_element rejects None."""
        with pytest.raises(InvalidArgumentError):
            ActionsBlockBuilder.create().add_element(None)

    def test_elements_keep_insertion_order(self):
        """Elements appear in the order they were added."""
        block = (
            ActionsBlockBuilder.create()
            .add_button("first", "First")
            .add_static_select_menu("second")
            .add_button("third", "Third")
            .build()
        )

        assert [e.action_id for e in block.elements] == ["first", "second", "third"]


@pytest.mark.unit
class TestAddButton:
    """Test suite for add_button."""

    def test_button_fields(self):
        """add_button sets text, style, url and value."""
        block = (
            ActionsBlockBuilder.create()
            .add_button(
                "docs",
                "Docs",
                style="primary",
                url="https://example.com",
                value="v1",
            )
            .build()
        )

        button = block.elements[0]
        assert button.text.text == "Docs"
        assert button.style == "primary"
        assert button.url == "https://example.com"
        assert button.value == "v1"

    def test_button_default_style(self):
        """Without a style the button uses the default appearance."""
        button = ActionsBlockBuilder.create().add_button("go", "Go").build().elements[0]

        assert button.style is None

    def test_button_unknown_style_raises(self):
        """Unknown styles are rejected."""
        with pytest.raises(InvalidArgumentError):
            ActionsBlockBuilder.create().add_button("go", "Go", style="purple")

    def test_button_configurator_runs_last(self):
        """The configurator can override the convenience arguments."""
        button = (
            ActionsBlockBuilder.create()
            .add_button("go", "Go", lambda b: b.action_id("renamed"), value="1")
            .build()
            .elements[0]
        )

        assert button.action_id == "renamed"
        assert button.value == "1"


@pytest.mark.unit
class TestConvenienceAdders:
    """Test suite for the typed element adders."""

    @pytest.mark.parametrize(
        "method, element_type",
        [
            ("add_checkbox_group", CheckboxesElement),
            ("add_date_picker", DatePickerElement),
            ("add_time_picker", TimePickerElement),
            ("add_date_time_picker", DateTimePickerElement),
            ("add_overflow_menu", OverflowMenuElement),
            ("add_radio_button_group", RadioButtonsElement),
            ("add_static_select_menu", StaticSelectElement),
            ("add_external_select_menu", ExternalDataSelectElement),
            ("add_user_select_menu", UserSelectElement),
            ("add_conversation_select_menu", ConversationSelectElement),
            ("add_channel_select_menu", ChannelSelectElement),
            ("add_multi_static_select_menu", StaticMultiSelectElement),
            ("add_multi_external_select_menu", ExternalDataMultiSelectElement),
            ("add_multi_user_select_menu", UserMultiSelectElement),
            ("add_multi_conversation_select_menu", ConversationMultiSelectElement),
            ("add_multi_channel_select_menu", ChannelMultiSelectElement),
        ],
    )
    def test_adder_creates_element_type(self, method, element_type):
        """Each adder appends an element of its kind with the action id."""
        builder = ActionsBlockBuilder.create()

        getattr(builder, method)("element")
        element = builder.build().elements[0]

        assert type(element) is element_type
        assert element.action_id == "element"

    def test_overflow_menu_options(self):
        """Overflow menus start empty and take options from extensions."""
        menu = (
            ActionsBlockBuilder.create()
            .add_overflow_menu(
                "more",
                lambda m: m.pipe(overflow_menus.add_option, "edit", "Edit").pipe(
                    overflow_menus.add_option,
                    "docs",
                    "Docs",
                    url="https://example.com/docs",
                ),
            )
            .build()
            .elements[0]
        )

        assert [o.value for o in menu.options] == ["edit", "docs"]
        assert menu.options[1].url == "https://example.com/docs"
