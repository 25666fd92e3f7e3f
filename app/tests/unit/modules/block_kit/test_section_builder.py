"""Unit tests for modules.block_kit.section."""

import pytest
from slack_sdk.models.blocks import (
    ButtonElement,
    ImageElement,
    StaticSelectElement,
)

from modules.block_kit import SectionBuilder
from modules.block_kit.exceptions import StructuralLimitExceededError
from modules.block_kit.extensions import buttons, select_menus


@pytest.mark.unit
class TestSectionText:
    """Test suite for the section's main text."""

    def test_plain_text(self):
        """text sets a plain text object."""
        block = SectionBuilder.create().text("Hi").build()

        assert block.text.type == "plain_text"
        assert block.text.text == "Hi"

    def test_markdown_text(self):
        """markdown sets a markdown text object."""
        block = SectionBuilder.create().markdown("*Hi*", verbatim=True).build()

        assert block.text.type == "mrkdwn"
        assert block.text.verbatim is True

    def test_last_text_call_wins(self):
        """A later text call replaces the earlier one."""
        block = SectionBuilder.create().markdown("first").text("second").build()

        assert block.text.text == "second"
        assert block.text.type == "plain_text"

    def test_expand(self):
        """expand is passed through to the block."""
        assert SectionBuilder.create().text("x").expand().build().expand is True


@pytest.mark.unit
class TestSectionFields:
    """Test suite for section fields."""

    def test_fields_from_strings_are_markdown(self):
        """Plain strings passed to fields become markdown."""
        block = SectionBuilder.create().fields("*a*", "*b*").build()

        assert [f.type for f in block.fields] == ["mrkdwn", "mrkdwn"]
        assert [f.text for f in block.fields] == ["*a*", "*b*"]

    def test_fields_replaces_existing(self):
        """fields replaces previously added fields."""
        block = (
            SectionBuilder.create()
            .add_text_field("old")
            .fields("new")
            .add_markdown_field("appended")
            .build()
        )

        assert [f.text for f in block.fields] == ["new", "appended"]

    def test_ten_fields_build(self):
        """Ten fields is the maximum allowed."""
        block = SectionBuilder.create().fields(*[f"f{i}" for i in range(10)]).build()

        assert len(block.fields) == 10

    def test_eleven_fields_raise(self):
        """The 11th field fails the build."""
        builder = SectionBuilder.create().fields(*[f"f{i}" for i in range(11)])

        with pytest.raises(StructuralLimitExceededError) as exc_info:
            builder.build()

        assert exc_info.value.limit_name == "fields"
        assert exc_info.value.limit == 10

    def test_field_of_2000_characters_builds(self):
        """A 2000-character field is allowed."""
        block = SectionBuilder.create().add_text_field("x" * 2000).build()

        assert len(block.fields[0].text) == 2000

    def test_field_of_2001_characters_raises(self):
        """A 2001-character field fails the build."""
        builder = (
            SectionBuilder.create()
            .add_markdown_field("short")
            .add_markdown_field("x" * 2001)
        )

        with pytest.raises(StructuralLimitExceededError) as exc_info:
            builder.build()

        assert exc_info.value.limit_name == "field_length"
        assert exc_info.value.limit == 2000

    def test_field_count_checked_before_field_length(self):
        """Too many fields is reported before an overlong field."""
        builder = SectionBuilder.create().fields(*(["x" * 2001] * 11))

        with pytest.raises(StructuralLimitExceededError) as exc_info:
            builder.build()

        assert exc_info.value.limit_name == "fields"

    def test_block_id_checked_first(self):
        """The block id violation is reported before field violations."""
        builder = (
            SectionBuilder.create()
            .block_id("s" * 256)
            .fields(*[f"f{i}" for i in range(11)])
        )

        with pytest.raises(StructuralLimitExceededError) as exc_info:
            builder.build()

        assert exc_info.value.limit_name == "block_id"


@pytest.mark.unit
class TestSectionAccessory:
    """Test suite for section accessories."""

    def test_accessory_from_class_with_configurator(self):
        """A class accessory is instantiated and configured."""
        block = (
            SectionBuilder.create()
            .text("Pick one")
            .accessory(
                StaticSelectElement,
                lambda m: m.pipe(select_menus.add_option, "a", "A"),
                action_id="pick",
            )
            .build()
        )

        assert isinstance(block.accessory, StaticSelectElement)
        assert block.accessory.action_id == "pick"
        assert [o.value for o in block.accessory.options] == ["a"]

    def test_accessory_image(self):
        """Images are valid accessories."""
        block = (
            SectionBuilder.create()
            .text("Logo")
            .accessory(ImageElement, image_url="https://example.com/l.png", alt_text="logo")
            .build()
        )

        assert block.accessory.alt_text == "logo"

    def test_last_accessory_wins(self):
        """A later accessory replaces the earlier one."""
        block = (
            SectionBuilder.create()
            .text("x")
            .accessory(ButtonElement, text="First", action_id="first")
            .accessory(
                ButtonElement,
                lambda b: b.pipe(buttons.style, "danger"),
                text="Second",
                action_id="second",
            )
            .build()
        )

        assert block.accessory.action_id == "second"
        assert block.accessory.style == "danger"
