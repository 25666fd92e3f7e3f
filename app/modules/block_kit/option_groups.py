"""Builder for a labelled group of select-menu options."""

from typing import Optional, Union

from slack_sdk.models.blocks import Option, OptionGroup

from modules.block_kit.guards import require


def make_option(value: str, text: str, description: Optional[str] = None, url: Optional[str] = None) -> Option:
    """Create a Block Kit option with plain text label."""
    return Option(
        value=require(value, "value"),
        text=require(text, "text"),
        description=description,
        url=url,
    )


class OptionGroupBuilder:
    """Collects options into an ``OptionGroup``.

    Example:
        group = OptionGroupBuilder("Fruit")
        group.add_option("apple", "Apple").add_option("pear", "Pear")
    """

    def __init__(self, label: Union[str, OptionGroup]):
        require(label, "label")
        if isinstance(label, OptionGroup):
            self._group = label
        else:
            self._group = OptionGroup(label=label, options=[])

    @property
    def group(self) -> OptionGroup:
        return self._group

    def add_option(
        self,
        value: Union[str, Option],
        text: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "OptionGroupBuilder":
        """Append an option, either prebuilt or from value and text."""
        if isinstance(value, Option):
            option = value
        else:
            option = make_option(value, text, description)
        self._group.options.append(option)
        return self
