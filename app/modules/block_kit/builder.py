"""Root builder for an ordered Block Kit layout.

The root builder owns a sequence of ``slack_sdk`` blocks. Blocks are added
through kind-specific helpers (which run the container builders' structural
checks) or appended as-is; existing layouts can be loaded, edited and
rebuilt.

Usage:
    from modules.block_kit import BlockBuilder

    blocks = (
        BlockBuilder.create()
        .add_header("Deploy finished")
        .add_section(lambda s: s.markdown("*api* is live"))
        .add_divider()
        .add_actions(lambda a: a.add_button("rollback", "Roll back", style="danger"))
        .build()
    )
    client.chat_postMessage(channel=channel, blocks=blocks)
"""

import copy
from typing import Any, Callable, Iterable, List, Optional, Type, TypeVar, Union

from slack_sdk.models.blocks import (
    ActionsBlock,
    Block,
    CallBlock,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    InputInteractiveElement,
    InteractiveElement,
    PlainTextObject,
    VideoBlock,
)
from slack_sdk.models.blocks.basic_components import SlackFile

from infrastructure.logging import get_module_logger
from modules.block_kit.actions import ActionsBlockBuilder
from modules.block_kit.context import ContextBlockBuilder
from modules.block_kit.elements import instantiate
from modules.block_kit.exceptions import (
    InvalidArgumentError,
    TooManyFocusedElementsError,
)
from modules.block_kit.guards import require, require_text
from modules.block_kit.inputs import InputBlockBuilder
from modules.block_kit.rich_text import RichTextBuilder
from modules.block_kit.section import SectionBuilder

logger = get_module_logger()

BlockT = TypeVar("BlockT", bound=Block)
BlockPredicate = Callable[[Block], bool]
ElementPredicate = Callable[[InteractiveElement], bool]


class BlockBuilder:
    """Fluent builder for a list of Block Kit blocks.

    Use ``create()`` for an empty layout or ``from_blocks()`` to edit an
    existing one. ``build()`` returns a new list each time.
    """

    MAX_FOCUSED_ELEMENTS = 1

    def __init__(self, blocks: Optional[List[Block]] = None):
        self._blocks: List[Block] = blocks if blocks is not None else []

    @classmethod
    def create(cls) -> "BlockBuilder":
        return cls()

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block]) -> "BlockBuilder":
        """Start from an existing layout.

        The blocks are deep-copied, so edits made through the builder never
        reach the caller's objects.

        Raises:
            InvalidArgumentError: If blocks is None.
        """
        seeded = copy.deepcopy(list(require(blocks, "blocks")))
        logger.debug("block_builder_seeded", block_count=len(seeded))
        return cls(seeded)

    # Generic appends

    def add_block(self, block: Block) -> "BlockBuilder":
        self._blocks.append(require(block, "block"))
        return self

    def add_blocks(self, blocks: Iterable[Block]) -> "BlockBuilder":
        """Append blocks in order.

        Raises:
            InvalidArgumentError: If blocks is None.
        """
        self._blocks.extend(require(blocks, "blocks"))
        return self

    def add(
        self,
        block_type: Type[BlockT],
        configure: Optional[Callable[[BlockT], Any]] = None,
        **fields,
    ) -> "BlockBuilder":
        """Instantiate ``block_type`` with ``fields``, configure and append it.

        No structural checks are applied.
        """
        block = require(block_type, "block_type")(**fields)
        if configure is not None:
            configure(block)
        self._blocks.append(block)
        return self

    # Container blocks

    def add_actions(self, configure: Callable[[ActionsBlockBuilder], Any]) -> "BlockBuilder":
        builder = ActionsBlockBuilder.create()
        require(configure, "configure")(builder)
        return self.add_block(builder.build())

    def add_context(self, configure: Callable[[ContextBlockBuilder], Any]) -> "BlockBuilder":
        builder = ContextBlockBuilder.create()
        require(configure, "configure")(builder)
        return self.add_block(builder.build())

    def add_section(
        self, content: Union[str, Callable[[SectionBuilder], Any]]
    ) -> "BlockBuilder":
        """Add a section from markdown text or a configurator."""
        require(content, "content")
        builder = SectionBuilder.create()
        if isinstance(content, str):
            builder.markdown(content)
        else:
            content(builder)
        return self.add_block(builder.build())

    def add_plain_text_section(self, text: str, emoji: bool = True) -> "BlockBuilder":
        return self.add_block(SectionBuilder.create().text(text, emoji).build())

    def add_rich_text(self, configure: Callable[[RichTextBuilder], Any]) -> "BlockBuilder":
        builder = RichTextBuilder.create()
        require(configure, "configure")(builder)
        return self.add_block(builder.build())

    def add_input(
        self,
        element: Any,
        label: str,
        configure: Optional[Callable[[InputBlockBuilder], Any]] = None,
        **fields,
    ) -> "BlockBuilder":
        """Add an input block around an input-capable element.

        Args:
            element: Element class to instantiate with ``fields``, or an
                already-constructed element.
            label: Plain-text label.
            configure: Optional configurator receiving the InputBlockBuilder.
            **fields: Constructor arguments for the element class.

        Raises:
            InvalidArgumentError: If the element cannot be used in an input block.
        """
        instance = instantiate(element, **fields)
        if not isinstance(instance, InputInteractiveElement):
            raise InvalidArgumentError(
                f"{type(instance).__name__} cannot be used in an input block",
                argument="element",
            )
        builder = InputBlockBuilder(instance, label)
        if configure is not None:
            configure(builder)
        return self.add_block(builder.block)

    # Simple blocks

    def add_divider(self, block_id: Optional[str] = None) -> "BlockBuilder":
        return self.add(DividerBlock, block_id=block_id)

    def add_header(
        self, text: str, block_id: Optional[str] = None, emoji: bool = True
    ) -> "BlockBuilder":
        return self.add(
            HeaderBlock,
            text=PlainTextObject(text=require(text, "text"), emoji=emoji),
            block_id=block_id,
        )

    def add_image_from_url(
        self,
        image_url: str,
        alt_text: str,
        title: Optional[str] = None,
        block_id: Optional[str] = None,
    ) -> "BlockBuilder":
        return self.add(
            ImageBlock,
            image_url=require(image_url, "image_url"),
            alt_text=require(alt_text, "alt_text"),
            title=title,
            block_id=block_id,
        )

    def add_image_from_slack_file(
        self,
        slack_file: Union[SlackFile, str],
        alt_text: str,
        title: Optional[str] = None,
        block_id: Optional[str] = None,
    ) -> "BlockBuilder":
        """Add an image hosted on Slack, given a ``SlackFile`` or file URL."""
        require(slack_file, "slack_file")
        if isinstance(slack_file, str):
            slack_file = SlackFile(url=slack_file)
        return self.add(
            ImageBlock,
            slack_file=slack_file,
            alt_text=require(alt_text, "alt_text"),
            title=title,
            block_id=block_id,
        )

    def add_file(self, external_id: str, block_id: Optional[str] = None) -> "BlockBuilder":
        """Add a remote file block."""
        return self.add(
            FileBlock,
            external_id=require(external_id, "external_id"),
            source="remote",
            block_id=block_id,
        )

    def add_call(self, call_id: str, block_id: Optional[str] = None) -> "BlockBuilder":
        return self.add(CallBlock, call_id=require(call_id, "call_id"), block_id=block_id)

    def add_video(
        self,
        video_url: str,
        thumbnail_url: str,
        title: str,
        alt_text: str,
        configure: Optional[Callable[[VideoBlock], Any]] = None,
        block_id: Optional[str] = None,
    ) -> "BlockBuilder":
        """Add an embedded video.

        Optional fields (description, provider, author, title URL) are set
        through ``configure`` on the ``VideoBlock`` itself.
        """
        return self.add(
            VideoBlock,
            configure,
            video_url=require(video_url, "video_url"),
            thumbnail_url=require(thumbnail_url, "thumbnail_url"),
            title=PlainTextObject(text=require(title, "title")),
            alt_text=require(alt_text, "alt_text"),
            block_id=block_id,
        )

    # Editing

    def remove_where(self, predicate: BlockPredicate) -> int:
        """Remove every block matching ``predicate``.

        Returns:
            Number of blocks removed. Remaining blocks keep their order.
        """
        require(predicate, "predicate")
        kept = [b for b in self._blocks if not predicate(b)]
        removed = len(self._blocks) - len(kept)
        self._blocks[:] = kept
        if removed:
            logger.debug("blocks_removed", removed_count=removed)
        return removed

    def remove(self, block_id: str) -> bool:
        """Remove blocks with ``block_id``; True if any were removed.

        Raises:
            InvalidArgumentError: If block_id is None or empty.
        """
        require_text(block_id, "block_id")
        return self.remove_where(lambda b: b.block_id == block_id) > 0

    def remove_action_where(self, predicate: ElementPredicate) -> bool:
        """Remove the first matching element of the first actions block.

        Later actions blocks are never searched, and an actions block left
        empty stays in the layout.

        Returns:
            True if an element was removed.
        """
        require(predicate, "predicate")
        actions = next((b for b in self._blocks if isinstance(b, ActionsBlock)), None)
        if actions is None:
            return False
        for index, element in enumerate(actions.elements):
            if predicate(element):
                # delete by index; slack_sdk equality serializes both sides
                del actions.elements[index]
                logger.debug("action_removed", block_id=actions.block_id)
                return True
        return False

    def remove_action(self, action_id: str) -> bool:
        """Remove the element with ``action_id`` from the first actions block.

        Raises:
            InvalidArgumentError: If action_id is None or empty.
        """
        require_text(action_id, "action_id")
        return self.remove_action_where(
            lambda e: getattr(e, "action_id", None) == action_id
        )

    def without(self, block: Union[str, BlockPredicate]) -> "BlockBuilder":
        """Chaining form of ``remove`` and ``remove_where``."""
        if callable(block):
            self.remove_where(block)
        else:
            self.remove(block)
        return self

    def without_action(self, action: Union[str, ElementPredicate]) -> "BlockBuilder":
        """Chaining form of ``remove_action`` and ``remove_action_where``."""
        if callable(action):
            self.remove_action_where(action)
        else:
            self.remove_action(action)
        return self

    def modify(
        self, predicate: BlockPredicate, modifier: Callable[[Block], Any]
    ) -> "BlockBuilder":
        """Apply ``modifier`` in place to every block matching ``predicate``."""
        require(predicate, "predicate")
        require(modifier, "modifier")
        for block in self._blocks:
            if predicate(block):
                modifier(block)
        return self

    # Output

    def _focused_elements(self) -> int:
        count = 0
        for block in self._blocks:
            if isinstance(block, InputBlock):
                elements = [block.element]
            elif isinstance(block, ActionsBlock):
                elements = block.elements or []
            else:
                continue
            count += sum(
                1 for e in elements if getattr(e, "focus_on_load", None) is True
            )
        return count

    def build(self) -> List[Block]:
        """Return the layout as a new list.

        Only the list is new. The block objects are shared with the builder,
        so later edits such as ``remove_action`` also show up in lists
        returned by earlier calls. Unlike ``from_blocks``, nothing is
        deep-copied; copy the result if it must stay fixed.

        Raises:
            TooManyFocusedElementsError: If more than one element has
                ``focus_on_load`` set.
        """
        focused = self._focused_elements()
        if focused > self.MAX_FOCUSED_ELEMENTS:
            raise TooManyFocusedElementsError(
                f"Only one element can be focused on load, found {focused}",
                count=focused,
            )
        logger.debug("blocks_built", block_count=len(self._blocks))
        return list(self._blocks)
