#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/block_generator.py
"""Tree walk that turns a markup node tree into blocks of styled text.

Each block-level element opens a :class:`ParsedBlock`; text found below it,
through any depth of inline elements, is appended to that block together
with the styles and entity in effect. The style/entity context is an
immutable :class:`CharacterMeta` handed down the recursion, so leaving an
element restores the outer context without any bookkeeping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from html2draft.constants import ATOMIC_PLACEHOLDER, LINE_BREAKS_PATTERN, SOFT_BREAK_PLACEHOLDER
from html2draft.model.nodes import EMPTY_META, CharacterMeta
from html2draft.parsers.dom import ElementNode, Node, NodeType, TextNode
from html2draft.parsers.entities import EntityRegistry
from html2draft.parsers.policy import TagPolicy
from html2draft.utils.fragments import TextFragment, concat_fragments, repeat

logger = logging.getLogger(__name__)

LINE_BREAK_TAG = "br"


@dataclass
class ParsedBlock:
    """A block under construction.

    Parameters
    ----------
    tag_name : str
        Tag of the element that opened the block
    block_type : str
        Resolved block type
    depth : int
        List nesting depth (0 for anything but list items)
    text_fragments : list of TextFragment
        Text appended so far, in document order

    """

    tag_name: str
    block_type: str
    depth: int = 0
    text_fragments: list[TextFragment] = field(default_factory=list)

    def append_text(self, text: str, meta: CharacterMeta) -> None:
        if text:
            self.text_fragments.append(TextFragment(text, repeat(meta, len(text))))

    def to_fragment(self) -> TextFragment:
        """Concatenate the fragments into the raw block text and metadata."""
        return concat_fragments(self.text_fragments)


class BlockGenerator:
    """Depth-first walker producing one :class:`ParsedBlock` per rendered block element.

    Parameters
    ----------
    policy : TagPolicy
        Tag classification tables
    registry : EntityRegistry
        Receives every entity created during the walk

    """

    def __init__(self, policy: TagPolicy, registry: EntityRegistry) -> None:
        self.policy = policy
        self.registry = registry
        self._blocks: list[ParsedBlock] = []

    def generate(self, root: ElementNode) -> list[ParsedBlock]:
        """Walk ``root`` and return rendered blocks in the order they open."""
        self._blocks = []
        self._process_block_element(root, parent=None, depth=0)
        logger.debug("Generated %d blocks and %d entities", len(self._blocks), len(self.registry))
        return self._blocks

    def _process_node(self, node: Node, block: ParsedBlock, meta: CharacterMeta, depth: int) -> None:
        if node.node_type is NodeType.TEXT:
            self._process_text_node(node, block, meta)  # type: ignore[arg-type]
        elif self.policy.is_inline(node.tag_name):  # type: ignore[union-attr]
            self._process_inline_element(node, block, meta, depth)  # type: ignore[arg-type]
        else:
            self._process_block_element(node, block, depth)  # type: ignore[arg-type]

    def _process_block_element(self, element: ElementNode, parent: Optional[ParsedBlock], depth: int) -> None:
        tag_name = element.tag_name
        block_type = self.policy.block_type_for(tag_name, parent.tag_name if parent is not None else None)
        has_depth = self.policy.has_depth(block_type)
        block = ParsedBlock(tag_name=tag_name, block_type=block_type, depth=depth if has_depth else 0)

        child_depth = depth
        # Containers still collect text, but their block is never emitted
        if not self.policy.is_container(tag_name):
            self._blocks.append(block)
            if has_depth:
                child_depth = depth + 1

        for child in element.children:
            self._process_node(child, block, EMPTY_META, child_depth)

    def _process_inline_element(
        self, element: ElementNode, block: ParsedBlock, meta: CharacterMeta, depth: int
    ) -> None:
        tag_name = element.tag_name
        if tag_name == LINE_BREAK_TAG:
            block.append_text(SOFT_BREAK_PLACEHOLDER, meta)
            return

        style = self.policy.style_for(tag_name)
        if style:
            meta = meta.with_style(style)

        factory = self.policy.entity_factory_for(tag_name)
        if factory is not None:
            entity = factory(element, self.registry)
            # Without an entity the inherited one stays in effect
            if entity is not None:
                meta = meta.with_entity(entity)

        for child in element.children:
            self._process_node(child, block, meta, depth)

        # Fallback content of an atomic element comes before its placeholder
        if self.policy.is_atomic(tag_name):
            block.append_text(ATOMIC_PLACEHOLDER, meta)

    @staticmethod
    def _process_text_node(node: TextNode, block: ParsedBlock, meta: CharacterMeta) -> None:
        # Source carriage returns must not be mistaken for soft breaks
        block.append_text(LINE_BREAKS_PATTERN.sub("\n", node.value), meta)
