#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/assembler.py
"""Turn parsed blocks into the final :class:`Document`.

For every parsed block the assembler concatenates its fragments, collapses
whitespace (or only trims the leading newline of preformatted blocks),
restores soft breaks, compresses the metadata into ranges and freezes the
result into a :class:`Block`. Blocks left without text are dropped, except a
block that held nothing but a single line break.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from html2draft.constants import PREFORMATTED_TAG, SOFT_BREAK_PLACEHOLDER, BlockType
from html2draft.model.nodes import Block, Document, Entity
from html2draft.parsers.block_generator import ParsedBlock
from html2draft.utils.fragments import TextFragment
from html2draft.utils.ranges import get_ranges
from html2draft.utils.whitespace import collapse_whitespace, restore_soft_breaks, trim_leading_newline

logger = logging.getLogger(__name__)


def empty_block() -> Block:
    """The block used when a document would otherwise have none."""
    return Block(text="", type=BlockType.UNSTYLED, depth=0)


def normalize_block_text(parsed_block: ParsedBlock, trim_pre_newline: bool = True) -> tuple[TextFragment, bool]:
    """Return the normalized text of a parsed block.

    Parameters
    ----------
    parsed_block : ParsedBlock
        Block produced by the tree walk
    trim_pre_newline : bool, default True
        Drop one leading newline of a ``pre`` block; pass False when the
        tokenizer has already done so

    Returns
    -------
    tuple of (TextFragment, bool)
        The normalized fragment, and whether the block must be kept even
        though its text is empty

    """
    fragment = parsed_block.to_fragment()
    if fragment.text == SOFT_BREAK_PLACEHOLDER:
        return TextFragment(), True

    if parsed_block.tag_name == PREFORMATTED_TAG:
        if trim_pre_newline:
            fragment = trim_leading_newline(fragment)
    else:
        fragment = collapse_whitespace(fragment)
    return restore_soft_breaks(fragment), False


def assemble_block(parsed_block: ParsedBlock, trim_pre_newline: bool = True) -> Optional[Block]:
    """Build the final block, or return None if the block is dropped."""
    fragment, keep_empty = normalize_block_text(parsed_block, trim_pre_newline)
    if not fragment.text and not keep_empty:
        return None

    style_ranges, entity_ranges = get_ranges(fragment.character_meta)
    return Block(
        text=fragment.text,
        type=parsed_block.block_type,
        depth=parsed_block.depth,
        inline_style_ranges=tuple(style_ranges),
        entity_ranges=tuple(entity_ranges),
    )


def assemble_document(
    parsed_blocks: Iterable[ParsedBlock], entity_map: dict[int, Entity], trim_pre_newline: bool = True
) -> Document:
    """Assemble parsed blocks and entities into a document.

    Parameters
    ----------
    parsed_blocks : iterable of ParsedBlock
        Blocks in document order
    entity_map : dict[int, Entity]
        Entities created while walking the tree
    trim_pre_newline : bool, default True
        See :func:`normalize_block_text`

    Returns
    -------
    Document
        Never has an empty block list

    """
    blocks: list[Block] = []
    dropped = 0
    for parsed_block in parsed_blocks:
        block = assemble_block(parsed_block, trim_pre_newline)
        if block is None:
            dropped += 1
            continue
        blocks.append(block)

    if dropped:
        logger.debug("Dropped %d empty blocks", dropped)
    if not blocks:
        blocks.append(empty_block())

    return Document(entity_map=dict(entity_map), blocks=blocks)
