#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/ranges.py
"""Conversion between per-character metadata and run-length ranges.

Two directions are provided:

- :func:`get_ranges` compresses a block's per-character metadata into style
  and entity ranges.
- :func:`get_entity_nodes` expands a block's text and ranges back into a
  nested node view: entity segments holding style leaves.

Expanding the ranges produced by :func:`get_ranges` reproduces the original
per-character styles and entity keys, and compressing that again yields the
same ranges.

Examples
--------
    >>> from html2draft.model import CharacterMeta
    >>> plain, bold = CharacterMeta(), CharacterMeta(style=frozenset({"BOLD"}))
    >>> styles, entities = get_ranges([plain, bold, bold])
    >>> styles
    [StyleRange(offset=1, length=2, style='BOLD')]
    >>> [node.styles for node in get_entity_nodes("abc", entities, styles)[0].style_nodes]
    [None, ('BOLD',)]

"""

from __future__ import annotations

from typing import Optional, Sequence

from html2draft.model.nodes import CharacterMeta, EntityNode, EntityRange, StyleNode, StyleRange


def get_ranges(character_meta: Sequence[CharacterMeta]) -> tuple[list[StyleRange], list[EntityRange]]:
    """Compress per-character metadata into style and entity ranges.

    Each style is tracked independently, so ranges of different styles may
    overlap; ranges of one style never do. At most one entity applies to a
    character, so entity ranges never overlap. Entities are compared by key.

    Parameters
    ----------
    character_meta : sequence of CharacterMeta
        Metadata for each character of one block

    Returns
    -------
    tuple of (list of StyleRange, list of EntityRange)
        Maximal runs, in the order they close

    """
    style_ranges: list[StyleRange] = []
    entity_ranges: list[EntityRange] = []
    open_styles: dict[str, int] = {}
    open_entity: Optional[int] = None
    entity_start = 0

    for index, meta in enumerate(character_meta):
        for style_name in sorted(meta.style):
            if style_name not in open_styles:
                open_styles[style_name] = index
        for style_name, start in list(open_styles.items()):
            if style_name not in meta.style:
                style_ranges.append(StyleRange(offset=start, length=index - start, style=style_name))
                del open_styles[style_name]

        entity_key = meta.entity_key
        if entity_key != open_entity:
            if open_entity is not None:
                entity_ranges.append(EntityRange(offset=entity_start, length=index - entity_start, key=open_entity))
            open_entity = entity_key
            entity_start = index

    total = len(character_meta)
    for style_name, start in open_styles.items():
        style_ranges.append(StyleRange(offset=start, length=total - start, style=style_name))
    if open_entity is not None:
        entity_ranges.append(EntityRange(offset=entity_start, length=total - entity_start, key=open_entity))

    return style_ranges, entity_ranges


def _entity_at(entity_ranges: Sequence[EntityRange], index: int) -> Optional[str]:
    for entity_range in entity_ranges:
        if entity_range.offset <= index < entity_range.offset + entity_range.length:
            return str(entity_range.key)
    return None


def _styles_at(style_ranges: Sequence[StyleRange], index: int) -> tuple[str, ...]:
    return tuple(
        sorted(
            {
                style_range.style
                for style_range in style_ranges
                if style_range.offset <= index < style_range.offset + style_range.length
            }
        )
    )


def get_style_nodes(text: str, style_ranges: Sequence[StyleRange], offset: int = 0) -> list[StyleNode]:
    """Split ``text`` into leaves that each share one set of styles.

    Parameters
    ----------
    text : str
        A slice of block text
    style_ranges : sequence of StyleRange
        Style ranges of the whole block
    offset : int, default 0
        Position of ``text`` within the block

    Returns
    -------
    list of StyleNode
        At least one node; an empty ``text`` gives a single empty node

    """
    style_nodes: list[StyleNode] = []
    run_start = 0
    current: tuple[str, ...] = ()
    for i in range(len(text)):
        styles = _styles_at(style_ranges, i + offset)
        if i > 0 and styles != current:
            style_nodes.append(StyleNode(text=text[run_start:i], styles=current or None))
            run_start = i
        current = styles
    style_nodes.append(StyleNode(text=text[run_start:], styles=current or None))
    return style_nodes


def get_entity_nodes(
    text: str,
    entity_ranges: Sequence[EntityRange],
    style_ranges: Sequence[StyleRange],
) -> list[EntityNode]:
    """Expand block text and ranges into entity segments of style leaves.

    A new segment starts wherever the entity covering a character differs
    from the previous character's. Within a segment,
    :func:`get_style_nodes` splits wherever the set of styles changes.

    Parameters
    ----------
    text : str
        Block text
    entity_ranges : sequence of EntityRange
        Non-overlapping entity ranges; the first range containing a
        position wins
    style_ranges : sequence of StyleRange
        Style ranges, possibly overlapping across styles

    Returns
    -------
    list of EntityNode
        At least one node, in text order

    """
    entity_nodes: list[EntityNode] = []
    run_start = 0
    current: Optional[str] = None
    for i in range(len(text)):
        entity = _entity_at(entity_ranges, i)
        if i > 0 and entity != current:
            entity_nodes.append(
                EntityNode(
                    entity=current,
                    style_nodes=tuple(get_style_nodes(text[run_start:i], style_ranges, run_start)),
                )
            )
            run_start = i
        current = entity
    entity_nodes.append(
        EntityNode(entity=current, style_nodes=tuple(get_style_nodes(text[run_start:], style_ranges, run_start)))
    )
    return entity_nodes
