#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/model/nodes.py
"""Document model classes.

The converter produces a flat rich-text model: an ordered list of blocks, each
holding plain text with run-length encoded style and entity ranges, plus a
document-wide map of entities.

Per-character view
------------------
While a block is being built every character of its text is paired with a
:class:`CharacterMeta` describing the styles and the entity that apply to it.
The text and its metadata list always have the same length. Character
metadata is immutable and shared: a run of characters with identical styling
holds the same instance.

Range view
----------
Once a block is complete the metadata list is compressed into
:class:`StyleRange` and :class:`EntityRange` runs (see
:mod:`html2draft.utils.ranges`), and the block is frozen into a
:class:`Block`.

Node view
---------
Consumers that want a tree rather than ranges expand a block into
:class:`EntityNode` segments, each holding :class:`StyleNode` leaves.

"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from html2draft.constants import BlockType


class Mutability(enum.Enum):
    """Whether the text an entity covers may be edited in place."""

    MUTABLE = "MUTABLE"
    IMMUTABLE = "IMMUTABLE"


@dataclass(eq=False)
class Entity:
    """A non-text annotation attached to a contiguous run of characters.

    Entities are compared by identity; the ``key`` is unique within one
    document and is what ranges and entity nodes refer to.

    Parameters
    ----------
    key : int
        Identifier, unique within the document
    type : str
        Entity type (e.g. ``"LINK"``)
    mutability : Mutability
        Editing mutability of the covered text
    data : dict
        Entity payload, usually derived from element attributes

    """

    key: int
    type: str
    mutability: Mutability = Mutability.MUTABLE
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CharacterMeta:
    """Styles and entity applying to one character of block text.

    Parameters
    ----------
    style : frozenset of str
        Inline style names
    entity : Entity or None
        Entity covering the character, if any

    """

    style: frozenset[str] = frozenset()
    entity: Optional[Entity] = None

    def with_style(self, style_name: str) -> CharacterMeta:
        """Return metadata that also carries ``style_name``.

        Returns ``self`` when the style is already present so unchanged
        metadata keeps being shared.
        """
        if style_name in self.style:
            return self
        return CharacterMeta(style=self.style | {style_name}, entity=self.entity)

    def with_entity(self, entity: Optional[Entity]) -> CharacterMeta:
        """Return metadata whose entity is ``entity``."""
        if entity is self.entity:
            return self
        return CharacterMeta(style=self.style, entity=entity)

    @property
    def entity_key(self) -> Optional[int]:
        return self.entity.key if self.entity is not None else None


EMPTY_META = CharacterMeta()


@dataclass(frozen=True)
class StyleRange:
    """A maximal run of characters carrying one inline style."""

    offset: int
    length: int
    style: str


@dataclass(frozen=True)
class EntityRange:
    """A maximal run of characters covered by one entity."""

    offset: int
    length: int
    key: int


@dataclass(frozen=True)
class Block:
    """One paragraph-like unit of the document.

    Parameters
    ----------
    text : str
        Plain text of the block; soft breaks appear as ``"\\n"``
    type : str
        Block type (see :class:`html2draft.constants.BlockType`)
    depth : int, default 0
        Nesting depth; only list items are ever deeper than 0
    inline_style_ranges : tuple of StyleRange
        Style runs over ``text``
    entity_ranges : tuple of EntityRange
        Entity runs over ``text``
    data : dict
        Block-level data, empty unless a caller attaches some

    """

    text: str
    type: str = BlockType.UNSTYLED
    depth: int = 0
    inline_style_ranges: tuple[StyleRange, ...] = ()
    entity_ranges: tuple[EntityRange, ...] = ()
    data: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass
class Document:
    """The converter output: entities and an ordered, non-empty list of blocks.

    Parameters
    ----------
    entity_map : dict[int, Entity]
        Entities referenced by block entity ranges, keyed by entity key
    blocks : list of Block
        Blocks in document order

    """

    entity_map: dict[int, Entity] = field(default_factory=dict)
    blocks: list[Block] = field(default_factory=list)


@dataclass(frozen=True)
class StyleNode:
    """A leaf of the expanded node view: text sharing one style set.

    ``styles`` is ``None`` when no style applies, otherwise the style names
    in sorted order.
    """

    text: str
    styles: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class EntityNode:
    """A segment of the expanded node view covered by at most one entity.

    ``entity`` is the entity key as a string, or ``None``.
    """

    entity: Optional[str]
    style_nodes: tuple[StyleNode, ...] = ()
