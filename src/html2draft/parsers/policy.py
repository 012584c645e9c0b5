#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/policy.py
"""Tag classification policy.

The built-in tag tables in :mod:`html2draft.constants` are merged once with
the overrides from :class:`~html2draft.options.HtmlOptions`; the block
generator then asks the resulting :class:`TagPolicy` how to treat each tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from html2draft.constants import (
    ATOMIC_ELEMENTS,
    DEFAULT_TAG_TO_BLOCK_TYPE,
    DEFAULT_TAG_TO_STYLE,
    DEPTH_BLOCK_TYPES,
    INLINE_ELEMENTS,
    LIST_CONTAINER_ORDERED,
    LIST_ITEM_TAG,
    SPECIAL_ELEMENTS,
    BlockType,
)
from html2draft.options.html import HtmlOptions
from html2draft.parsers.entities import DEFAULT_ENTITY_FACTORIES, EntityFactory, make_attribute_copy_factory


@dataclass(frozen=True)
class TagPolicy:
    """Merged tag tables used during one or more conversions.

    Build instances with :meth:`from_options`; the policy holds no per-call
    state and can be shared.
    """

    block_types: Mapping[str, str]
    block_type_overrides: Mapping[str, str]
    styles: Mapping[str, str]
    entity_factories: Mapping[str, EntityFactory]
    inline_tags: frozenset[str]
    atomic_tags: frozenset[str]
    container_tags: frozenset[str]

    @classmethod
    def from_options(cls, options: Optional[HtmlOptions] = None) -> TagPolicy:
        """Merge the built-in tables with the overrides in ``options``."""
        options = options or HtmlOptions()

        entity_factories: dict[str, EntityFactory] = dict(DEFAULT_ENTITY_FACTORIES)
        for tag_name, entity_type in options.tag_to_entity_type.items():
            entity_factories[tag_name] = make_attribute_copy_factory(entity_type)

        styles = {**DEFAULT_TAG_TO_STYLE, **options.tag_to_style}
        atomic_tags = ATOMIC_ELEMENTS | options.extra_atomic_tags
        # Atomic, styled and entity tags are always walked inline
        inline_tags = (
            INLINE_ELEMENTS
            | atomic_tags
            | options.extra_inline_tags
            | frozenset(options.tag_to_entity_type)
            | frozenset(options.tag_to_style)
        )

        return cls(
            block_types=MappingProxyType(dict(DEFAULT_TAG_TO_BLOCK_TYPE)),
            block_type_overrides=MappingProxyType(dict(options.tag_to_block_type)),
            styles=MappingProxyType(styles),
            entity_factories=MappingProxyType(entity_factories),
            inline_tags=inline_tags,
            atomic_tags=atomic_tags,
            container_tags=SPECIAL_ELEMENTS,
        )

    def block_type_for(self, tag_name: str, parent_tag: Optional[str] = None) -> str:
        """Return the block type of ``tag_name``.

        ``parent_tag`` is the tag of the nearest enclosing block element and
        decides whether a list item is ordered.
        """
        override = self.block_type_overrides.get(tag_name)
        if override:
            return override
        if tag_name == LIST_ITEM_TAG:
            if parent_tag == LIST_CONTAINER_ORDERED:
                return BlockType.ORDERED_LIST_ITEM
            return BlockType.UNORDERED_LIST_ITEM
        return self.block_types.get(tag_name, BlockType.UNSTYLED)

    def style_for(self, tag_name: str) -> Optional[str]:
        return self.styles.get(tag_name)

    def entity_factory_for(self, tag_name: str) -> Optional[EntityFactory]:
        return self.entity_factories.get(tag_name)

    def is_inline(self, tag_name: str) -> bool:
        return tag_name in self.inline_tags

    def is_atomic(self, tag_name: str) -> bool:
        return tag_name in self.atomic_tags

    def is_container(self, tag_name: str) -> bool:
        """Whether a block-level ``tag_name`` only provides nesting context."""
        return tag_name in self.container_tags

    @staticmethod
    def has_depth(block_type: str) -> bool:
        return block_type in DEPTH_BLOCK_TYPES
