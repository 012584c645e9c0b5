#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/entities.py
"""Element-to-entity rules and the per-conversion entity registry.

An entity factory receives an element and the registry of the running
conversion and returns a registered :class:`Entity`, or ``None`` when the
element lacks what the rule requires (e.g. a link without ``href``).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from html2draft.constants import DATA_ATTRIBUTE_PATTERN, ELEMENT_ATTRIBUTE_MAP, EntityType
from html2draft.model.nodes import Entity, Mutability
from html2draft.parsers.dom import ElementNode

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Entity map and key counter scoped to a single conversion.

    Keys are handed out in creation order starting at 0, so converting the
    same markup twice yields the same keys.
    """

    def __init__(self) -> None:
        self.entity_map: dict[int, Entity] = {}
        self._next_key = 0

    def create(
        self, entity_type: str, data: dict[str, Any], mutability: Mutability = Mutability.MUTABLE
    ) -> Entity:
        entity = Entity(key=self._next_key, type=entity_type, mutability=mutability, data=data)
        self._next_key += 1
        self.entity_map[entity.key] = entity
        return entity

    def __len__(self) -> int:
        return len(self.entity_map)


EntityFactory = Callable[[ElementNode, EntityRegistry], Optional[Entity]]


def get_entity_data(element: ElementNode) -> dict[str, Any]:
    """Build entity data from an element's attributes.

    Tags with a built-in attribute map keep only the mapped attributes (under
    their mapped names) and ``data-*`` attributes. Any other tag copies all
    of its attributes verbatim.
    """
    data: dict[str, Any] = {}
    attribute_map = ELEMENT_ATTRIBUTE_MAP.get(element.tag_name)
    for name, value in element.attributes:
        if value is None:
            continue
        if attribute_map is None:
            data[name] = value
        elif name in attribute_map:
            data[attribute_map[name]] = value
        elif DATA_ATTRIBUTE_PATTERN.match(name):
            data[name] = value
    return data


def make_attribute_copy_factory(entity_type: str) -> EntityFactory:
    """Return a factory that always creates an ``entity_type`` entity."""

    def factory(element: ElementNode, registry: EntityRegistry) -> Optional[Entity]:
        return registry.create(entity_type, get_entity_data(element))

    return factory


def _make_required_key_factory(entity_type: str, required_key: str) -> EntityFactory:
    def factory(element: ElementNode, registry: EntityRegistry) -> Optional[Entity]:
        data = get_entity_data(element)
        if data.get(required_key) is None:
            logger.debug("Skipping <%s> entity without %r", element.tag_name, required_key)
            return None
        return registry.create(entity_type, data)

    return factory


DEFAULT_ENTITY_FACTORIES: dict[str, EntityFactory] = {
    "a": _make_required_key_factory(EntityType.LINK, "url"),
    "img": _make_required_key_factory(EntityType.IMAGE, "src"),
    "input": make_attribute_copy_factory(EntityType.INPUT),
    "iframe": make_attribute_copy_factory(EntityType.IFRAME),
}
