#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/model/serialization.py
"""Dictionary and JSON serialization of documents.

Two output shapes are supported:

Node form (:func:`document_to_dict`)
    Each block lists ``entityNodes``, segments of text covered by at most one
    entity, each holding ``styleNodes`` leaves. Empty or default values are
    omitted to keep the output minimal::

        {
            "entityMap": {"0": {"type": "LINK", "data": {"url": "/"}}},
            "blocks": [
                {
                    "type": "unstyled",
                    "entityNodes": [
                        {"entity": None, "styleNodes": [{"text": "Hello ", "styles": None}]},
                        {"entity": "0", "styleNodes": [{"text": "world", "styles": None}]},
                    ],
                }
            ],
        }

Range form (:func:`document_to_raw_dict`)
    Each block keeps its text with ``inlineStyleRanges`` and
    ``entityRanges``; every field is always present.

Entity keys are serialized as strings in both forms.

"""

from __future__ import annotations

import json
from typing import Any, Optional

from html2draft.model.nodes import Block, Document, Entity, EntityNode
from html2draft.utils.ranges import get_entity_nodes


def _serialize_entity(entity: Entity) -> dict[str, Any]:
    return {"type": entity.type, "data": dict(entity.data)}


def _serialize_entity_node(node: EntityNode) -> dict[str, Any]:
    return {
        "entity": node.entity,
        "styleNodes": [
            {"text": style_node.text, "styles": list(style_node.styles) if style_node.styles else None}
            for style_node in node.style_nodes
        ],
    }


def block_to_dict(block: Block) -> dict[str, Any]:
    """Serialize a block in node form.

    ``depth`` is present only when non-zero and ``data`` only when non-empty.
    """
    result: dict[str, Any] = {"type": block.type}
    if block.depth != 0:
        result["depth"] = block.depth
    if block.data:
        result["data"] = dict(block.data)
    entity_nodes = get_entity_nodes(block.text, block.entity_ranges, block.inline_style_ranges)
    result["entityNodes"] = [_serialize_entity_node(node) for node in entity_nodes]
    return result


def document_to_dict(document: Document) -> dict[str, Any]:
    """Serialize a document in node form.

    Parameters
    ----------
    document : Document
        Converted document

    Returns
    -------
    dict
        ``{"entityMap": ..., "blocks": [...]}``; ``entityMap`` is omitted when
        the document has no entities

    """
    result: dict[str, Any] = {}
    if document.entity_map:
        result["entityMap"] = {str(key): _serialize_entity(entity) for key, entity in document.entity_map.items()}
    result["blocks"] = [block_to_dict(block) for block in document.blocks]
    return result


def document_to_raw_dict(document: Document) -> dict[str, Any]:
    """Serialize a document in range form.

    Parameters
    ----------
    document : Document
        Converted document

    Returns
    -------
    dict
        ``{"entityMap": {...}, "blocks": [...]}`` with every field present

    """
    return {
        "entityMap": {
            str(key): {"type": entity.type, "mutability": entity.mutability.value, "data": dict(entity.data)}
            for key, entity in document.entity_map.items()
        },
        "blocks": [
            {
                "text": block.text,
                "type": block.type,
                "depth": block.depth,
                "inlineStyleRanges": [
                    {"offset": r.offset, "length": r.length, "style": r.style} for r in block.inline_style_ranges
                ],
                "entityRanges": [{"offset": r.offset, "length": r.length, "key": r.key} for r in block.entity_ranges],
                "data": dict(block.data),
            }
            for block in document.blocks
        ],
    }


def document_to_json(document: Document, *, raw: bool = False, indent: Optional[int] = None) -> str:
    """Serialize a document to a JSON string.

    Parameters
    ----------
    document : Document
        Converted document
    raw : bool, default False
        Emit the range form instead of the node form
    indent : int or None, default None
        Indentation passed to :func:`json.dumps`

    Returns
    -------
    str
        JSON text; non-ASCII characters are written as is

    """
    payload = document_to_raw_dict(document) if raw else document_to_dict(document)
    return json.dumps(payload, indent=indent, ensure_ascii=False)
