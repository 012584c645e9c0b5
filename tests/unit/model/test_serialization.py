#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/model/test_serialization.py
"""Unit tests for document serialization.

Tests cover:
- Node form minimal output (omitted depth, data and entityMap)
- Range form with every field present
- JSON output options
"""

import json

import pytest

from html2draft.model import (
    Block,
    Document,
    Entity,
    EntityRange,
    StyleRange,
    document_to_dict,
    document_to_json,
    document_to_raw_dict,
)
from html2draft.model.serialization import block_to_dict


@pytest.fixture
def linked_document() -> Document:
    entity = Entity(key=0, type="LINK", data={"url": "/"})
    block = Block(
        text="Hello world",
        inline_style_ranges=(StyleRange(6, 5, "BOLD"),),
        entity_ranges=(EntityRange(6, 5, 0),),
    )
    return Document(entity_map={0: entity}, blocks=[block])


@pytest.mark.unit
class TestNodeForm:
    """Tests for document_to_dict."""

    def test_linked_document(self, linked_document) -> None:
        assert document_to_dict(linked_document) == {
            "entityMap": {"0": {"type": "LINK", "data": {"url": "/"}}},
            "blocks": [
                {
                    "type": "unstyled",
                    "entityNodes": [
                        {"entity": None, "styleNodes": [{"text": "Hello ", "styles": None}]},
                        {"entity": "0", "styleNodes": [{"text": "world", "styles": ["BOLD"]}]},
                    ],
                }
            ],
        }

    def test_entity_map_omitted_when_empty(self) -> None:
        result = document_to_dict(Document(blocks=[Block(text="")]))
        assert result == {
            "blocks": [
                {"type": "unstyled", "entityNodes": [{"entity": None, "styleNodes": [{"text": "", "styles": None}]}]}
            ]
        }

    def test_depth_and_data_only_when_set(self) -> None:
        assert "depth" not in block_to_dict(Block(text="a", type="unordered-list-item"))
        assert "data" not in block_to_dict(Block(text="a"))

        result = block_to_dict(Block(text="a", type="ordered-list-item", depth=2, data={"k": "v"}))
        assert result["depth"] == 2
        assert result["data"] == {"k": "v"}


@pytest.mark.unit
class TestRangeForm:
    """Tests for document_to_raw_dict."""

    def test_linked_document(self, linked_document) -> None:
        assert document_to_raw_dict(linked_document) == {
            "entityMap": {"0": {"type": "LINK", "mutability": "MUTABLE", "data": {"url": "/"}}},
            "blocks": [
                {
                    "text": "Hello world",
                    "type": "unstyled",
                    "depth": 0,
                    "inlineStyleRanges": [{"offset": 6, "length": 5, "style": "BOLD"}],
                    "entityRanges": [{"offset": 6, "length": 5, "key": 0}],
                    "data": {},
                }
            ],
        }

    def test_empty_entity_map_present(self) -> None:
        assert document_to_raw_dict(Document(blocks=[Block(text="")]))["entityMap"] == {}


@pytest.mark.unit
class TestJson:
    """Tests for document_to_json."""

    def test_node_form_by_default(self, linked_document) -> None:
        assert json.loads(document_to_json(linked_document)) == document_to_dict(linked_document)

    def test_raw_form(self, linked_document) -> None:
        assert json.loads(document_to_json(linked_document, raw=True)) == document_to_raw_dict(linked_document)

    def test_non_ascii_written_as_is(self) -> None:
        output = document_to_json(Document(blocks=[Block(text="café\u00a0")]))
        assert "café\u00a0" in output

    def test_indent(self, linked_document) -> None:
        assert "\n  " in document_to_json(linked_document, indent=2)
        assert "\n" not in document_to_json(linked_document)
