#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/model/__init__.py
"""Rich-text document model.

- nodes: the model classes (blocks, ranges, entities, per-character metadata)
- serialization: conversion of documents to dicts and JSON

Examples
--------
    >>> from html2draft import convert
    >>> from html2draft.model import document_to_dict
    >>> document_to_dict(convert("<p>Hello <b>world</b></p>"))["blocks"][0]["type"]
    'unstyled'

"""

from html2draft.model.nodes import (
    EMPTY_META,
    Block,
    CharacterMeta,
    Document,
    Entity,
    EntityNode,
    EntityRange,
    Mutability,
    StyleNode,
    StyleRange,
)
from html2draft.model.serialization import document_to_dict, document_to_json, document_to_raw_dict

__all__ = [
    "EMPTY_META",
    "Block",
    "CharacterMeta",
    "Document",
    "Entity",
    "EntityNode",
    "EntityRange",
    "Mutability",
    "StyleNode",
    "StyleRange",
    "document_to_dict",
    "document_to_json",
    "document_to_raw_dict",
]
