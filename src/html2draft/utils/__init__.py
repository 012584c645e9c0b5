#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/__init__.py
"""Utility modules for html2draft.

This package holds the text/metadata helpers used by the conversion core
(fragments, whitespace collapsing, range compression and expansion) and the
input decoding and dependency-check helpers used around it.
"""

from html2draft.utils.fragments import TextFragment, concat_fragments, repeat, replace_text_with_meta
from html2draft.utils.ranges import get_entity_nodes, get_ranges, get_style_nodes
from html2draft.utils.whitespace import collapse_whitespace, restore_soft_breaks, trim_leading_newline

__all__ = [
    "TextFragment",
    "collapse_whitespace",
    "concat_fragments",
    "get_entity_nodes",
    "get_ranges",
    "get_style_nodes",
    "repeat",
    "replace_text_with_meta",
    "restore_soft_breaks",
    "trim_leading_newline",
]
