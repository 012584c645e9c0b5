#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/__init__.py
"""Markup parsers producing the html2draft document model."""

from html2draft.parsers.base import BaseParser
from html2draft.parsers.html import HtmlToDraftParser

__all__ = ["BaseParser", "HtmlToDraftParser"]
