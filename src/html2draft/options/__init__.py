#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2draft parsing."""

from html2draft.options.base import BaseParserOptions, CloneFrozenMixin
from html2draft.options.html import HtmlOptions

__all__ = ["BaseParserOptions", "CloneFrozenMixin", "HtmlOptions"]
