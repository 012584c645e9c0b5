#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2draft.

This module centralizes the tag tables, reserved characters and default
configuration values used by the conversion pipeline.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Document Model Vocabulary - block types, inline styles, entity types
3. Tag Tables - element classification used by the block generator
4. Reserved Characters - placeholders used while walking the tree
5. Dependencies and Defaults
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Document Model Vocabulary
# =============================================================================


class BlockType:
    """Block type names used in the document model."""

    UNSTYLED = "unstyled"
    HEADER_ONE = "header-one"
    HEADER_TWO = "header-two"
    HEADER_THREE = "header-three"
    HEADER_FOUR = "header-four"
    HEADER_FIVE = "header-five"
    HEADER_SIX = "header-six"
    UNORDERED_LIST_ITEM = "unordered-list-item"
    ORDERED_LIST_ITEM = "ordered-list-item"
    BLOCKQUOTE = "blockquote"
    CODE = "code-block"
    ATOMIC = "atomic"


class InlineStyle:
    """Inline style names used in the document model."""

    BOLD = "BOLD"
    CODE = "CODE"
    ITALIC = "ITALIC"
    STRIKETHROUGH = "STRIKETHROUGH"
    UNDERLINE = "UNDERLINE"


class EntityType:
    """Entity type names produced by the built-in element rules."""

    LINK = "LINK"
    IMAGE = "IMAGE"
    INPUT = "INPUT"
    IFRAME = "IFRAME"


# Only list items carry a nesting depth
DEPTH_BLOCK_TYPES = frozenset({BlockType.UNORDERED_LIST_ITEM, BlockType.ORDERED_LIST_ITEM})

# =============================================================================
# Tag Tables
# =============================================================================

# Static tag -> block type table; ``li`` is resolved from its enclosing list
DEFAULT_TAG_TO_BLOCK_TYPE: dict[str, str] = {
    "blockquote": BlockType.BLOCKQUOTE,
    "h1": BlockType.HEADER_ONE,
    "h2": BlockType.HEADER_TWO,
    "h3": BlockType.HEADER_THREE,
    "h4": BlockType.HEADER_FOUR,
    "h5": BlockType.HEADER_FIVE,
    "h6": BlockType.HEADER_SIX,
    "pre": BlockType.CODE,
    "figure": BlockType.ATOMIC,
}

DEFAULT_TAG_TO_STYLE: dict[str, str] = {
    "b": InlineStyle.BOLD,
    "strong": InlineStyle.BOLD,
    "i": InlineStyle.ITALIC,
    "em": InlineStyle.ITALIC,
    "ins": InlineStyle.UNDERLINE,
    "code": InlineStyle.CODE,
    "del": InlineStyle.STRIKETHROUGH,
}

INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "area",
        "audio",
        "b",
        "bdi",
        "bdo",
        "br",
        "button",
        "canvas",
        "cite",
        "code",
        "command",
        "datalist",
        "del",
        "dfn",
        "em",
        "embed",
        "i",
        "iframe",
        "img",
        "input",
        "ins",
        "kbd",
        "keygen",
        "label",
        "map",
        "mark",
        "meter",
        "noscript",
        "object",
        "output",
        "progress",
        "q",
        "ruby",
        "s",
        "samp",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "u",
        "var",
        "video",
        "wbr",
        # Obsolete inline elements still found in the wild
        "acronym",
        "applet",
        "basefont",
        "big",
        "font",
        "isindex",
        "strike",
        "tt",
    }
)

# Elements that only provide nesting context and never render a block
SPECIAL_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "colgroup",
        "command",
        "dl",
        "embed",
        "head",
        "hgroup",
        "hr",
        "iframe",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "ol",
        "optgroup",
        "option",
        "param",
        "select",
        "source",
        "table",
        "tbody",
        "textarea",
        "tfoot",
        "thead",
        "title",
        "tr",
        "track",
        "ul",
        "wbr",
        "basefont",
        "dialog",
        "dir",
        "isindex",
    }
)

# Void elements rendered as a single placeholder character
ATOMIC_ELEMENTS = frozenset({"img", "iframe", "input"})

# Dropped together with their content by the tokenizer adapter
SKIPPED_ELEMENTS = frozenset({"script", "style", "template"})

LIST_CONTAINER_ORDERED = "ol"
LIST_ITEM_TAG = "li"
PREFORMATTED_TAG = "pre"
ROOT_TAG = "body"

# Attribute renames applied when building entity data for built-in rules
ELEMENT_ATTRIBUTE_MAP: dict[str, dict[str, str]] = {
    "a": {"href": "url", "rel": "rel", "target": "target", "title": "title"},
    "img": {"src": "src", "alt": "alt"},
    "input": {"type": "type", "value": "value", "placeholder": "placeholder"},
    "iframe": {"src": "src", "width": "width", "height": "height"},
}

DATA_ATTRIBUTE_PATTERN = re.compile(r"^data-([a-z0-9-]+)$")

# =============================================================================
# Reserved Characters
# =============================================================================

# Carriage returns never survive text-node normalization, so a bare ``\r``
# in block text can only be a soft break inserted by the walker.
SOFT_BREAK_PLACEHOLDER = "\r"
ATOMIC_PLACEHOLDER = "\u00a0"
LINE_BREAKS_PATTERN = re.compile(r"\r\n|\r|\n")

# =============================================================================
# Dependencies and Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_PARSER_BACKENDS: dict[str, list[tuple[str, str, str]]] = {
    "html.parser": [],
    "lxml": [("lxml", "lxml", "")],
    "html5lib": [("html5lib", "html5lib", "")],
}

# Backends that already drop the first newline after <pre> while tokenizing
PRE_NEWLINE_STRIPPING_PARSERS = frozenset({"html5lib"})

ENV_PREFIX = "HTML2DRAFT_"
DEFAULT_LOG_LEVEL = "WARNING"
