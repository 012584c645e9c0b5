#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/dom.py
"""Minimal markup node tree and its BeautifulSoup adapter.

The block generator only needs to know, for each node, whether it is an
element or text; for elements the lowercased tag name, the attributes as
``(name, value)`` pairs and the ordered children; for text the raw string.
:func:`parse_html` builds that tree from a markup string with BeautifulSoup.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Union

from html2draft.constants import DEFAULT_HTML_PARSER, PRE_NEWLINE_STRIPPING_PARSERS, ROOT_TAG, SKIPPED_ELEMENTS
from html2draft.exceptions import ParsingError

logger = logging.getLogger(__name__)


class NodeType(enum.Enum):
    ELEMENT = "element"
    TEXT = "text"


@dataclass
class TextNode:
    """A run of character data."""

    value: str
    node_type: NodeType = field(default=NodeType.TEXT, init=False, repr=False)


@dataclass
class ElementNode:
    """An element with attributes and ordered children.

    Parameters
    ----------
    tag_name : str
        Lowercased tag name
    attributes : list of (str, str) tuples
        Attributes in source order
    children : list of ElementNode or TextNode
        Child nodes in source order

    """

    tag_name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[Union[ElementNode, TextNode]] = field(default_factory=list)
    node_type: NodeType = field(default=NodeType.ELEMENT, init=False, repr=False)


Node = Union[ElementNode, TextNode]


def _convert_children(parent: Any) -> list[Node]:
    from bs4.element import NavigableString, PreformattedString, Tag

    children: list[Node] = []
    for child in parent.children:
        if isinstance(child, Tag):
            tag_name = child.name.lower()
            if tag_name in SKIPPED_ELEMENTS:
                continue
            attributes = [(name.lower(), _attribute_text(value)) for name, value in child.attrs.items()]
            children.append(ElementNode(tag_name, attributes, _convert_children(child)))
        elif isinstance(child, PreformattedString):
            # Comments, doctypes, CDATA and processing instructions
            continue
        elif isinstance(child, NavigableString):
            children.append(TextNode(str(child)))
    return children


def _attribute_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


def from_soup(soup: Any) -> ElementNode:
    """Build the node tree rooted at a synthetic ``body`` element.

    When the parsed document contains a ``body`` element only its children
    are used, so ``head`` content never reaches the walk.
    """
    from bs4.element import Tag

    body = soup.find(ROOT_TAG)
    container = body if isinstance(body, Tag) else soup
    return ElementNode(ROOT_TAG, [], _convert_children(container))


def parse_html(markup: str, parser: str = DEFAULT_HTML_PARSER) -> ElementNode:
    """Tokenize ``markup`` with BeautifulSoup and return the node tree.

    Parameters
    ----------
    markup : str
        Markup text; malformed markup is repaired by the backend
    parser : str, default "html.parser"
        BeautifulSoup tree builder name

    Returns
    -------
    ElementNode
        Synthetic ``body`` root

    Raises
    ------
    ParsingError
        If the backend fails on the input

    """
    from bs4 import BeautifulSoup

    logger.debug("Tokenizing %d characters of markup with %s", len(markup), parser)
    try:
        soup = BeautifulSoup(markup, parser, multi_valued_attributes=None)
    except Exception as e:
        raise ParsingError(f"Failed to parse markup with {parser}: {e}", parser_name=parser, original_error=e) from e
    return from_soup(soup)


def strips_pre_newline(parser: str) -> bool:
    """Whether ``parser`` already removes the newline directly after ``<pre>``.

    The HTML standard drops that newline while tokenizing; html5lib applies
    the rule, ``html.parser`` and lxml leave the newline in the text.
    """
    return parser in PRE_NEWLINE_STRIPPING_PARSERS
