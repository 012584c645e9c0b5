#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/html.py
"""HTML to document model converter.

The conversion runs in three stages:

1. tokenize the markup with BeautifulSoup into a minimal node tree
   (:mod:`html2draft.parsers.dom`)
2. walk the tree into parsed blocks of styled text
   (:mod:`html2draft.parsers.block_generator`)
3. normalize whitespace, compress metadata into ranges and assemble the
   document (:mod:`html2draft.parsers.assembler`)

"""

from __future__ import annotations

import logging

from html2draft.constants import DEPS_HTML, DEPS_HTML_PARSER_BACKENDS
from html2draft.model.nodes import Document
from html2draft.options.html import HtmlOptions
from html2draft.parsers.assembler import assemble_document
from html2draft.parsers.base import BaseParser, ParserInput
from html2draft.parsers.block_generator import BlockGenerator
from html2draft.parsers.dom import ElementNode, parse_html, strips_pre_newline
from html2draft.parsers.entities import EntityRegistry
from html2draft.parsers.policy import TagPolicy
from html2draft.utils.decorators import check_dependencies, debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class HtmlToDraftParser(BaseParser):
    """Convert HTML to the rich-text document model.

    The tag policy is built once per parser; every call to :meth:`parse`
    starts a fresh entity registry, so entity keys restart at 0 and nothing
    is shared between documents.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options

    Examples
    --------
        >>> parser = HtmlToDraftParser()
        >>> document = parser.parse("<p>Hello <strong>world</strong></p>")
        >>> document.blocks[0].text
        'Hello world'

    """

    def __init__(self, options: HtmlOptions | None = None):
        """Initialize the parser and merge the tag policy."""
        BaseParser._validate_options_type(options, HtmlOptions, "html")
        options = options or HtmlOptions()
        super().__init__(options)
        self.options: HtmlOptions = options
        self.policy = TagPolicy.from_options(options)

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: ParserInput) -> Document:
        """Parse HTML into a document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markup content, a file path, or a stream

        Returns
        -------
        Document
            Converted document with at least one block

        Raises
        ------
        DependencyError
            If BeautifulSoup or the selected backend is not installed
        InputFileError
            If a path cannot be read
        ParsingError
            If the backend fails on the input

        """
        check_dependencies("html", DEPS_HTML_PARSER_BACKENDS[self.options.html_parser])
        html_content = self._load_text_content(input_data)
        with debug_timer(logger, "HTML conversion"):
            root = parse_html(html_content, self.options.html_parser)
            return self.convert_tree(root, trim_pre_newline=not strips_pre_newline(self.options.html_parser))

    def convert_tree(self, root: ElementNode, trim_pre_newline: bool = True) -> Document:
        """Convert an already tokenized node tree.

        Parameters
        ----------
        root : ElementNode
            Root element; it is treated like ``body``
        trim_pre_newline : bool, default True
            Drop one leading newline of each ``pre`` block; False when the
            tokenizer that built ``root`` already did

        Returns
        -------
        Document
            Converted document

        """
        registry = EntityRegistry()
        parsed_blocks = BlockGenerator(self.policy, registry).generate(root)
        document = assemble_document(parsed_blocks, registry.entity_map, trim_pre_newline)
        logger.debug("Assembled %d blocks with %d entities", len(document.blocks), len(document.entity_map))
        return document
