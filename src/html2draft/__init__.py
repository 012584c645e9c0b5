"""html2draft - convert HTML into a flat rich-text document model.

html2draft walks an HTML fragment or document and produces an ordered list
of blocks (paragraphs, headings, list items, quotes, code blocks) whose text
carries run-length encoded inline style ranges and entity ranges, plus a
document-wide map of entities such as links and images.

The conversion never fails on markup content: unknown tags degrade to plain
unstyled blocks, and malformed markup is repaired by the BeautifulSoup
backend before it is walked.

Key Features
------------
- Browser-like whitespace collapsing with ``<br>`` soft breaks
- Nested list depth and ordered/unordered list items
- Links, images, inputs and iframes as entities, plus custom entity tags
- Deterministic output: entity keys restart at 0 for every conversion
- Node-form and range-form JSON serialization

Requirements
------------
- Python 3.10+
- beautifulsoup4 (lxml and html5lib backends are optional)

Examples
--------
Basic usage:

    >>> from html2draft import convert_to_dict
    >>> convert_to_dict("<p>Hello <b>world</b></p>")["blocks"][0]["entityNodes"][0]["styleNodes"]
    [{'text': 'Hello ', 'styles': None}, {'text': 'world', 'styles': ['BOLD']}]

Custom tag policy:

    >>> from html2draft import HtmlOptions, convert
    >>> options = HtmlOptions(tag_to_entity_type={"cta": "CALL_TO_ACTION"})
    >>> convert("<p><cta data-id='1'>Go</cta></p>", options).entity_map[0].type
    'CALL_TO_ACTION'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise RuntimeError(
        "html2draft requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2draft.api import convert, convert_to_dict, convert_to_json  # noqa: E402
from html2draft.exceptions import (  # noqa: E402
    DependencyError,
    Html2DraftError,
    InputFileError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2draft.model import Block, Document, Entity, document_to_dict, document_to_json  # noqa: E402
from html2draft.options import HtmlOptions  # noqa: E402

__all__ = [
    "__version__",
    # Main conversion functions
    "convert",
    "convert_to_dict",
    "convert_to_json",
    # Document model
    "Block",
    "Document",
    "Entity",
    "document_to_dict",
    "document_to_json",
    # Options
    "HtmlOptions",
    # Exceptions
    "DependencyError",
    "Html2DraftError",
    "InputFileError",
    "InvalidOptionsError",
    "ParsingError",
    "ValidationError",
]
