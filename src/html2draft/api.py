"""The major exported API functions for HTML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/html2draft/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from html2draft.exceptions import Html2DraftError, ParsingError
from html2draft.model.nodes import Document
from html2draft.model.serialization import document_to_dict, document_to_json, document_to_raw_dict
from html2draft.options.html import HtmlOptions
from html2draft.parsers.html import HtmlToDraftParser

logger = logging.getLogger(__name__)

MarkupSource = Union[str, Path, IO[bytes], IO[str], bytes]


def _prepare_options(options: Optional[HtmlOptions], **kwargs: Any) -> Optional[HtmlOptions]:
    """Merge keyword arguments into the given options.

    Keyword arguments override fields of ``options``; with no ``options`` they
    create a fresh :class:`HtmlOptions`. Options of the wrong type are passed
    through unchanged so the parser can report them.
    """
    if not kwargs:
        return options
    if options is None:
        return HtmlOptions(**kwargs)
    if isinstance(options, HtmlOptions):
        return options.create_updated(**kwargs)
    return options


def convert(markup: MarkupSource, options: Optional[HtmlOptions] = None, **kwargs: Any) -> Document:
    """Convert HTML into the rich-text document model.

    Parameters
    ----------
    markup : str, Path, IO, or bytes
        HTML to convert. A ``str`` is always treated as markup, never as a
        file name; pass a :class:`~pathlib.Path` to read a file.
    options : HtmlOptions, optional
        Conversion options
    kwargs : Any
        Individual option fields that override settings in ``options``

    Returns
    -------
    Document
        The converted document; it always has at least one block

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`HtmlOptions`
    DependencyError
        If BeautifulSoup or the selected backend is not installed
    InputFileError
        If a path cannot be read
    ParsingError
        If conversion fails
    TypeError
        If a keyword argument does not name an option
    ValueError
        If an option value is invalid

    Examples
    --------
        >>> from html2draft import convert
        >>> document = convert("<p>Hello <a href='/'>world</a></p>")
        >>> document.entity_map[0].data
        {'url': '/'}

    Custom entities:
        >>> document = convert("<p><cta data-id='7'>Buy</cta></p>", tag_to_entity_type={"cta": "CTA"})
        >>> document.entity_map[0].type
        'CTA'

    """
    final_options = _prepare_options(options, **kwargs)
    parser = HtmlToDraftParser(final_options)
    try:
        return parser.parse(markup)
    except Html2DraftError:
        raise
    except Exception as e:
        raise ParsingError(f"HTML conversion failed: {e!r}", original_error=e) from e


def convert_to_dict(
    markup: MarkupSource, options: Optional[HtmlOptions] = None, *, raw: bool = False, **kwargs: Any
) -> dict[str, Any]:
    """Convert HTML and serialize the document to a dictionary.

    Parameters
    ----------
    markup : str, Path, IO, or bytes
        HTML to convert
    options : HtmlOptions, optional
        Conversion options
    raw : bool, default False
        Return the range form (text with ``inlineStyleRanges`` and
        ``entityRanges``) instead of the node form
    kwargs : Any
        Individual option fields that override settings in ``options``

    Returns
    -------
    dict
        Serialized document

    """
    document = convert(markup, options, **kwargs)
    return document_to_raw_dict(document) if raw else document_to_dict(document)


def convert_to_json(
    markup: MarkupSource,
    options: Optional[HtmlOptions] = None,
    *,
    raw: bool = False,
    indent: Optional[int] = None,
    **kwargs: Any,
) -> str:
    """Convert HTML and serialize the document to JSON.

    See :func:`convert_to_dict` for the parameters; ``indent`` is passed to
    :func:`json.dumps`.
    """
    return document_to_json(convert(markup, options, **kwargs), raw=raw, indent=indent)
