#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/parsers/base.py
"""Base class for document parsers.

A parser turns some input (markup text, bytes, a file or a stream) into a
:class:`~html2draft.model.Document`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from html2draft.exceptions import InputFileError, InvalidOptionsError
from html2draft.model.nodes import Document
from html2draft.options.base import BaseParserOptions
from html2draft.utils.encoding import decode_markup, read_markup_stream

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input into a document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            - str: markup content (never interpreted as a path)
            - Path: file to read
            - bytes: encoded markup
            - file-like object in text or binary mode

        Returns
        -------
        Document
            The converted document

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markup text from any supported input type.

        Raises
        ------
        InputFileError
            If a path cannot be read
        TypeError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return decode_markup(input_data)
        if isinstance(input_data, Path):
            try:
                data = input_data.read_bytes()
            except OSError as e:
                raise InputFileError(str(input_data), original_error=e) from e
            logger.debug("Read %d bytes from %s", len(data), input_data)
            return decode_markup(data)
        if hasattr(input_data, "read"):
            return read_markup_stream(input_data)
        raise TypeError(f"Unsupported input type: {type(input_data).__name__}")
