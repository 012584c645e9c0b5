#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/encoding.py
"""Decoding of markup supplied as bytes, files or streams."""

from __future__ import annotations

import codecs
import logging
from typing import IO

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "latin-1")

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def detect_encoding(data: bytes, sample_size: int = 8192, confidence_threshold: float = 0.7) -> str | None:
    """Detect the character encoding of ``data`` with chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes handed to chardet
    confidence_threshold : float, default 0.7
        Minimum confidence required to trust the detection

    Returns
    -------
    str | None
        Detected encoding name, or None when detection is inconclusive

    """
    import chardet

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding %s (confidence %.2f)", encoding, confidence)
    if confidence < confidence_threshold:
        return None
    return encoding


def decode_markup(data: bytes, fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS) -> str:
    """Decode markup bytes to text.

    A byte order mark wins outright; otherwise chardet's guess is tried first
    and then each fallback encoding in turn. ``latin-1`` accepts any byte
    sequence, so with the default fallbacks decoding always succeeds.

    Parameters
    ----------
    data : bytes
        Encoded markup
    fallback_encodings : tuple of str
        Encodings tried, in order, when detection fails

    Returns
    -------
    str
        Decoded markup

    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding)

    candidates: list[str] = []
    detected = detect_encoding(data)
    if detected:
        candidates.append(detected)
    candidates.extend(fallback_encodings)

    for encoding in candidates:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Failed to decode markup as %s: %s", encoding, e)

    logger.warning("All encoding attempts failed, decoding markup as utf-8 with replacement characters")
    return data.decode("utf-8", errors="replace")


def read_markup_stream(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream and return its markup as text.

    Raises
    ------
    TypeError
        If ``stream.read()`` returns something other than bytes or str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return decode_markup(content)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
