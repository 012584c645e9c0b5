#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/whitespace.py
"""Whitespace collapsing that keeps per-character metadata aligned.

Block text arrives with the whitespace of the source markup. Outside
preformatted blocks it is collapsed the way a browser renders it, while
explicit line breaks survive as the soft-break placeholder until
:func:`restore_soft_breaks` turns them into newlines.
"""

from __future__ import annotations

from html2draft.constants import SOFT_BREAK_PLACEHOLDER
from html2draft.model.nodes import CharacterMeta
from html2draft.utils.fragments import TextFragment, replace_text_with_meta

_FORMATTING_WHITESPACE = str.maketrans({"\t": " ", "\n": " "})


def _trim_spaces(text: str, character_meta: list[CharacterMeta]) -> tuple[str, list[CharacterMeta]]:
    start = len(text) - len(text.lstrip(" "))
    end = len(text.rstrip(" "))
    if end <= start:
        return "", []
    return text[start:end], character_meta[start:end]


def _collapse_space_runs(text: str, character_meta: list[CharacterMeta]) -> tuple[str, list[CharacterMeta]]:
    # Keeps the first space of each run along with its metadata
    kept_chars: list[str] = []
    kept_meta: list[CharacterMeta] = []
    previous = ""
    for char, meta in zip(text, character_meta):
        if char == " " and previous == " ":
            continue
        kept_chars.append(char)
        kept_meta.append(meta)
        previous = char
    return "".join(kept_chars), kept_meta


def collapse_whitespace(fragment: TextFragment) -> TextFragment:
    """Collapse formatting whitespace in a block's text.

    Steps, in order:

    1. map tabs and newlines to spaces
    2. strip leading spaces
    3. strip trailing spaces
    4. collapse runs of spaces to a single space
    5. drop one space directly after, then directly before, each soft break

    Soft-break placeholders are left in place. Non-breaking spaces are not
    whitespace here and are never removed. The operation is idempotent.

    Parameters
    ----------
    fragment : TextFragment
        Raw block text and metadata

    Returns
    -------
    TextFragment
        Collapsed text and metadata, still aligned

    """
    text = fragment.text.translate(_FORMATTING_WHITESPACE)
    text, character_meta = _trim_spaces(text, fragment.character_meta)
    text, character_meta = _collapse_space_runs(text, character_meta)

    result = TextFragment(text, character_meta)
    result = replace_text_with_meta(result, SOFT_BREAK_PLACEHOLDER + " ", SOFT_BREAK_PLACEHOLDER)
    result = replace_text_with_meta(result, " " + SOFT_BREAK_PLACEHOLDER, SOFT_BREAK_PLACEHOLDER)
    return result


def trim_leading_newline(fragment: TextFragment) -> TextFragment:
    """Remove a single newline at the very start of a preformatted block."""
    if fragment.text.startswith("\n"):
        return TextFragment(fragment.text[1:], fragment.character_meta[1:])
    return fragment


def restore_soft_breaks(fragment: TextFragment) -> TextFragment:
    """Turn soft-break placeholders into real newlines.

    The placeholder and the newline are both one character, so the metadata
    is reused as is.
    """
    if SOFT_BREAK_PLACEHOLDER not in fragment.text:
        return fragment
    return TextFragment(fragment.text.replace(SOFT_BREAK_PLACEHOLDER, "\n"), fragment.character_meta)
