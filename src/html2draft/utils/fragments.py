#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/fragments.py
"""Helpers for text paired with per-character metadata.

A :class:`TextFragment` is a string and a list of :class:`CharacterMeta` of
the same length. Every helper here edits both halves in the same step, so a
fragment that goes in aligned comes out aligned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from html2draft.model.nodes import CharacterMeta

T = TypeVar("T")


@dataclass(frozen=True)
class TextFragment:
    """Text together with one metadata entry per character."""

    text: str = ""
    character_meta: list[CharacterMeta] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.text) != len(self.character_meta):
            raise ValueError(
                f"Text/metadata length mismatch: {len(self.text)} characters, "
                f"{len(self.character_meta)} metadata entries"
            )

    def __len__(self) -> int:
        return len(self.text)


def repeat(item: T, length: int) -> list[T]:
    """Return a list holding ``item`` ``length`` times (the same object each time)."""
    return [item] * length


def concat_fragments(fragments: Iterable[TextFragment]) -> TextFragment:
    """Concatenate fragments in order into a single fragment."""
    text_parts: list[str] = []
    character_meta: list[CharacterMeta] = []
    for fragment in fragments:
        text_parts.append(fragment.text)
        character_meta.extend(fragment.character_meta)
    return TextFragment("".join(text_parts), character_meta)


def replace_text_with_meta(subject: TextFragment, search_text: str, replace_text: str) -> TextFragment:
    """Replace every occurrence of ``search_text``, carrying metadata along.

    Each inserted character takes the metadata of the first character of the
    occurrence it replaces. Occurrences are found left to right without
    overlapping, like :meth:`str.replace`.

    Parameters
    ----------
    subject : TextFragment
        Fragment to search
    search_text : str
        Non-empty substring to replace
    replace_text : str
        Replacement, may be empty

    Returns
    -------
    TextFragment
        New fragment; ``subject`` is returned unchanged when nothing matches

    """
    if not search_text:
        raise ValueError("search_text must not be empty")

    text, character_meta = subject.text, subject.character_meta
    index = text.find(search_text)
    if index == -1:
        return subject

    text_parts: list[str] = []
    result_meta: list[CharacterMeta] = []
    last_end = 0
    while index != -1:
        text_parts.append(text[last_end:index])
        text_parts.append(replace_text)
        result_meta.extend(character_meta[last_end:index])
        result_meta.extend(repeat(character_meta[index], len(replace_text)))
        last_end = index + len(search_text)
        index = text.find(search_text, last_end)
    text_parts.append(text[last_end:])
    result_meta.extend(character_meta[last_end:])
    return TextFragment("".join(text_parts), result_meta)
