#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to document model conversion.

This module defines the tag policy knobs that extend or override the
built-in tag tables, plus the choice of BeautifulSoup backend.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from html2draft.constants import DEFAULT_HTML_PARSER, HTML_PARSERS, HtmlParser
from html2draft.options.base import BaseParserOptions


def _normalize_tag(tag: object, option_name: str) -> str:
    if not isinstance(tag, str) or not tag.strip():
        raise ValueError(f"{option_name} entries must be non-empty tag names, got {tag!r}")
    return tag.strip().lower()


def _normalize_tag_map(mapping: Mapping[str, str], option_name: str) -> dict[str, str]:
    if not isinstance(mapping, Mapping):
        raise ValueError(f"{option_name} must be a mapping of tag name to value, got {type(mapping).__name__}")
    result: dict[str, str] = {}
    for tag, value in mapping.items():
        if not isinstance(value, str) or not value:
            raise ValueError(f"{option_name}[{tag!r}] must be a non-empty string, got {value!r}")
        result[_normalize_tag(tag, option_name)] = value
    return result


def _normalize_tag_set(tags: Iterable[str], option_name: str) -> frozenset[str]:
    if isinstance(tags, str):
        raise ValueError(f"{option_name} must be a collection of tag names, not a string")
    return frozenset(_normalize_tag(tag, option_name) for tag in tags)


@dataclass(frozen=True)
class HtmlOptions(BaseParserOptions):
    """Configuration options for HTML to document model conversion.

    All tag policy options are additive over the built-in tables; none is
    required. Tag names are matched case-insensitively.

    Parameters
    ----------
    tag_to_block_type : dict[str, str], default {}
        Block type per tag, consulted before the built-in table (including
        the ``li`` ordered/unordered rule).
    tag_to_style : dict[str, str], default {}
        Inline style per tag. Entries override the built-in styles of the same
        tag, and the tags are treated as inline.
    tag_to_entity_type : dict[str, str], default {}
        Entity type per tag. Matching elements become entities whose data is a
        verbatim copy of their attributes; the tags are treated as inline.
    extra_inline_tags : frozenset[str], default frozenset()
        Additional tags walked as inline elements.
    extra_atomic_tags : frozenset[str], default frozenset()
        Additional tags rendered as a single placeholder character; the tags
        are treated as inline, and any content they hold is emitted before
        the placeholder with the element's style and entity.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup backend used to tokenize the markup.

    Examples
    --------
    Map a custom element to an entity:
        >>> options = HtmlOptions(tag_to_entity_type={"cta": "CALL_TO_ACTION"})

    Render ``<mark>`` as a highlight style:
        >>> options = HtmlOptions(tag_to_style={"mark": "HIGHLIGHT"})

    """

    tag_to_block_type: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Override block type per tag (TAG=TYPE)", "cli_name": "block-type"},
    )
    tag_to_style: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Inline style per tag (TAG=STYLE)", "cli_name": "style"},
    )
    tag_to_entity_type: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Entity type per custom tag (TAG=TYPE)", "cli_name": "entity"},
    )
    extra_inline_tags: frozenset[str] = field(
        default_factory=frozenset,
        metadata={"help": "Additional tags treated as inline", "cli_name": "inline-tag"},
    )
    extra_atomic_tags: frozenset[str] = field(
        default_factory=frozenset,
        metadata={"help": "Additional tags rendered as one placeholder character", "cli_name": "atomic-tag"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup backend", "choices": list(HTML_PARSERS), "cli_name": "html-parser"},
    )

    def __post_init__(self) -> None:
        """Normalize tag names and validate option values.

        Raises
        ------
        ValueError
            If a tag name or mapped value is empty or not a string, or the
            parser backend is unknown.

        """
        super().__post_init__()

        object.__setattr__(
            self, "tag_to_block_type", _normalize_tag_map(self.tag_to_block_type, "tag_to_block_type")
        )
        object.__setattr__(self, "tag_to_style", _normalize_tag_map(self.tag_to_style, "tag_to_style"))
        object.__setattr__(
            self, "tag_to_entity_type", _normalize_tag_map(self.tag_to_entity_type, "tag_to_entity_type")
        )
        object.__setattr__(
            self, "extra_inline_tags", _normalize_tag_set(self.extra_inline_tags, "extra_inline_tags")
        )
        object.__setattr__(
            self, "extra_atomic_tags", _normalize_tag_set(self.extra_atomic_tags, "extra_atomic_tags")
        )

        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {', '.join(HTML_PARSERS)}, got {self.html_parser!r}")
