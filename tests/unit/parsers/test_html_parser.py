#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_html_parser.py
"""Unit tests for HtmlToDraftParser input handling and lifecycle."""

import importlib
import io
from pathlib import Path
from unittest.mock import patch

import pytest
from utils import block_texts, body, element

from html2draft.exceptions import DependencyError, InputFileError, InvalidOptionsError
from html2draft.options import HtmlOptions
from html2draft.parsers import HtmlToDraftParser

_real_import_module = importlib.import_module


def _import_without(*blocked):
    def fake_import(name, *args, **kwargs):
        if name in blocked:
            raise ImportError(f"No module named '{name}'")
        return _real_import_module(name, *args, **kwargs)

    return fake_import


@pytest.mark.unit
class TestParserOptions:
    """Tests for options handling."""

    def test_default_options(self) -> None:
        parser = HtmlToDraftParser()
        assert parser.options == HtmlOptions()

    def test_wrong_options_type_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlToDraftParser({"html_parser": "lxml"})
        assert exc_info.value.expected_type is HtmlOptions
        assert exc_info.value.received_type is dict

    def test_policy_built_from_options(self) -> None:
        parser = HtmlToDraftParser(HtmlOptions(extra_inline_tags={"custom"}))
        assert parser.policy.is_inline("custom")


@pytest.mark.unit
class TestParserInputs:
    """Tests for the accepted input types."""

    def test_string_is_markup(self) -> None:
        document = HtmlToDraftParser().parse("<p>page.html</p>")
        assert block_texts(document) == ["page.html"]

    def test_path_input(self, temp_dir: Path) -> None:
        path = temp_dir / "page.html"
        path.write_bytes(b"<p>From a file</p>")
        assert block_texts(HtmlToDraftParser().parse(path)) == ["From a file"]

    def test_missing_path(self, temp_dir: Path) -> None:
        with pytest.raises(InputFileError) as exc_info:
            HtmlToDraftParser().parse(temp_dir / "missing.html")
        assert isinstance(exc_info.value.original_error, OSError)

    def test_bytes_with_bom(self) -> None:
        data = b"\xef\xbb\xbf<p>caf\xc3\xa9</p>"
        assert block_texts(HtmlToDraftParser().parse(data)) == ["café"]

    def test_binary_stream(self) -> None:
        assert block_texts(HtmlToDraftParser().parse(io.BytesIO(b"<p>stream</p>"))) == ["stream"]

    def test_text_stream(self) -> None:
        assert block_texts(HtmlToDraftParser().parse(io.StringIO("<p>text stream</p>"))) == ["text stream"]

    def test_unsupported_input_type(self) -> None:
        with pytest.raises(TypeError, match="Unsupported input type"):
            HtmlToDraftParser().parse(42)


@pytest.mark.unit
class TestParserDependencies:
    """Tests for dependency checks before parsing."""

    def test_missing_backend(self) -> None:
        parser = HtmlToDraftParser(HtmlOptions(html_parser="lxml"))
        with patch("importlib.import_module", side_effect=_import_without("lxml")):
            with pytest.raises(DependencyError) as exc_info:
                parser.parse("<p>x</p>")
        assert exc_info.value.missing_packages == [("lxml", "")]

    def test_missing_beautifulsoup(self) -> None:
        with patch("importlib.import_module", side_effect=_import_without("bs4")):
            with pytest.raises(DependencyError, match="beautifulsoup4"):
                HtmlToDraftParser().parse("<p>x</p>")


@pytest.mark.unit
class TestParserLifecycle:
    """Tests for state across parse calls."""

    def test_entity_keys_restart_per_parse(self) -> None:
        parser = HtmlToDraftParser()
        markup = '<p><a href="/a">a</a> <a href="/b">b</a></p>'
        first = parser.parse(markup)
        second = parser.parse(markup)
        assert sorted(first.entity_map) == [0, 1]
        assert sorted(second.entity_map) == [0, 1]
        assert first.entity_map[0] is not second.entity_map[0]

    def test_convert_tree_skips_tokenizing(self) -> None:
        document = HtmlToDraftParser().convert_tree(body(element("h1", "Title")))
        assert [(block.type, block.text) for block in document.blocks] == [("header-one", "Title")]

    def test_debug_logging(self, caplog) -> None:
        with caplog.at_level("DEBUG", logger="html2draft.parsers.html"):
            HtmlToDraftParser().parse("<p>x</p>")
        assert any("HTML conversion completed" in record.getMessage() for record in caplog.records)
