#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_html_options.py
"""Unit tests for HtmlOptions validation and cloning."""

import dataclasses

import pytest

from html2draft.options import HtmlOptions


@pytest.mark.unit
class TestHtmlOptionsDefaults:
    """Tests for default option values."""

    def test_defaults(self) -> None:
        options = HtmlOptions()
        assert options.tag_to_block_type == {}
        assert options.tag_to_style == {}
        assert options.tag_to_entity_type == {}
        assert options.extra_inline_tags == frozenset()
        assert options.extra_atomic_tags == frozenset()
        assert options.html_parser == "html.parser"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            HtmlOptions().html_parser = "lxml"  # type: ignore[misc]

    def test_every_field_has_help(self) -> None:
        for field in dataclasses.fields(HtmlOptions):
            assert field.metadata.get("help"), field.name


@pytest.mark.unit
class TestHtmlOptionsNormalization:
    """Tests for tag name normalization and validation."""

    def test_tag_names_lowercased(self) -> None:
        options = HtmlOptions(
            tag_to_style={" MARK ": "HIGHLIGHT"},
            tag_to_entity_type={"CTA": "CALL_TO_ACTION"},
            extra_inline_tags=["Custom"],
            extra_atomic_tags={"VIDEO"},
        )
        assert options.tag_to_style == {"mark": "HIGHLIGHT"}
        assert options.tag_to_entity_type == {"cta": "CALL_TO_ACTION"}
        assert options.extra_inline_tags == frozenset({"custom"})
        assert options.extra_atomic_tags == frozenset({"video"})

    def test_mapped_values_untouched(self) -> None:
        assert HtmlOptions(tag_to_block_type={"p": "Custom-Type"}).tag_to_block_type == {"p": "Custom-Type"}

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tag_to_style": {"": "BOLD"}},
            {"tag_to_style": {"b": ""}},
            {"tag_to_entity_type": {"cta": None}},
            {"tag_to_block_type": ["p"]},
            {"extra_inline_tags": "span"},
            {"extra_atomic_tags": [""]},
            {"extra_inline_tags": [3]},
            {"html_parser": "regex"},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            HtmlOptions(**kwargs)

    def test_caller_mapping_not_shared(self) -> None:
        mapping = {"mark": "HIGHLIGHT"}
        options = HtmlOptions(tag_to_style=mapping)
        mapping["b"] = "STRONG"
        assert options.tag_to_style == {"mark": "HIGHLIGHT"}


@pytest.mark.unit
class TestCreateUpdated:
    """Tests for create_updated."""

    def test_updates_field(self) -> None:
        base = HtmlOptions(tag_to_style={"mark": "HIGHLIGHT"})
        updated = base.create_updated(html_parser="html5lib")
        assert updated.html_parser == "html5lib"
        assert updated.tag_to_style == {"mark": "HIGHLIGHT"}
        assert base.html_parser == "html.parser"

    def test_revalidates(self) -> None:
        with pytest.raises(ValueError):
            HtmlOptions().create_updated(html_parser="nope")

    def test_unknown_field(self) -> None:
        with pytest.raises(TypeError, match="no option"):
            HtmlOptions().create_updated(not_an_option=True)
