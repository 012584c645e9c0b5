#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_block_generator.py
"""Unit tests for the block generator tree walk.

Tests cover:
- Block boundaries and block types
- List nesting depth
- Style and entity inheritance through inline elements
- Soft breaks and atomic placeholders
- Text/metadata alignment over random trees (property-based)
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import assert_aligned, body, element

from html2draft.options import HtmlOptions
from html2draft.parsers.assembler import assemble_document, normalize_block_text
from html2draft.parsers.block_generator import BlockGenerator
from html2draft.parsers.dom import ElementNode, TextNode
from html2draft.parsers.entities import EntityRegistry
from html2draft.parsers.policy import TagPolicy


def generate(root, options=None):
    registry = EntityRegistry()
    blocks = BlockGenerator(TagPolicy.from_options(options), registry).generate(root)
    return blocks, registry


def summary(blocks):
    return [(block.tag_name, block.block_type, block.depth, block.to_fragment().text) for block in blocks]


@pytest.mark.unit
class TestBlockBoundaries:
    """Tests for block creation."""

    def test_root_block_collects_loose_text(self) -> None:
        blocks, _ = generate(body("Hello ", element("strong", "world")))
        assert summary(blocks) == [("body", "unstyled", 0, "Hello world")]

    def test_each_block_element_opens_a_block(self) -> None:
        blocks, _ = generate(body(element("h1", "Title"), element("p", "Text"), element("blockquote", "Quote")))
        assert summary(blocks) == [
            ("body", "unstyled", 0, ""),
            ("h1", "header-one", 0, "Title"),
            ("p", "unstyled", 0, "Text"),
            ("blockquote", "blockquote", 0, "Quote"),
        ]

    def test_unknown_tags_are_blocks(self) -> None:
        blocks, _ = generate(body(element("foo", "bar")))
        assert summary(blocks)[1] == ("foo", "unstyled", 0, "bar")

    def test_text_after_nested_block_returns_to_outer_block(self) -> None:
        blocks, _ = generate(body(element("div", "a", element("p", "b"), "c")))
        assert summary(blocks)[1:] == [("div", "unstyled", 0, "ac"), ("p", "unstyled", 0, "b")]

    def test_block_inside_inline_starts_unstyled(self) -> None:
        blocks, _ = generate(body(element("b", "x", element("p", "y"))))
        root, paragraph = blocks
        assert [m.style for m in root.to_fragment().character_meta] == [frozenset({"BOLD"})]
        assert [m.style for m in paragraph.to_fragment().character_meta] == [frozenset()]

    def test_custom_inline_tag_stays_in_block(self) -> None:
        tree = body(element("p", "a ", element("custom", "b"), " c"))
        assert len(generate(tree)[0]) == 3
        assert summary(generate(tree, HtmlOptions(extra_inline_tags={"custom"}))[0])[1:] == [
            ("p", "unstyled", 0, "a b c")
        ]


@pytest.mark.unit
class TestLists:
    """Tests for list item types and depth."""

    def test_nested_unordered_list(self) -> None:
        tree = body(element("ul", element("li", "a", element("ul", element("li", "b")))))
        blocks, _ = generate(tree)
        assert summary(blocks) == [
            ("body", "unstyled", 0, ""),
            ("li", "unordered-list-item", 0, "a"),
            ("li", "unordered-list-item", 1, "b"),
        ]

    def test_ordered_list_inside_unordered(self) -> None:
        tree = body(element("ul", element("li", "a", element("ol", element("li", "b"), element("li", "c")))))
        blocks, _ = generate(tree)
        assert [(b.block_type, b.depth) for b in blocks[1:]] == [
            ("unordered-list-item", 0),
            ("ordered-list-item", 1),
            ("ordered-list-item", 1),
        ]

    def test_depth_not_set_for_non_list_blocks(self) -> None:
        tree = body(element("ul", element("li", element("p", "inside"))))
        blocks, _ = generate(tree)
        assert summary(blocks)[-1] == ("p", "unstyled", 0, "inside")


@pytest.mark.unit
class TestInlineContext:
    """Tests for style and entity inheritance."""

    def test_styles_accumulate(self) -> None:
        blocks, _ = generate(body(element("b", "a", element("i", "b")), "c"))
        styles = [m.style for m in blocks[0].to_fragment().character_meta]
        assert styles == [frozenset({"BOLD"}), frozenset({"BOLD", "ITALIC"}), frozenset()]

    def test_entity_covers_styled_descendants(self) -> None:
        blocks, registry = generate(body(element("a", "wo", element("i", "rld"), href="/")))
        character_meta = blocks[0].to_fragment().character_meta
        assert {m.entity_key for m in character_meta} == {0}
        assert registry.entity_map[0].data == {"url": "/"}

    def test_link_without_href_has_no_entity(self) -> None:
        blocks, registry = generate(body(element("a", "text", name="x")))
        assert blocks[0].to_fragment().text == "text"
        assert all(m.entity is None for m in blocks[0].to_fragment().character_meta)
        assert len(registry) == 0

    def test_entity_keys_in_document_order(self) -> None:
        _, registry = generate(body(element("a", "x", href="/1"), element("a", "y", href="/2")))
        assert [entity.data["url"] for entity in registry.entity_map.values()] == ["/1", "/2"]
        assert list(registry.entity_map) == [0, 1]

    def test_custom_entity_tag(self) -> None:
        options = HtmlOptions(tag_to_entity_type={"cta": "CALL_TO_ACTION"})
        blocks, registry = generate(body(element("cta", "Buy", **{"data-id": "7"})), options)
        assert blocks[0].to_fragment().text == "Buy"
        assert registry.entity_map[0].type == "CALL_TO_ACTION"
        assert registry.entity_map[0].data == {"data-id": "7"}


@pytest.mark.unit
class TestPlaceholders:
    """Tests for soft breaks, atomic elements and text normalization."""

    def test_line_break_inserts_placeholder(self) -> None:
        blocks, _ = generate(body("line1", element("br"), "line2"))
        assert blocks[0].to_fragment().text == "line1\rline2"

    def test_atomic_element_is_one_placeholder_with_entity(self) -> None:
        blocks, registry = generate(body(element("p", "a", element("img", src="x.png"), "b")))
        fragment = blocks[1].to_fragment()
        assert fragment.text == "a\u00a0b"
        assert fragment.character_meta[1].entity.type == "IMAGE"
        assert fragment.character_meta[0].entity is None
        assert len(registry) == 1

    def test_atomic_without_entity(self) -> None:
        options = HtmlOptions(extra_atomic_tags={"video"})
        blocks, registry = generate(body(element("video", src="v.mp4")), options)
        assert blocks[0].to_fragment().text == "\u00a0"
        assert len(registry) == 0

    def test_atomic_children_precede_placeholder(self) -> None:
        blocks, registry = generate(body(element("p", element("iframe", "fallback", src="v"))))
        fragment = blocks[1].to_fragment()
        assert fragment.text == "fallback\u00a0"
        iframe = registry.entity_map[0]
        assert iframe.type == "IFRAME"
        assert {meta.entity for meta in fragment.character_meta} == {iframe}

    def test_atomic_children_keep_element_styles(self) -> None:
        options = HtmlOptions(extra_atomic_tags={"video"}, tag_to_style={"video": "MEDIA"})
        blocks, _ = generate(body(element("video", "no ", element("b", "video"))), options)
        fragment = blocks[0].to_fragment()
        assert fragment.text == "no video\u00a0"
        assert [sorted(meta.style) for meta in fragment.character_meta] == [["MEDIA"]] * 3 + [
            ["BOLD", "MEDIA"]
        ] * 5 + [["MEDIA"]]

    def test_atomic_placeholder_keeps_styles(self) -> None:
        blocks, _ = generate(body(element("b", element("img", src="x.png"))))
        assert blocks[0].to_fragment().character_meta[0].style == frozenset({"BOLD"})

    def test_source_carriage_returns_normalized(self) -> None:
        blocks, _ = generate(body(TextNode("a\r\nb\rc")))
        assert blocks[0].to_fragment().text == "a\nb\nc"


INLINE_TAGS = ["b", "i", "em", "code", "span", "a", "del"]
BLOCK_TAGS = ["p", "div", "li", "ul", "ol", "pre", "h2", "blockquote"]
VOID_TAGS = ["br", "img", "input"]

text_leaves = st.text(alphabet="ab \t\n\r\u00a0", max_size=6).map(TextNode)
void_leaves = st.sampled_from(VOID_TAGS).map(lambda tag: ElementNode(tag, [("src", "x"), ("href", "/")]))
trees = st.recursive(
    st.one_of(text_leaves, void_leaves),
    lambda children: st.builds(
        lambda tag, kids: ElementNode(tag, [("href", "/")], kids),
        st.sampled_from(INLINE_TAGS + BLOCK_TAGS),
        st.lists(children, max_size=4),
    ),
    max_leaves=25,
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestAlignmentFuzzing:
    """Property-based alignment checks over random node trees."""

    @given(st.lists(trees, max_size=4))
    def test_alignment_holds_through_every_stage(self, children) -> None:
        """Property: text and metadata stay aligned after generation and normalization."""
        blocks, registry = generate(ElementNode("body", [], children))

        for block in blocks:
            fragment = block.to_fragment()
            assert_aligned(fragment.text, fragment.character_meta)
            normalized, _ = normalize_block_text(block)
            assert_aligned(normalized.text, normalized.character_meta)
            assert "\r" not in normalized.text

        document = assemble_document(blocks, registry.entity_map)
        assert document.blocks
        for block in document.blocks:
            for style_range in block.inline_style_ranges:
                assert 0 <= style_range.offset
                assert style_range.offset + style_range.length <= len(block.text)
            for entity_range in block.entity_ranges:
                assert entity_range.offset + entity_range.length <= len(block.text)
                assert entity_range.key in document.entity_map
