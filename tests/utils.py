"""Test utilities for the html2draft test suite.

This module provides builders for per-character metadata and node trees,
sample HTML documents, and assertions over converted documents.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional

from html2draft.model import CharacterMeta, Document, Entity
from html2draft.parsers.dom import ElementNode, TextNode


def meta(*styles: str, entity: Optional[Entity] = None) -> CharacterMeta:
    """Build character metadata from style names and an optional entity."""
    return CharacterMeta(style=frozenset(styles), entity=entity)


def element(tag_name: str, *children: Any, **attributes: str) -> ElementNode:
    """Build an element; plain strings among ``children`` become text nodes."""
    return ElementNode(
        tag_name,
        list(attributes.items()),
        [TextNode(child) if isinstance(child, str) else child for child in children],
    )


def body(*children: Any) -> ElementNode:
    """Build the synthetic root element."""
    return element("body", *children)


class HtmlTestGenerator:
    """Generator for HTML test content with edge cases."""

    @staticmethod
    def create_article_html() -> str:
        """Create a full HTML page mixing headings, lists, quotes and inline markup."""
        return """<!DOCTYPE html>
        <html>
        <head>
            <title>Ignored title</title>
            <style>p { color: red; }</style>
        </head>
        <body>
            <h1>Release <em>notes</em></h1>

            <!-- Inline styles and links -->
            <p>Text with <strong>bold and <em>italic</em></strong> and a <a href="https://example.com">link</a>.</p>

            <ul>
                <li>First item</li>
                <li>Second item
                    <ol>
                        <li>Nested ordered</li>
                    </ol>
                </li>
            </ul>

            <blockquote>Quoted text</blockquote>

            <pre>
def hello():
    return "world"</pre>

            <p>Image: <img src="pic.png" alt="A picture"> done</p>
            <script>document.write("never shown")</script>
        </body>
        </html>
        """

    @staticmethod
    def create_messy_whitespace_html() -> str:
        """Create HTML whose text is padded with formatting whitespace."""
        return """
        <div>
            <p>
                Lots   of
                \tformatting
                whitespace
            </p>
            <p>  first line  <br>  second line  </p>
        </div>
        """


def assert_aligned(text: str, character_meta: list) -> None:
    """Assert that text and metadata have the same length."""
    assert len(text) == len(character_meta), f"{len(text)} characters but {len(character_meta)} metadata entries"


def assert_entity_keys_consistent(document_dict: dict) -> None:
    """Assert every entity referenced by node-form blocks exists in the entity map."""
    entity_map = document_dict.get("entityMap", {})
    for block in document_dict["blocks"]:
        for entity_node in block["entityNodes"]:
            if entity_node["entity"] is not None:
                assert entity_node["entity"] in entity_map


def block_texts(document: Document) -> list[str]:
    """Return the text of every block."""
    return [block.text for block in document.blocks]


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
