"""Unit tests for the HTML document wrapper."""
from __future__ import annotations

import pytest

from aeo_scanner.parser.document import parse_document


class TestParseDocument:
    """Tests for parse_document."""

    def test_rejects_non_string(self):
        """Non-string HTML is a caller error."""
        with pytest.raises(ValueError):
            parse_document(None)  # type: ignore[arg-type]

    def test_empty_html_has_no_elements(self):
        """An empty document answers every query with nothing."""
        document = parse_document("")
        assert document.select_one("h1") is None
        assert document.select("p") == []
        assert document.count("a[href]") == 0


class TestElement:
    """Tests for Element accessors."""

    def test_text_is_trimmed(self):
        document = parse_document("<p>\n   Hello <b>world</b>  \n</p>")
        assert document.select_one("p").text == "Hello world"

    def test_tag_name_lowercase(self):
        document = parse_document("<DIV><P>x</P></DIV>")
        assert document.select_one("p").tag_name == "p"

    def test_attribute_lookup(self):
        document = parse_document('<a href="/x" rel="nofollow noopener">x</a>')
        link = document.select_one("a")
        assert link.get("href") == "/x"
        assert link.get("rel") == "nofollow noopener"
        assert link.get("title") is None

    def test_next_element_sibling_skips_text(self):
        """Whitespace and text nodes between elements are skipped."""
        document = parse_document("<div><h1>T</h1>\n some text \n<p>P</p></div>")
        sibling = document.select_one("h1").next_element_sibling
        assert sibling is not None
        assert sibling.tag_name == "p"
        assert sibling.next_element_sibling is None

    def test_script_text(self):
        """Script bodies are readable through text."""
        document = parse_document('<script type="application/ld+json">{"@type": "Thing"}</script>')
        assert document.select_one("script").text == '{"@type": "Thing"}'

    def test_elements_compare_by_identity(self):
        document = parse_document("<p>a</p><p>a</p>")
        first, second = document.select("p")
        assert first == document.select_one("p")
        assert first != second
