import pytest
from ogreader.services.html_parser import HTMLParser
from ogreader.services.exceptions import ParseError


class TestHTMLParser:
    """Unit tests for HTMLParser"""

    def test_find_all_is_recursive_by_default(self):
        """Test elements are found at any depth in document order."""
        # Arrange
        html = "<html><body><p>One</p><div><p>Two</p></div></body></html>"
        parser = HTMLParser(html)

        # Act
        result = [parser.get_text(p) for p in parser.find_all("p")]

        # Assert
        assert result == ["One", "Two"]

    def test_find_top_level_only_returns_body_children(self):
        """Test the top-level search ignores nested elements."""
        html = "<html><body><h1>Top</h1><div><h1>Nested</h1></div></body></html>"
        parser = HTMLParser(html)

        result = [parser.get_text(h) for h in parser.find_top_level("h1")]

        assert result == ["Top"]

    def test_find_first_missing(self):
        """Test a missing element returns None."""
        parser = HTMLParser("<html><body></body></html>")

        assert parser.find_first("title") is None

    def test_get_attribute(self):
        """Test attribute lookup, including absent and multi-valued attributes."""
        html = '<html><head><link rel="shortcut icon" href="/favicon.ico"></head></html>'
        parser = HTMLParser(html)
        link = parser.find_first("link")

        assert parser.get_attribute(link, "href") == "/favicon.ico"
        assert parser.get_attribute(link, "rel") == "shortcut icon"
        assert parser.get_attribute(link, "type") is None
        assert parser.has_attribute(link, "href") is True
        assert parser.has_attribute(link, "type") is False

    def test_text_is_unescaped(self):
        """Test character references in text are decoded."""
        parser = HTMLParser("<html><head><title>A &amp; B &lt;C&gt;</title></head></html>")

        assert parser.get_text(parser.find_first("title")) == "A & B <C>"

    def test_resolve_url(self):
        """Test relative links resolve against the document URL."""
        parser = HTMLParser("<html></html>", "https://example.com/a/b.html")

        assert parser.resolve_url("c.png") == "https://example.com/a/c.png"
        assert parser.resolve_url("/d.png") == "https://example.com/d.png"

    def test_resolve_url_without_document_url(self):
        """Test links are returned unchanged when the document has no URL."""
        parser = HTMLParser("<html></html>")

        assert parser.resolve_url("/d.png") == "/d.png"

    def test_non_string_input_raises(self):
        """Test non-string documents are rejected."""
        with pytest.raises(ParseError):
            HTMLParser(None)

    def test_unknown_tree_builder_raises(self):
        """Test a missing BeautifulSoup tree builder is reported as a parse error."""
        with pytest.raises(ParseError):
            HTMLParser("<html></html>", features="no-such-builder")
