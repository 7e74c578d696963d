import pytest
from unittest.mock import MagicMock, patch
from ogreader.core.models import OpenGraph
from ogreader.services.reader import OpenGraphReader, read
from ogreader.services.web_fetcher import WebFetcherInterface
from ogreader.services.exceptions import (
    SpecificationViolationError,
    URLValidationError,
    HTTPFetchError,
)


CONFORMING_HTML = """
<html>
<head>
    <title>The Rock (1996)</title>
    <meta property="og:title" content="The Rock">
    <meta property="og:type" content="movie">
    <meta property="og:url" content="https://www.imdb.com/title/tt0117500/">
    <meta property="og:image" content="https://ia.media-imdb.com/images/rock.jpg">
    <meta name="description" content="A mild-mannered chemist and an ex-con must lead the counterstrike.">
</head>
<body><p>Body text</p></body>
</html>
"""

MISSING_IMAGE_HTML = """
<html>
<head>
    <meta property="og:title" content="Dinner">
    <meta property="og:type" content="restaurant">
    <meta property="og:url" content="https://example.com/dinner">
</head>
<body></body>
</html>
"""


class TestOpenGraphReader:
    """Unit tests for OpenGraphReader"""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.mock_web_fetcher = MagicMock(spec=WebFetcherInterface)
        self.reader = OpenGraphReader(
            ignore_specification_errors=True,
            mine_extra_information=True,
            web_fetcher=self.mock_web_fetcher,
            mine_images=False
        )

    def test_read_conforming_page(self):
        """Test reading a page that declares every required property."""
        # Arrange
        url = "https://www.imdb.com/title/tt0117500/"
        self.mock_web_fetcher.fetch_html.return_value = CONFORMING_HTML

        # Act
        og = self.reader.read(url)

        # Assert
        assert isinstance(og, OpenGraph)
        assert og.get_property("title") == "The Rock"
        assert og.get_property("type") == "movie"
        assert og.get_property("image") == "https://ia.media-imdb.com/images/rock.jpg"
        assert og.get_property("description") == (
            "A mild-mannered chemist and an ex-con must lead the counterstrike."
        )
        assert og.get_base_type() == "product"
        assert og.get_source_url() == url
        assert og.is_from_source() is True
        assert og.has_changed() is False
        self.mock_web_fetcher.fetch_html.assert_called_once_with(url)

    def test_invalid_url_fails_before_fetching(self):
        """Test malformed URLs are rejected before any request."""
        with pytest.raises(URLValidationError):
            self.reader.read("not-a-url")

        self.mock_web_fetcher.fetch_html.assert_not_called()

    def test_fetch_errors_propagate(self):
        """Test retrieval failures reach the caller unchanged."""
        error = HTTPFetchError(status_code=404)
        self.mock_web_fetcher.fetch_html.side_effect = error

        with pytest.raises(HTTPFetchError) as exc_info:
            self.reader.read("https://example.com/missing")
        assert exc_info.value is error

    def test_specification_violation_names_missing_property(self):
        """Test strict reading fails on a page without og:image."""
        reader = OpenGraphReader(ignore_specification_errors=False, web_fetcher=self.mock_web_fetcher)
        self.mock_web_fetcher.fetch_html.return_value = MISSING_IMAGE_HTML

        with pytest.raises(SpecificationViolationError) as exc_info:
            reader.read("https://example.com/dinner")
        assert exc_info.value.missing_properties == ["image"]

    def test_ignoring_specification_errors(self):
        """Test the same page is accepted when specification errors are ignored."""
        self.mock_web_fetcher.fetch_html.return_value = MISSING_IMAGE_HTML

        og = self.reader.read("https://example.com/dinner")

        assert og.get_property("image") is None
        assert og.get_base_type() == "business"

    def test_missing_type_is_reported_by_strict_reading(self):
        """Test the default type does not hide a missing og:type."""
        reader = OpenGraphReader(ignore_specification_errors=False, web_fetcher=self.mock_web_fetcher)
        html = """
        <html><head>
            <meta property="og:title" content="t">
            <meta property="og:image" content="i">
            <meta property="og:url" content="u">
        </head></html>
        """

        with pytest.raises(SpecificationViolationError) as exc_info:
            reader.read_html(html)
        assert exc_info.value.missing_properties == ["type"]

    def test_missing_type_defaults_to_page(self):
        """Test pages without og:type are typed as plain pages."""
        og = self.reader.read_html("<html><head><title>Plain</title></head></html>")

        assert og.get_property("type") == "page"
        assert og.get_base_type() is None

    def test_unknown_type_has_no_base_type(self):
        """Test types outside the taxonomy leave the base type unset."""
        html = '<html><head><meta property="og:type" content="spaceship"></head></html>'

        og = self.reader.read_html(html)

        assert og.get_property("type") == "spaceship"
        assert og.get_base_type() is None

    def test_read_html_without_url(self):
        """Test documents read from memory have no source URL."""
        og = self.reader.read_html(CONFORMING_HTML)

        assert og.get_source_url() is None
        assert og.is_from_source() is True

    def test_blank_title_is_mined(self):
        """Test a blank og:title is replaced by mined text."""
        html = """
        <html>
        <head><meta property="og:title" content="  "></head>
        <body><h1>Breaking News</h1></body>
        </html>
        """

        og = self.reader.read_html(html)

        assert og.get_property("title") == "Breaking News"

    def test_no_mining_when_disabled(self):
        """Test neither generic meta tags nor heuristics are used without mining."""
        reader = OpenGraphReader(mine_extra_information=False, web_fetcher=self.mock_web_fetcher)

        og = reader.read_html(CONFORMING_HTML.replace('<meta property="og:title" content="The Rock">', ""))

        assert og.get_property("title") is None
        assert og.get_property("description") is None
        assert og.list_properties() == ["type", "url", "image"]

    def test_generic_meta_tags_are_kept_when_mining(self):
        """Test plain named meta tags seed the property map."""
        html = '<html><head><meta name="keywords" content="movies"></head></html>'

        og = self.reader.read_html(html)

        assert og.get_property("keywords") == "movies"

    def test_image_mining_can_be_enabled(self):
        """Test the reader passes the image option to its miner."""
        reader = OpenGraphReader(web_fetcher=self.mock_web_fetcher, mine_images=True)
        html = '<html><head></head><body><img src="/poster.jpg"></body></html>'

        og = reader.read_html(html, "https://example.com/film")

        assert og.get_property("image") == "https://example.com/poster.jpg"


class TestReadFunction:
    """Unit tests for the module-level read helper"""

    def test_read_uses_default_fetcher(self):
        """Test read() builds a reader with the given flags."""
        with patch("ogreader.services.reader.WebFetcher") as mock_fetcher_class:
            mock_fetcher_class.return_value.fetch_html.return_value = MISSING_IMAGE_HTML

            with pytest.raises(SpecificationViolationError):
                read("https://example.com/dinner", ignore_specification_errors=False)

            og = read("https://example.com/dinner")

        assert og.get_property("title") == "Dinner"
        assert og.get_source_url() == "https://example.com/dinner"
