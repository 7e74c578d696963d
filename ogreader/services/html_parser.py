"""Tag-tree access used by the harvester and the miner"""

import logging
from typing import Optional, List
from urllib.parse import urljoin

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Tag

from ogreader.core.config import settings
from .exceptions import ParseError


logger = logging.getLogger(__name__)


class HTMLParser:
    """
    Thin wrapper around a BeautifulSoup tree.

    BeautifulSoup decodes character references while building the tree, so
    attribute values and text returned here are already entity-unescaped.
    """

    def __init__(self, html: str, url: Optional[str] = None, features: Optional[str] = None):
        """
        Initialize the HTML parser

        Args:
            html: HTML content to parse
            url: Address the document came from, used to resolve relative links
            features: BeautifulSoup tree builder, defaults to ``settings.html_parser_features``
        """
        if html is None or not isinstance(html, str):
            raise ParseError("HTML content must be a string")

        self.html = html
        self.url = url
        features = features or settings.html_parser_features
        try:
            self.soup = BeautifulSoup(html, features)
        except FeatureNotFound as e:
            logger.error(f"HTML tree builder '{features}' is not available: {e}")
            raise ParseError(f"HTML tree builder '{features}' is not available") from e

    def find_all(self, tag: str, recursive: bool = True) -> List[Tag]:
        """All elements named ``tag`` in document order"""
        return self.soup.find_all(tag, recursive=recursive)

    def find_first(self, tag: str, recursive: bool = True) -> Optional[Tag]:
        return self.soup.find(tag, recursive=recursive)

    def find_top_level(self, tag: str) -> List[Tag]:
        """
        Elements named ``tag`` that are direct children of the document body.

        Falls back to the root of the tree when the document has no body.
        """
        root = self.soup.body or self.soup
        return root.find_all(tag, recursive=False)

    def meta_elements(self) -> List[Tag]:
        return self.find_all("meta")

    @staticmethod
    def has_attribute(element: Tag, name: str) -> bool:
        return element.has_attr(name)

    @staticmethod
    def get_attribute(element: Tag, name: str) -> Optional[str]:
        """Attribute value as a string; multi-valued attributes are space-joined"""
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(str(item) for item in value)
        return str(value)

    @staticmethod
    def get_text(element: Tag) -> str:
        return element.get_text()

    def resolve_url(self, href: str) -> str:
        """Make ``href`` absolute against the document URL, when there is one"""
        if self.url:
            return urljoin(self.url, href)
        return href
