import html
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, Any, List, Mapping

from ogreader.core.taxonomy import OG_PREFIX, strip_prefix


class MarkupVariant(str, Enum):
    """Attribute used to carry the property name in rendered meta tags"""
    PROPERTY = "property"
    NAME = "name"


class OpenGraph:
    """
    Open Graph representation of a web page.

    Either read from a document (``from_source`` is True and ``source_url``
    may be set) or built from scratch. Properties change only through
    ``set_property`` / ``remove_property``, and any such call marks the
    object as changed for good.
    """

    def __init__(
        self,
        properties: Optional[Mapping[str, str]] = None,
        source_url: Optional[str] = None,
        base_type: Optional[str] = None,
        from_source: bool = False
    ):
        self._properties: Dict[str, str] = dict(properties or {})
        self._source_url = source_url
        self._base_type = base_type
        self._from_source = from_source
        self._changed = False

    def __repr__(self) -> str:
        return (
            f"OpenGraph(source_url={self._source_url!r}, base_type={self._base_type!r}, "
            f"properties={self._properties!r})"
        )

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only snapshot of the current properties"""
        return MappingProxyType(dict(self._properties))

    def get_property(self, name: str) -> Optional[str]:
        return self._properties.get(strip_prefix(name))

    def get_base_type(self) -> Optional[str]:
        return self._base_type

    def get_source_url(self) -> Optional[str]:
        return self._source_url

    def list_properties(self) -> List[str]:
        return list(self._properties)

    def is_from_source(self) -> bool:
        return self._from_source

    def has_changed(self) -> bool:
        return self._changed

    def set_property(self, name: str, value: str) -> None:
        """Set ``og:name`` (the prefix is optional) to ``value``"""
        self._changed = True
        self._properties[strip_prefix(name)] = value

    def remove_property(self, name: str) -> None:
        """Remove ``og:name`` if defined; still counts as a change when it was not"""
        self._changed = True
        self._properties.pop(strip_prefix(name), None)

    def to_meta_markup(self, variant: MarkupVariant = MarkupVariant.PROPERTY) -> List[str]:
        """
        Render one ``<meta>`` tag per property, ordered by property name.

        Names and values are attribute-escaped so the output is always valid markup.
        """
        attribute = MarkupVariant(variant).value
        return [
            f'<meta {attribute}="{html.escape(OG_PREFIX + key, quote=True)}" '
            f'content="{html.escape(value or "", quote=True)}" />'
            for key, value in sorted(self._properties.items())
        ]

    def to_html(self) -> List[str]:
        return self.to_meta_markup(MarkupVariant.PROPERTY)

    def to_xhtml(self) -> List[str]:
        return self.to_meta_markup(MarkupVariant.NAME)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Open Graph object to a dictionary representation"""
        return {
            "source_url": self._source_url,
            "base_type": self._base_type,
            "from_source": self._from_source,
            "changed": self._changed,
            "properties": dict(self._properties)
        }
