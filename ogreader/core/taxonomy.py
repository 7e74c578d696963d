"""Open Graph constants: required properties and the base-type taxonomy"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

OG_PREFIX = "og:"

# Open Graph allows pages that declare no type at all
DEFAULT_TYPE = "page"

REQUIRED_PROPERTIES: Tuple[str, ...] = ("title", "type", "image", "url")

BASE_TYPES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "activity": frozenset({"activity", "sport"}),
    "business": frozenset({"bar", "company", "cafe", "hotel", "restaurant"}),
    "group": frozenset({"cause", "sports_league", "sports_team"}),
    "organization": frozenset({"band", "government", "non_profit", "school", "university"}),
    "person": frozenset({
        "actor", "athlete", "author", "director", "musician", "politician", "profile", "public_figure",
    }),
    "place": frozenset({"city", "country", "landmark", "state_province"}),
    "product": frozenset({
        "album", "book", "drink", "food", "game", "movie", "product", "song", "tv_show",
    }),
    "website": frozenset({"blog", "website", "article"}),
})


def strip_prefix(name: str) -> str:
    """Remove a single leading ``og:`` from a property name"""
    if name.startswith(OG_PREFIX):
        return name[len(OG_PREFIX):]
    return name
