"""Heuristic recovery of Open Graph properties the document did not declare"""

import logging
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional

from .html_parser import HTMLParser


logger = logging.getLogger(__name__)


class MiningStep(NamedTuple):
    """One link of a fallback chain: run ``extractor`` only when ``predicate`` holds"""
    name: str
    predicate: Callable[[HTMLParser], bool]
    extractor: Callable[[HTMLParser], Optional[str]]


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return " ".join(text.split())


def _first_non_blank_text(parser: HTMLParser, elements) -> Optional[str]:
    for element in elements:
        text = _clean(parser.get_text(element))
        if text:
            return text
    return None


# --------------------------------------------------
# title
# --------------------------------------------------

def _has_title_element(parser: HTMLParser) -> bool:
    return parser.find_first("title") is not None


def _title_element_text(parser: HTMLParser) -> Optional[str]:
    return _first_non_blank_text(parser, parser.find_all("title"))


def _has_top_level_h1(parser: HTMLParser) -> bool:
    return bool(parser.find_top_level("h1"))


def _top_level_h1_text(parser: HTMLParser) -> Optional[str]:
    return _first_non_blank_text(parser, parser.find_top_level("h1"))


# --------------------------------------------------
# description
# --------------------------------------------------

def _description_meta(parser: HTMLParser):
    for element in parser.meta_elements():
        name = parser.get_attribute(element, "name")
        if name is not None and name.lower() == "description":
            return element
    return None


def _has_description_meta(parser: HTMLParser) -> bool:
    return _description_meta(parser) is not None


def _description_meta_content(parser: HTMLParser) -> Optional[str]:
    return _clean(parser.get_attribute(_description_meta(parser), "content"))


def _first_element_text(tag: str) -> Callable[[HTMLParser], Optional[str]]:
    def extract(parser: HTMLParser) -> Optional[str]:
        element = parser.find_first(tag)
        return _clean(parser.get_text(element)) if element is not None else None
    return extract


def _has_element(tag: str) -> Callable[[HTMLParser], bool]:
    return lambda parser: parser.find_first(tag) is not None


# --------------------------------------------------
# image
# --------------------------------------------------

def _first_image_source(parser: HTMLParser) -> Optional[str]:
    for element in parser.find_all("img"):
        src = parser.get_attribute(element, "src")
        if not is_blank(src):
            return parser.resolve_url(src.strip())
    return None


def _icon_link(parser: HTMLParser):
    for element in parser.find_all("link"):
        rel = parser.get_attribute(element, "rel") or ""
        if "icon" in rel.lower().split() and not is_blank(parser.get_attribute(element, "href")):
            return element
    return None


def _icon_href(parser: HTMLParser) -> Optional[str]:
    return parser.resolve_url(parser.get_attribute(_icon_link(parser), "href").strip())


TITLE_CHAIN: List[MiningStep] = [
    MiningStep("title-element", _has_title_element, _title_element_text),
    MiningStep("top-level-h1", _has_top_level_h1, _top_level_h1_text),
]

DESCRIPTION_CHAIN: List[MiningStep] = [
    MiningStep("meta-description", _has_description_meta, _description_meta_content),
    MiningStep("first-paragraph", _has_element("p"), _first_element_text("p")),
    MiningStep("first-div", _has_element("div"), _first_element_text("div")),
]

IMAGE_CHAIN: List[MiningStep] = [
    MiningStep("first-image", _has_element("img"), _first_image_source),
    MiningStep("icon-link", lambda parser: _icon_link(parser) is not None, _icon_href),
]


class HeuristicMiner:
    """
    Backfills blank properties from the document structure.

    Each target property owns an ordered chain of ``MiningStep``; the first
    step producing non-blank text wins and the rest are skipped.
    """

    def __init__(self, mine_images: bool = False):
        self.chains: Dict[str, List[MiningStep]] = {
            "title": TITLE_CHAIN,
            "description": DESCRIPTION_CHAIN,
        }
        if mine_images:
            self.chains["image"] = IMAGE_CHAIN

    def mine(self, parser: HTMLParser, properties: Mapping[str, str]) -> Dict[str, str]:
        """Return mined values for the targets that are absent or blank in ``properties``"""
        mined: Dict[str, str] = {}

        for target, chain in self.chains.items():
            if not is_blank(properties.get(target)):
                continue

            value = self.run_chain(parser, chain)
            if value is None:
                logger.debug(f"No fallback found for '{target}'")
                continue
            mined[target] = value

        return mined

    @staticmethod
    def run_chain(parser: HTMLParser, chain: List[MiningStep]) -> Optional[str]:
        for step in chain:
            if not step.predicate(parser):
                continue
            value = step.extractor(parser)
            if not is_blank(value):
                logger.debug(f"Mined value with step '{step.name}'")
                return value
        return None
