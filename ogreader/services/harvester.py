import logging
from typing import Dict

from ogreader.core.taxonomy import OG_PREFIX, strip_prefix
from .html_parser import HTMLParser


logger = logging.getLogger(__name__)


class PropertyHarvester:
    """Collects declared meta properties into a canonical property map"""

    def harvest(self, parser: HTMLParser, mine_extra_information: bool = True) -> Dict[str, str]:
        """
        Walk every ``meta`` element in document order.

        ``property="og:*"`` and ``name="og:*"`` declarations are stored without
        the prefix. Any other ``name`` declaration (``description``, ``keywords``
        and so on) is stored verbatim, but only when extra information is mined.
        Later declarations overwrite earlier ones.
        """
        properties: Dict[str, str] = {}

        for element in parser.meta_elements():
            content = parser.get_attribute(element, "content") or ""
            og_property = parser.get_attribute(element, "property")
            name = parser.get_attribute(element, "name")

            if og_property is not None and og_property.startswith(OG_PREFIX):
                properties[strip_prefix(og_property)] = content
            elif name is not None and name.startswith(OG_PREFIX):
                properties[strip_prefix(name)] = content
            elif mine_extra_information and name:
                properties[name] = content

        logger.debug(f"Harvested {len(properties)} meta properties")
        return properties
