import logging
from typing import FrozenSet, Mapping, Optional

from ogreader.core.taxonomy import BASE_TYPES


logger = logging.getLogger(__name__)


class TypeClassifier:
    """Resolves a specific Open Graph type to its base category"""

    def __init__(self, taxonomy: Mapping[str, FrozenSet[str]] = BASE_TYPES):
        self.taxonomy = taxonomy

    def classify(self, og_type: Optional[str]) -> Optional[str]:
        """
        Return the category whose type set contains ``og_type``, or None.

        Categories are expected to be disjoint; with an overlapping entry the
        first category in the taxonomy's iteration order wins.
        """
        if not og_type:
            return None

        for base_type, specific_types in self.taxonomy.items():
            if og_type in specific_types:
                logger.debug(f"Type '{og_type}' classified as '{base_type}'")
                return base_type

        logger.debug(f"Type '{og_type}' has no base type")
        return None
