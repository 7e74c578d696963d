import logging
from typing import Mapping

from ogreader.core.taxonomy import REQUIRED_PROPERTIES
from .exceptions import SpecificationViolationError


logger = logging.getLogger(__name__)


class SpecificationValidator:
    """Checks that every required Open Graph property is declared"""

    def validate(self, properties: Mapping[str, str], ignore_specification_errors: bool = True) -> None:
        """
        Raise ``SpecificationViolationError`` naming every missing required property.

        Only key presence is checked; blank values are accepted. Nothing is
        checked when ``ignore_specification_errors`` is set.
        """
        if ignore_specification_errors:
            return

        missing = [name for name in REQUIRED_PROPERTIES if name not in properties]
        if missing:
            logger.warning(f"Document is missing required Open Graph properties: {missing}")
            raise SpecificationViolationError(missing)
