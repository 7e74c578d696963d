"""Read, build and render Open Graph metadata"""

from ogreader.core.models import OpenGraph, MarkupVariant
from ogreader.core.taxonomy import BASE_TYPES, REQUIRED_PROPERTIES
from ogreader.services import (
    OpenGraphReader,
    read,
    ServiceError,
    URLValidationError,
    FetchError,
    SpecificationViolationError,
)

__version__ = "1.0.0"

__all__ = [
    "OpenGraph",
    "MarkupVariant",
    "BASE_TYPES",
    "REQUIRED_PROPERTIES",
    "OpenGraphReader",
    "read",
    "ServiceError",
    "URLValidationError",
    "FetchError",
    "SpecificationViolationError",
]
