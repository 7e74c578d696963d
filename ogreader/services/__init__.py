from .exceptions import (
    ServiceError,
    URLValidationError,
    FetchError,
    HTTPFetchError,
    ContentError,
    ParseError,
    SpecificationViolationError,
)
from .reader import OpenGraphReader, read

__all__ = [
    "ServiceError",
    "URLValidationError",
    "FetchError",
    "HTTPFetchError",
    "ContentError",
    "ParseError",
    "SpecificationViolationError",
    "OpenGraphReader",
    "read",
]
