"""Exception hierarchy for the reader and its collaborators"""

from typing import Iterable, List


class ServiceError(Exception):
    """Base exception for all reader errors"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input validation fails"""
    def __init__(self, message: str = "Invalid input provided"):
        super().__init__(message, "VALIDATION_ERROR")


class URLValidationError(ValidationError):
    """Raised for a malformed or unsafe URL, before anything is fetched"""
    def __init__(self, message: str = "Invalid or unsafe URL provided"):
        super().__init__(message)


class FetchError(ServiceError):
    """Raised when the document cannot be retrieved"""
    def __init__(self, message: str = "Failed to fetch content from URL"):
        super().__init__(message, "FETCH_ERROR")


class HTTPFetchError(FetchError):
    """Raised when the HTTP exchange itself fails"""
    def __init__(self, status_code: int, message: str = None):
        if message is None:
            message = f"HTTP request failed with status code {status_code}"
        super().__init__(message)
        self.status_code = status_code


class ContentError(ServiceError):
    """Raised when fetched content cannot be used"""
    def __init__(self, message: str = "Error processing content", error_code: str = "CONTENT_ERROR"):
        super().__init__(message, error_code)


class UnsupportedContentTypeError(ContentError):
    def __init__(self, content_type: str):
        super().__init__(f"Content type '{content_type}' is not supported")
        self.content_type = content_type


class ContentTooLargeError(ContentError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"Document of {size} bytes exceeds the {limit} byte limit")
        self.size = size
        self.limit = limit


class ParseError(ServiceError):
    """Raised when HTML cannot be turned into a tag tree"""
    def __init__(self, message: str = "Error parsing content"):
        super().__init__(message, "PARSE_ERROR")


class SpecificationViolationError(ServiceError):
    """
    Raised when a document does not declare every required Open Graph property.

    ``missing_properties`` lists the absent names in the order they are required.
    """
    def __init__(self, missing_properties: Iterable[str]):
        self.missing_properties: List[str] = list(missing_properties)
        message = (
            "Does not conform to Open Graph protocol, missing: "
            + ", ".join(self.missing_properties)
        )
        super().__init__(message, "SPECIFICATION_VIOLATION")
