import ipaddress
import logging
from abc import ABC, abstractmethod
from urllib.parse import urlparse

from .exceptions import URLValidationError


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")
BLOCKED_HOSTNAMES = ("localhost", "localhost.localdomain")


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Check that a URL is well formed and safe to fetch.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        pass

    def ensure_valid(self, url: str) -> str:
        """Return ``url`` unchanged, or raise ``URLValidationError``"""
        if not url or not isinstance(url, str) or not url.strip():
            raise URLValidationError("URL parameter is required")
        if not self.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise URLValidationError(f"Invalid or unsafe URL provided: {url}")
        return url


class URLValidator(URLValidatorInterface):
    """
    Rejects malformed URLs and hosts on loopback or private networks so a
    document read cannot be turned against internal services.
    """

    def validate(self, url: str) -> bool:
        try:
            parsed = urlparse(url)
            if parsed.scheme not in ALLOWED_SCHEMES or not parsed.netloc:
                return False

            # Raises ValueError for ports outside 0-65535
            port = parsed.port
            if port is not None and port < 1:
                return False

            hostname = (parsed.hostname or "").lower()
            if not hostname or hostname in BLOCKED_HOSTNAMES:
                return False

            return not self._is_internal_address(hostname)
        except ValueError:
            return False

    @staticmethod
    def _is_internal_address(hostname: str) -> bool:
        try:
            address = ipaddress.ip_address(hostname)
        except ValueError:
            # Not an IP literal
            return False
        return (
            address.is_private
            or address.is_loopback
            or address.is_link_local
            or address.is_reserved
            or address.is_unspecified
        )
