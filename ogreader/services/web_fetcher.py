import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
from urllib.parse import urljoin

import httpx

from ogreader.core.config import settings
from .url_validator import URLValidatorInterface
from .exceptions import HTTPFetchError, UnsupportedContentTypeError, ContentTooLargeError

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


class WebFetcherInterface(ABC):
    """Interface for fetching web content following the Dependency Inversion Principle"""

    @abstractmethod
    def fetch_html(self, url: str) -> str:
        pass


class WebFetcher(WebFetcherInterface):
    """
    Fetches HTML documents over HTTP with a blocking httpx client.

    The fetcher validates every URL it requests, including each redirect
    target, since it can be used on its own; ``OpenGraphReader.read`` checks
    the first URL again before calling it so that a bad URL fails without
    touching the fetcher. Redirects are followed here rather than by httpx,
    and the body is streamed so ``max_html_size`` bounds what is read.

    Pass ``client`` to reuse a connection pool or to plug in a mock transport;
    otherwise a short-lived client is opened per request.
    """

    def __init__(self, url_validator: URLValidatorInterface, client: Optional[httpx.Client] = None):
        self.url_validator = url_validator
        self.client = client

    def fetch_html(self, url: str) -> str:
        """Fetch HTML content from a URL with validation"""
        logger.info(f"Fetching HTML content from URL: {url}")

        self.url_validator.ensure_valid(url)

        headers = {
            "User-Agent": settings.fetch_user_agent
        }

        try:
            if self.client is not None:
                text = self._download(self.client, url, headers)
            else:
                with httpx.Client(timeout=settings.fetch_timeout, follow_redirects=False) as client:
                    text = self._download(client, url, headers)
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error occurred while fetching URL {url}: {e}")
            raise HTTPFetchError(status_code=e.response.status_code, message=f"HTTP error occurred: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            raise HTTPFetchError(status_code=502, message=f"Request error occurred: {str(e)}") from e

        logger.info(f"Successfully fetched HTML content from URL: {url}")
        return text

    def _download(self, client: httpx.Client, url: str, headers: Dict[str, str]) -> str:
        for _ in range(settings.fetch_max_redirects + 1):
            with client.stream("GET", url, headers=headers, follow_redirects=False) as res:
                if res.is_redirect and settings.fetch_follow_redirects:
                    target = urljoin(str(res.url), res.headers["location"])
                    logger.debug(f"Redirected from {url} to {target}")
                    self.url_validator.ensure_valid(target)
                    url = target
                    continue

                res.raise_for_status()

                content_type = res.headers.get("content-type", "")
                if not any(kind in content_type.lower() for kind in HTML_CONTENT_TYPES):
                    logger.warning(f"URL does not return HTML content. Content-Type: {content_type}")
                    raise UnsupportedContentTypeError(content_type)

                return self._read_limited(res, url)

        logger.warning(f"Too many redirects while fetching {url}")
        raise HTTPFetchError(
            status_code=502,
            message=f"Exceeded {settings.fetch_max_redirects} redirects"
        )

    @staticmethod
    def _read_limited(res: httpx.Response, url: str) -> str:
        limit = settings.max_html_size

        declared = res.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > limit:
            logger.warning(f"Document at {url} declares {declared} bytes")
            raise ContentTooLargeError(int(declared), limit)

        chunks = []
        size = 0
        for chunk in res.iter_bytes():
            size += len(chunk)
            if size > limit:
                logger.warning(f"Document at {url} exceeds {limit} bytes")
                raise ContentTooLargeError(size, limit)
            chunks.append(chunk)

        return b"".join(chunks).decode(res.encoding or "utf-8", errors="replace")
