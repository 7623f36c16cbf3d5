"""Crawl failure taxonomy.

Every error that aborts a crawl derives from :class:`CrawlError` and carries
the category and HTTP status the API layer renders it with.  Failures of the
auxiliary robots.txt / sitemap lookups never leave :mod:`seokit.crawler.discovery`
and therefore have no class here.
"""

from __future__ import annotations

from typing import Any


class CrawlError(Exception):
    """Base class for crawl failures.

    Attributes:
        message: Human-readable description suitable for end users.
        category: Severity bucket (``bad-input``, ``not-found``, ``timeout``,
            ``unreachable``, ``upstream-status`` or ``internal``).
        http_status: Status code the API responds with.
    """

    category = "internal"
    http_status = 500

    def __init__(self, message: str = "Failed to crawl website"):
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "category": self.category}


class InvalidURL(CrawlError):
    category = "bad-input"
    http_status = 400

    def __init__(self, message: str = "Invalid URL format"):
        super().__init__(message)


class DomainNotFound(CrawlError):
    category = "not-found"
    http_status = 404

    def __init__(self, domain: str, url: str):
        self.domain = domain
        self.url = url
        super().__init__(f"Domain {domain} does not exist or has no DNS records")

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "url": self.url}


class FetchTimeout(CrawlError):
    category = "timeout"
    http_status = 408

    def __init__(self, message: str = "Request timeout. The website took too long to respond."):
        super().__init__(message)


class Unreachable(CrawlError):
    category = "unreachable"
    http_status = 503

    def __init__(
        self,
        message: str = "Cannot connect to the website. It may be down or unreachable.",
    ):
        super().__init__(message)


class NonSuccessStatus(CrawlError):
    """The page answered, but the final response was not 2xx."""

    category = "upstream-status"

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Website returned status {status_code}")

    @property
    def http_status(self) -> int:  # type: ignore[override]
        return self.status_code

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "url": self.url, "statusCode": self.status_code}


class FetchError(CrawlError):
    """Transport failure that is neither a timeout nor a refused connection."""
