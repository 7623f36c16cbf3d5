"""Crawler package — single-page fetch & SEO extraction."""

from seokit.crawler.errors import (
    CrawlError,
    DomainNotFound,
    FetchError,
    FetchTimeout,
    InvalidURL,
    NonSuccessStatus,
    Unreachable,
)
from seokit.crawler.models import ExtractionRecord
from seokit.crawler.service import crawl_site

__all__ = [
    "crawl_site",
    "ExtractionRecord",
    "CrawlError",
    "InvalidURL",
    "DomainNotFound",
    "FetchTimeout",
    "Unreachable",
    "NonSuccessStatus",
    "FetchError",
]
