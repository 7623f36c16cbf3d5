"""Crawl orchestration: normalize → DNS → fetch → extract → discover."""

from __future__ import annotations

import logging

from seokit.crawler.discovery import discover_site_files
from seokit.crawler.dns_check import domain_exists
from seokit.crawler.errors import DomainNotFound
from seokit.crawler.extractor import extract_page
from seokit.crawler.fetcher import fetch_page
from seokit.crawler.models import ExtractionRecord
from seokit.crawler.normalizer import normalize_url

logger = logging.getLogger(__name__)


def crawl_site(url: str) -> ExtractionRecord:
    """Crawl the single page at *url* and return its :class:`ExtractionRecord`.

    Steps run strictly in sequence and nothing is cached between calls.

    Raises:
        InvalidURL: *url* is blank or malformed.
        DomainNotFound: The domain has no DNS records; no HTTP request is made.
        FetchTimeout, Unreachable, FetchError, NonSuccessStatus: The primary
            fetch failed; extraction and discovery are skipped.
    """
    target = normalize_url(url)
    logger.info("Crawling %s", target.url)

    if not domain_exists(target.domain):
        raise DomainNotFound(target.domain, target.url)

    outcome = fetch_page(target.url)
    page = extract_page(outcome.html, target.url, target.domain)
    site_files = discover_site_files(target.url)

    logger.info(
        "Crawled %s: HTTP %s in %d ms, %d link(s), %d image(s)",
        target.url,
        outcome.status_code,
        outcome.load_time_ms,
        page.links.total,
        page.images.total,
    )
    return ExtractionRecord(
        url=target.url,
        domain=target.domain,
        status_code=outcome.status_code,
        load_time_ms=outcome.load_time_ms,
        page=page,
        site_files=site_files,
    )
