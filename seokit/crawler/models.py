"""Data models for the crawl pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class NormalizedTarget:
    """A user-supplied URL after scheme defaulting and parsing."""

    url: str
    domain: str


@dataclass
class FetchOutcome:
    """The successful HTTP response for the primary page fetch."""

    status_code: int
    load_time_ms: int
    html: str
    final_url: str


@dataclass
class OpenGraph:
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None


@dataclass
class MetaTags:
    description: Optional[str] = None
    keywords: Optional[str] = None
    og: OpenGraph = field(default_factory=OpenGraph)


@dataclass
class LinkSummary:
    """Link counts over every resolved anchor, plus the capped unique lists."""

    total: int = 0
    internal: int = 0
    external: int = 0
    internal_links: List[str] = field(default_factory=list)
    external_links: List[str] = field(default_factory=list)


@dataclass
class Image:
    src: str
    alt: str = ""


@dataclass
class ImageSummary:
    total: int = 0
    images: List[Image] = field(default_factory=list)


@dataclass
class Headings:
    h1: List[str] = field(default_factory=list)
    h2: List[str] = field(default_factory=list)
    h3: List[str] = field(default_factory=list)


@dataclass
class PageExtraction:
    """Everything :func:`~seokit.crawler.extractor.extract_page` reads from the HTML."""

    title: Optional[str] = None
    meta: MetaTags = field(default_factory=MetaTags)
    links: LinkSummary = field(default_factory=LinkSummary)
    images: ImageSummary = field(default_factory=ImageSummary)
    headings: Headings = field(default_factory=Headings)
    text_preview: str = ""


@dataclass
class SiteFiles:
    """Result of the best-effort robots.txt / sitemap discovery."""

    robots_txt: Optional[str] = None
    sitemap_url: Optional[str] = None


@dataclass
class ExtractionRecord:
    """The full result of crawling one page."""

    url: str
    domain: str
    status_code: int
    load_time_ms: int
    page: PageExtraction
    site_files: SiteFiles = field(default_factory=SiteFiles)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-shaped record served by the API."""
        page = self.page
        og = page.meta.og
        return {
            "url": self.url,
            "domain": self.domain,
            "statusCode": self.status_code,
            "loadTime": self.load_time_ms,
            "title": page.title,
            "meta": {
                "description": page.meta.description,
                "keywords": page.meta.keywords,
                "og": {
                    "title": og.title,
                    "description": og.description,
                    "image": og.image,
                    "url": og.url,
                },
            },
            "links": {
                "total": page.links.total,
                "internal": page.links.internal,
                "external": page.links.external,
                "internalLinks": list(page.links.internal_links),
                "externalLinks": list(page.links.external_links),
            },
            "images": {
                "total": page.images.total,
                "images": [{"src": img.src, "alt": img.alt} for img in page.images.images],
            },
            "headings": {
                "h1": list(page.headings.h1),
                "h2": list(page.headings.h2),
                "h3": list(page.headings.h3),
            },
            "textPreview": page.text_preview,
            "robotsTxt": self.site_files.robots_txt,
            "sitemapUrl": self.site_files.sitemap_url,
        }
