"""Web crawler endpoint.

Routes
------
GET /api/web-crawler?url=<url>    → crawl_site
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from seokit.crawler import crawl_site

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class OpenGraphOut(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None


class MetaOut(BaseModel):
    description: Optional[str] = None
    keywords: Optional[str] = None
    og: OpenGraphOut


class LinksOut(BaseModel):
    total: int
    internal: int
    external: int
    internalLinks: List[str]
    externalLinks: List[str]


class ImageOut(BaseModel):
    src: str
    alt: str


class ImagesOut(BaseModel):
    total: int
    images: List[ImageOut]


class HeadingsOut(BaseModel):
    h1: List[str]
    h2: List[str]
    h3: List[str]


class CrawlResponse(BaseModel):
    url: str
    domain: str
    statusCode: int
    loadTime: int
    title: Optional[str] = None
    meta: MetaOut
    links: LinksOut
    images: ImagesOut
    headings: HeadingsOut
    textPreview: str
    robotsTxt: Optional[str] = None
    sitemapUrl: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("", response_model=CrawlResponse)
def crawl(url: Optional[str] = None) -> dict[str, Any]:
    """Crawl a single page and return its SEO extraction record.

    ``CrawlError`` subclasses propagate to the app-level handler, which
    renders them as ``{"error": ..., "category": ...}`` with the matching
    status code.  A missing ``url`` is reported as a 400, not a 422.
    """
    return crawl_site(url or "").to_dict()
