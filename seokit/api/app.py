"""FastAPI application factory.

Error handling
--------------
Every :class:`~seokit.crawler.errors.CrawlError` raised by a route is
rendered as ``{"error": <message>, "category": <category>, ...}`` with the
error's own HTTP status.  Any other exception escaping a route is logged with
its traceback and rendered as a 500 with category ``internal``.

Routers
-------
    /api/web-crawler   — single-page SEO crawl
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from seokit import __version__
from seokit.crawler.errors import CrawlError
from seokit.logging_config import setup_logging

from seokit.api.routers import crawler as crawler_router

logger = logging.getLogger(__name__)


async def crawl_error_handler(request: Request, exc: CrawlError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("Crawl failed for %s: %s", request.url, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s", request.url, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or CrawlError().message, "category": "internal"},
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    setup_logging()

    app = FastAPI(
        title="seokit API",
        description=(
            "Single-page SEO crawler: resolves the domain, fetches the page "
            "and reports its title, meta tags, links, images, headings, "
            "robots.txt and sitemap."
        ),
        version=__version__,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CrawlError, crawl_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(crawler_router.router, prefix="/api/web-crawler", tags=["crawler"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn seokit.api.app:app --reload
app = create_app()
