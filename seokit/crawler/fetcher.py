"""Primary page fetch: one bounded GET, no retries."""

from __future__ import annotations

import logging
import time

import httpx

from seokit.config import settings
from seokit.crawler.errors import FetchError, FetchTimeout, NonSuccessStatus, Unreachable
from seokit.crawler.models import FetchOutcome
from seokit.crawler.transport import get_with_deadline

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_page(url: str) -> FetchOutcome:
    """Fetch *url* once, following redirects, and time the round trip.

    Raises:
        FetchTimeout: If the whole request (redirects and body included)
            exceeds ``settings.request_timeout``.
        Unreachable: If the connection could not be established.
        FetchError: For any other transport-level failure.
        NonSuccessStatus: If the final (post-redirect) response is not 2xx.
    """
    start = time.perf_counter()
    try:
        with httpx.Client(
            headers=_default_headers(),
            follow_redirects=True,
        ) as client:
            response, html = get_with_deadline(client, url, settings.request_timeout)
    except httpx.TimeoutException as exc:
        logger.info("Timed out fetching %s: %s", url, exc)
        raise FetchTimeout() from exc
    except httpx.ConnectError as exc:
        logger.info("Cannot connect to %s: %s", url, exc)
        raise Unreachable() from exc
    except httpx.RequestError as exc:
        logger.warning("Fetching %s failed: %s", url, exc)
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    load_time_ms = int((time.perf_counter() - start) * 1000)

    if not response.is_success:
        raise NonSuccessStatus(response.status_code, url)

    return FetchOutcome(
        status_code=response.status_code,
        load_time_ms=load_time_ms,
        html=html,
        final_url=str(response.url),
    )
