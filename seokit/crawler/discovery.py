"""Best-effort robots.txt and sitemap discovery.

Each lookup is an independent short-deadline GET whose failure is logged and
swallowed; discovery stops at the first lookup that yields a sitemap URL.
"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urljoin

import httpx

from seokit.config import settings
from seokit.crawler.models import SiteFiles
from seokit.crawler.transport import get_with_deadline

logger = logging.getLogger(__name__)

_SITEMAP_LINE_RE = re.compile(r"^[ \t]*Sitemap:[ \t]*(.+)$", re.IGNORECASE | re.MULTILINE)
_SITEMAP_PATHS = ("/sitemap.xml", "/sitemap_index.xml")


def _lookup(client: httpx.Client, url: str, read_body: bool = False) -> Optional[str]:
    """GET *url* within ``settings.auxiliary_timeout``.

    Returns the body text (empty unless *read_body*) for a 2xx answer and
    ``None`` for anything else, network failures included.
    """
    try:
        response, text = get_with_deadline(
            client, url, settings.auxiliary_timeout, read_body=read_body
        )
    except httpx.HTTPError as exc:
        logger.debug("Lookup of %s failed: %s", url, exc)
        return None
    if not response.is_success:
        logger.debug("Lookup of %s returned %s", url, response.status_code)
        return None
    return text


def find_sitemap_directive(robots_txt: str) -> Optional[str]:
    """Return the value of the first ``Sitemap:`` line in *robots_txt*."""
    for match in _SITEMAP_LINE_RE.finditer(robots_txt):
        value = match.group(1).strip()
        if value:
            return value
    return None


def discover_site_files(url: str) -> SiteFiles:
    """Look up ``/robots.txt`` and a sitemap for the site serving *url*.

    The sitemap comes from the robots.txt ``Sitemap:`` directive when present,
    otherwise from the first of ``/sitemap.xml`` and ``/sitemap_index.xml``
    that answers 2xx.  Never raises for network errors.
    """
    found = SiteFiles()

    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    ) as client:
        text = _lookup(client, urljoin(url, "/robots.txt"), read_body=True)
        if text is not None:
            found.robots_txt = text[: settings.robots_txt_chars] or None
            found.sitemap_url = find_sitemap_directive(text)
            if found.sitemap_url:
                return found

        for path in _SITEMAP_PATHS:
            candidate = urljoin(url, path)
            if _lookup(client, candidate) is not None:
                found.sitemap_url = candidate
                break

    return found
