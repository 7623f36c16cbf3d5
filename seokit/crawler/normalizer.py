"""Turn a user-typed URL into a :class:`NormalizedTarget`."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from seokit.crawler.errors import InvalidURL
from seokit.crawler.models import NormalizedTarget

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_ALLOWED_SCHEMES = ("http", "https")


def strip_www(host: str) -> str:
    """Remove a single leading ``www.`` from *host*."""
    return host[4:] if host.startswith("www.") else host


def normalize_url(raw: str) -> NormalizedTarget:
    """Normalise *raw* into an absolute http(s) URL and its bare domain.

    ``https://`` is prepended when *raw* carries no scheme; an existing scheme
    is left untouched.

    Raises:
        InvalidURL: If *raw* is blank or cannot be parsed as an http(s) URL
            with a hostname.
    """
    candidate = (raw or "").strip()
    if not candidate:
        raise InvalidURL("URL is required")

    if not _SCHEME_RE.match(candidate):
        candidate = f"https://{candidate}"

    try:
        parts = urlsplit(candidate)
        # .port validates the port range and raises ValueError otherwise
        parts.port
    except ValueError as exc:
        raise InvalidURL() from exc

    host = parts.hostname
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not host or re.search(r"\s", host):
        raise InvalidURL()

    return NormalizedTarget(url=candidate, domain=strip_www(host))
