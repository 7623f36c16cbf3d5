"""SEO extraction: turns page HTML into a :class:`PageExtraction`."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup

from seokit.config import settings
from seokit.crawler.models import (
    Headings,
    Image,
    ImageSummary,
    LinkSummary,
    MetaTags,
    OpenGraph,
    PageExtraction,
)
from seokit.crawler.normalizer import strip_www

_WHITESPACE_RE = re.compile(r"\s+")
_DEFAULT_PORTS = {"http": 80, "https": 443}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _canonical(absolute: str) -> Tuple[str, str]:
    """Lowercase scheme and host, drop default ports, and give an empty path ``/``.

    Only http(s) URLs are rewritten.  Returns ``(url, hostname)``.
    """
    parts = urlsplit(absolute)
    host = parts.hostname or ""
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not host:
        return absolute, host

    netloc = f"[{host}]" if ":" in host else host
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    userinfo = parts.netloc.rpartition("@")[0]
    if userinfo:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment)), host


def _resolve(base_url: str, ref: str) -> Optional[Tuple[str, str]]:
    """Resolve *ref* against *base_url* into its canonical absolute form.

    Returns ``(absolute_url, hostname)`` (hostname may be empty for schemes
    such as ``mailto:``) or ``None`` when the reference is malformed.
    """
    try:
        return _canonical(urljoin(base_url, ref.strip()))
    except ValueError:
        return None


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    return tag.get("content") or None


def _extract_title(soup: BeautifulSoup) -> Optional[str]:
    """Return the trimmed text of the first ``<title>`` tag, or ``None``."""
    tag = soup.find("title")
    if tag is None:
        return None
    return tag.get_text().strip() or None


def _extract_meta(soup: BeautifulSoup) -> MetaTags:
    return MetaTags(
        description=_meta_content(soup, name="description"),
        keywords=_meta_content(soup, name="keywords"),
        og=OpenGraph(
            title=_meta_content(soup, property="og:title"),
            description=_meta_content(soup, property="og:description"),
            image=_meta_content(soup, property="og:image"),
            url=_meta_content(soup, property="og:url"),
        ),
    )


def _extract_links(soup: BeautifulSoup, base_url: str, domain: str) -> LinkSummary:
    """Classify every ``<a href>`` as internal or external to *domain*.

    Counts cover every resolved anchor (duplicates included); the returned
    lists are deduplicated and capped at ``settings.max_listed_links``.
    """
    internal: List[str] = []
    external: List[str] = []
    for anchor in soup.find_all("a", href=True):
        resolved = _resolve(base_url, anchor["href"])
        if resolved is None:
            continue
        absolute, host = resolved
        if strip_www(host) == domain:
            internal.append(absolute)
        else:
            external.append(absolute)

    cap = settings.max_listed_links
    return LinkSummary(
        total=len(internal) + len(external),
        internal=len(internal),
        external=len(external),
        internal_links=_unique(internal)[:cap],
        external_links=_unique(external)[:cap],
    )


def _extract_images(soup: BeautifulSoup, base_url: str) -> ImageSummary:
    images: List[Image] = []
    for img in soup.find_all("img"):
        src = img.get("src") or img.get("data-src")
        if not src:
            continue
        resolved = _resolve(base_url, src)
        if resolved is None:
            continue
        images.append(Image(src=resolved[0], alt=img.get("alt") or ""))
    return ImageSummary(total=len(images), images=images[: settings.max_listed_images])


def _extract_headings(soup: BeautifulSoup) -> Headings:
    return Headings(
        h1=[h.get_text().strip() for h in soup.find_all("h1")],
        h2=[h.get_text().strip() for h in soup.find_all("h2")],
        h3=[h.get_text().strip() for h in soup.find_all("h3")],
    )


def _text_preview(soup: BeautifulSoup) -> str:
    """Whitespace-collapsed ``<body>`` text, truncated to the preview length."""
    if soup.body is None:
        return ""
    text = _WHITESPACE_RE.sub(" ", soup.body.get_text()).strip()
    return text[: settings.text_preview_chars]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_page(html: str, base_url: str, domain: str) -> PageExtraction:
    """Extract title, meta tags, links, images, headings and a text preview.

    Relative references are resolved against *base_url*; links are internal
    when their www-stripped hostname equals *domain*.  Malformed link or
    image URLs are skipped and never fail the extraction.
    """
    soup = BeautifulSoup(html, "html.parser")
    return PageExtraction(
        title=_extract_title(soup),
        meta=_extract_meta(soup),
        links=_extract_links(soup, base_url, domain),
        images=_extract_images(soup, base_url),
        headings=_extract_headings(soup),
        text_preview=_text_preview(soup),
    )
