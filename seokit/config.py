"""Centralised settings for the seokit crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    auxiliary_timeout: float = field(
        default_factory=lambda: float(os.environ.get("AUXILIARY_TIMEOUT", "5.0"))
    )
    dns_timeout: float = field(
        default_factory=lambda: float(os.environ.get("DNS_TIMEOUT", "5.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("CRAWLER_USER_AGENT", _DESKTOP_UA)
    )

    # ------------------------------------------------------------------
    # Extraction limits
    # ------------------------------------------------------------------
    max_listed_links: int = field(
        default_factory=lambda: int(os.environ.get("MAX_LISTED_LINKS", "50"))
    )
    max_listed_images: int = field(
        default_factory=lambda: int(os.environ.get("MAX_LISTED_IMAGES", "20"))
    )
    text_preview_chars: int = field(
        default_factory=lambda: int(os.environ.get("TEXT_PREVIEW_CHARS", "500"))
    )
    robots_txt_chars: int = field(
        default_factory=lambda: int(os.environ.get("ROBOTS_TXT_CHARS", "1000"))
    )

    # ------------------------------------------------------------------
    # Logging / API server
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )
    api_host: str = field(
        default_factory=lambda: os.environ.get("SEOKIT_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("SEOKIT_PORT", "8000"))
    )


# Module-level singleton, import this everywhere:
#   from seokit.config import settings
settings = Settings()
