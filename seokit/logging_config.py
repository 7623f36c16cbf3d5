"""Console logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging.config

from seokit.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure the ``seokit`` logger tree to write to stderr.

    Safe to call more than once; the latest call wins.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "seokit": {
                    "handlers": ["console"],
                    "level": level or settings.log_level,
                    "propagate": False,
                },
            },
        }
    )
