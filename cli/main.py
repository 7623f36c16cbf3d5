"""seokit CLI — crawl a page from the terminal or serve the HTTP API.

Usage:
    python cli/main.py --help

Commands:
    crawl   → crawl one page and print its SEO summary (or raw JSON)
    serve   → run the FastAPI app under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from seokit.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from seokit.config import settings
from seokit.crawler import CrawlError, crawl_site
from seokit.crawler.models import ExtractionRecord
from seokit.logging_config import setup_logging

app = typer.Typer(
    name="seokit",
    help="Single-page SEO crawler.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    setup_logging("DEBUG" if verbose else None)


def _echo_list(label: str, items: list[str]) -> None:
    typer.echo(f"{label} ({len(items)}):")
    for item in items:
        typer.echo(f"  - {item}")


def _render_summary(record: ExtractionRecord) -> None:
    data = record.to_dict()
    links = data["links"]
    meta = data["meta"]

    typer.echo(f"[crawl] URL         : {data['url']}")
    typer.echo(f"[crawl] Domain      : {data['domain']}")
    typer.echo(f"[crawl] Status      : {data['statusCode']}  ({data['loadTime']} ms)")
    typer.echo(f"[crawl] Title       : {data['title'] or '(none)'}")
    typer.echo(f"[crawl] Description : {meta['description'] or '(none)'}")
    typer.echo(f"[crawl] Keywords    : {meta['keywords'] or '(none)'}")
    typer.echo(
        f"[crawl] Links       : {links['total']} total, "
        f"{links['internal']} internal, {links['external']} external"
    )
    typer.echo(f"[crawl] Images      : {data['images']['total']}")
    typer.echo(f"[crawl] Sitemap     : {data['sitemapUrl'] or '(not found)'}")
    typer.echo(f"[crawl] robots.txt  : {'found' if data['robotsTxt'] else '(not found)'}")
    typer.echo("")
    for level in ("h1", "h2", "h3"):
        _echo_list(level.upper(), data["headings"][level])
    typer.echo("")
    typer.echo(data["textPreview"])


@app.command("crawl")
def crawl(
    url: str = typer.Argument(..., help="URL to crawl (scheme optional)."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON record."),
) -> None:
    """Crawl a single page and print what was extracted."""
    try:
        record = crawl_site(url)
    except CrawlError as exc:
        typer.echo(f"[crawl] ✗ {exc.message} ({exc.category})", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(record.to_dict(), indent=2))
        return
    _render_summary(record)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: settings.api_host)."),
    port: Optional[int] = typer.Option(None, help="Port (default: settings.api_port)."),
    reload: bool = typer.Option(False, help="Auto-reload on code changes."),
) -> None:
    """Serve the crawler HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "seokit.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
