"""clipscrape CLI — entry-point for the clipboard course scraper.

Usage:
    python cli/main.py --help

Commands:
    watch   → listen for copied course URLs and paste rows back
    scrape  → one-shot scrape of a single URL
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from clipscrape.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from typing import Optional

import typer

from clipscrape.clipboard import ClipboardMonitor, publish_row
from clipscrape.config import settings
from clipscrape.scraper.navigator import BrowserSession
from clipscrape.scraper.urls import clean_url, is_target_host, is_valid_url
from clipscrape.session import ScrapeSession

app = typer.Typer(
    name="clipscrape",
    help="Copy a course URL, get a spreadsheet row back.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Async drivers
# ---------------------------------------------------------------------------
async def _watch(headless: Optional[bool]) -> None:
    browser = BrowserSession(headless=headless)
    await browser.start()
    monitor = ClipboardMonitor()
    session = ScrapeSession(browser, monitor)
    monitor.on_change = session.handle_clipboard

    typer.echo("[watch] Listening for clipboard changes")
    try:
        await monitor.run()
    finally:
        monitor.stop()
        await monitor.drain()
        await browser.close()


async def _scrape_once(url: str, headless: Optional[bool]) -> str:
    browser = BrowserSession(headless=headless)
    await browser.start()
    try:
        session = ScrapeSession(browser, ClipboardMonitor())
        row = await session.scrape(url)
    finally:
        await browser.close()
    return row.to_tsv()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("watch")
def watch(
    headless: Optional[bool] = typer.Option(
        None,
        "--headless/--headful",
        help="Run the browser without a window (default from CLIPSCRAPE_HEADLESS).",
    ),
) -> None:
    """Watch the clipboard and scrape every copied course URL."""
    typer.echo(f"[watch] Target site: {settings.target_domain}")
    try:
        asyncio.run(_watch(headless))
    except KeyboardInterrupt:
        typer.echo("[watch] Stopped.")


@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="Course URL to scrape."),
    copy: bool = typer.Option(False, "--copy", help="Also copy the row to the clipboard."),
    headless: Optional[bool] = typer.Option(
        None,
        "--headless/--headful",
        help="Run the browser without a window (default from CLIPSCRAPE_HEADLESS).",
    ),
) -> None:
    """Scrape a single course URL and print its tab-separated row."""
    url = clean_url(url)
    if not is_valid_url(url):
        typer.echo(f"[scrape] {url!r} is not a valid URL", err=True)
        raise typer.Exit(1)
    if not is_target_host(url):
        typer.echo(f"[scrape] {url!r} is not a {settings.target_domain} URL", err=True)
        raise typer.Exit(1)

    typer.echo(f"[scrape] Loading {url!r} …", err=True)
    try:
        line = asyncio.run(_scrape_once(url, headless))
    except Exception as exc:
        typer.echo(f"[scrape] Couldn't scrape data from {url}: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(line)
    if copy:
        asyncio.run(publish_row(line))
        typer.echo("[scrape] Row copied to clipboard.", err=True)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
