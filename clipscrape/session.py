"""One owned context per running watcher: the shared tab, the monitor, a lock.

``ScrapeSession.handle_clipboard`` is the clipboard-change handler.  It runs
one scrape attempt end to end and converts any failure into a log line and a
failure cue, so nothing escapes into the monitor's task.
"""

from __future__ import annotations

import asyncio
import sys

from clipscrape.clipboard import ClipboardMonitor, publish_row
from clipscrape.feedback import play_failure, play_success
from clipscrape.scraper.extractor import extract_fields
from clipscrape.scraper.models import NormalizedRow
from clipscrape.scraper.navigator import BrowserSession
from clipscrape.scraper.normalizer import normalize
from clipscrape.scraper.urls import clean_url, is_target_host, is_valid_url


class ScrapeSession:
    """Serialises scrape attempts against the single browser tab."""

    def __init__(self, browser: BrowserSession, monitor: ClipboardMonitor) -> None:
        self.browser = browser
        self.monitor = monitor
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def scrape(self, url: str) -> NormalizedRow:
        """Navigate to *url*, extract every field and return the normalised row."""
        await self.browser.navigate(url)
        raw = await extract_fields(self.browser.page)
        return normalize(url, raw)

    async def handle_clipboard(self, text: str) -> bool:
        """Run one scrape attempt for new clipboard *text*.

        Returns ``True`` only when a row was written to the clipboard.
        """
        print(f"[WATCH] Clipboard changed: {text!r}")
        url = clean_url(text)
        if not is_valid_url(url):
            print(f"[WATCH] Clipboard data: {text!r} is not a valid URL", file=sys.stderr)
            return False
        if not is_target_host(url):
            print(
                f"[WATCH] Clipboard data: {text!r} is not a target-site URL",
                file=sys.stderr,
            )
            return False

        if self.busy:
            print(f"[SCRAPE] Waiting for the previous scrape before {url!r} …")

        async with self._lock:
            try:
                print(f"[SCRAPE] Loading {url}")
                row = await self.scrape(url)
                line = row.to_tsv()
                await publish_row(line, self.monitor)
            except Exception as exc:
                play_failure()
                print(f"[SCRAPE] ✗ Couldn't scrape data from {url}: {exc}", file=sys.stderr)
                return False

        play_success()
        print(f"[SCRAPE] ✓ {line}")
        return True
