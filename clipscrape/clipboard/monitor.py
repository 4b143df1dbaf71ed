"""Clipboard polling with change notifications."""

from __future__ import annotations

import asyncio
import sys
from typing import Awaitable, Callable, Optional

import pyperclip

from clipscrape.config import settings

ChangeHandler = Callable[[str], Awaitable[None]]


class ClipboardMonitor:
    """Poll the clipboard and call *on_change* whenever its text changes.

    Each notification runs as its own task, so a slow handler never delays
    the next poll.  Writes we make ourselves are announced through
    :meth:`set_content` so they do not come back as notifications.
    """

    def __init__(
        self,
        on_change: Optional[ChangeHandler] = None,
        interval: float | None = None,
    ) -> None:
        self.on_change = on_change
        self.interval = settings.poll_interval if interval is None else interval
        self.previous_content: str | None = None
        self.is_running = False
        self._tasks: set[asyncio.Task] = set()
        # Held for every clipboard read and for our own writes.
        self.clipboard_lock = asyncio.Lock()
        self._writes = 0

    def set_content(self, content: str) -> None:
        """Record *content* as already seen without notifying anyone."""
        self.previous_content = content
        self._writes += 1

    async def poll_once(self) -> str | None:
        """Read the clipboard once; dispatch and return the text if it changed."""
        writes = self._writes
        async with self.clipboard_lock:
            try:
                current = await asyncio.to_thread(pyperclip.paste)
            except Exception as exc:
                print(f"[CLIPBOARD] Couldn't read clipboard contents: {exc}", file=sys.stderr)
                return None

        # A write recorded while the read was in flight makes it stale.
        if writes != self._writes or current == self.previous_content:
            return None

        self.previous_content = current
        if self.on_change is not None:
            task = asyncio.create_task(self.on_change(current))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        return current

    async def run(self) -> None:
        """Poll every ``interval`` seconds until :meth:`stop` is called."""
        self.is_running = True
        while self.is_running:
            await self.poll_once()
            await asyncio.sleep(self.interval)

    def stop(self) -> None:
        self.is_running = False

    async def drain(self) -> None:
        """Wait for every in-flight notification handler to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
