"""Publish a finished row to the clipboard."""

from __future__ import annotations

import asyncio

import pyperclip

from clipscrape.clipboard.monitor import ClipboardMonitor


async def publish_row(line: str, monitor: ClipboardMonitor | None = None) -> None:
    """Copy *line* to the clipboard and tell *monitor* it was our own write.

    The copy holds the monitor's clipboard lock, so no poll can read the
    clipboard between our write and ``set_content``.
    """
    if monitor is None:
        await asyncio.to_thread(pyperclip.copy, line)
        return

    async with monitor.clipboard_lock:
        await asyncio.to_thread(pyperclip.copy, line)
        monitor.set_content(line)
