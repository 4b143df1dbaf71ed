"""Clipboard package — change monitoring and row publishing."""

from clipscrape.clipboard.monitor import ClipboardMonitor
from clipscrape.clipboard.writer import publish_row

__all__ = ["ClipboardMonitor", "publish_row"]
