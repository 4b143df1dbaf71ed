"""Clipboard text classification: is it a URL, and is it one we scrape?"""

from __future__ import annotations

from urllib.parse import urlparse

from clipscrape.config import settings

# C0 control characters and space, trimmed from both ends of copied text.
_TRIMMED = "".join(chr(c) for c in range(0x21))


def clean_url(text: str) -> str:
    """Strip surrounding whitespace and control characters from *text*."""
    return text.strip(_TRIMMED)


def is_valid_url(text: str) -> bool:
    """Return ``True`` if *text* is a well-formed absolute URL.

    Surrounding whitespace and control characters are ignored; whitespace
    inside the URL, a missing scheme or a missing host make it invalid.
    Never raises.
    """
    if not isinstance(text, str):
        return False
    text = clean_url(text)
    if not text:
        return False
    if any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urlparse(text)
        # Accessing .port validates the port component.
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc and parsed.hostname)


def is_target_host(url: str, domain: str | None = None) -> bool:
    """Return ``True`` if the host of *url* ends with the target *domain*.

    *domain* defaults to ``settings.target_domain``.
    """
    domain = (domain or settings.target_domain).lower()
    try:
        host = urlparse(url).hostname or ""
    except ValueError:
        return False
    return host.lower().endswith(domain)
