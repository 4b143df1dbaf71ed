"""Centralised settings for clipscrape.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    """Interpret an environment variable as a boolean switch."""
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Clipboard monitor
    # ------------------------------------------------------------------
    poll_interval: float = field(
        default_factory=lambda: float(os.environ.get("CLIPSCRAPE_POLL_INTERVAL", "0.1"))
    )

    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    target_domain: str = field(
        default_factory=lambda: os.environ.get("CLIPSCRAPE_TARGET_DOMAIN", "udemy.com")
    )
    row_label: str = field(
        default_factory=lambda: os.environ.get("CLIPSCRAPE_ROW_LABEL", "Alpha Link")
    )

    # ------------------------------------------------------------------
    # Scraper timeouts (seconds)
    # ------------------------------------------------------------------
    locator_timeout: float = field(
        default_factory=lambda: float(os.environ.get("CLIPSCRAPE_LOCATOR_TIMEOUT", "5"))
    )
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("CLIPSCRAPE_NAVIGATION_TIMEOUT", "30"))
    )

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    headless: bool = field(
        default_factory=lambda: _env_flag("CLIPSCRAPE_HEADLESS", "false")
    )
    browser_executable: str | None = field(
        default_factory=lambda: os.environ.get("CLIPSCRAPE_BROWSER_EXECUTABLE") or None
    )
    cdp_url: str | None = field(
        default_factory=lambda: os.environ.get("CLIPSCRAPE_CDP_URL") or None
    )
    viewport_width: int = field(
        default_factory=lambda: int(os.environ.get("CLIPSCRAPE_VIEWPORT_WIDTH", "1280"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.environ.get("CLIPSCRAPE_VIEWPORT_HEIGHT", "720"))
    )

    # ------------------------------------------------------------------
    # Audio cues
    # ------------------------------------------------------------------
    sound_enabled: bool = field(
        default_factory=lambda: _env_flag("CLIPSCRAPE_SOUND", "true")
    )
    success_sound: Path = field(
        default_factory=lambda: Path(
            os.environ.get("CLIPSCRAPE_SUCCESS_SOUND", "C:/Windows/Media/ding-sound.mp3")
        )
    )
    failure_sound: Path = field(
        default_factory=lambda: Path(
            os.environ.get("CLIPSCRAPE_FAILURE_SOUND", "C:/Windows/Media/chord.wav")
        )
    )

    @property
    def viewport(self) -> dict[str, int]:
        """Viewport size applied to a freshly opened tab."""
        return {"width": self.viewport_width, "height": self.viewport_height}


# Module-level singleton — import this everywhere:
#   from clipscrape.config import settings
settings = Settings()
