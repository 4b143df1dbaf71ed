"""Audible success / failure cues for scrape attempts."""

from __future__ import annotations

import sys
from pathlib import Path

from clipscrape.config import settings


def _play(path: Path) -> None:
    """Start non-blocking playback of the sound file at *path*.

    ``sounddevice`` and ``soundfile`` are imported lazily so the rest of the
    package imports on machines without PortAudio / libsndfile.
    """
    import sounddevice as sd  # noqa: PLC0415
    import soundfile as sf  # noqa: PLC0415

    data, samplerate = sf.read(str(path), dtype="float32")
    sd.play(data, samplerate)


def play_cue(path: Path) -> bool:
    """Play *path* if cues are enabled; return ``True`` if playback started.

    A missing file or a broken audio device is reported on stderr and never
    raised.
    """
    if not settings.sound_enabled:
        return False
    if not path.is_file():
        print(f"[SOUND] Sound file not found: {path}", file=sys.stderr)
        return False
    try:
        _play(path)
    except Exception as exc:
        print(f"[SOUND] Couldn't play {path}: {exc}", file=sys.stderr)
        return False
    return True


def play_success() -> bool:
    return play_cue(settings.success_sound)


def play_failure() -> bool:
    return play_cue(settings.failure_sound)
