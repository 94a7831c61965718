"""Application settings, read from an optional JSON file.

Settings are looked up at:
    ~/.config/pomobuddy/settings.json

or at the path named by ``POMOBUDDY_SETTINGS``.  The file is only read,
never written; a missing file means defaults.

Usage::

    settings = load_settings()
    engine = TimerEngine(
        durations=settings.durations(),
        long_break_interval=settings.long_break_interval,
    )
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.engine import (
    Phase,
    WORK_SECONDS,
    SHORT_BREAK_SECONDS,
    LONG_BREAK_SECONDS,
    LONG_BREAK_INTERVAL,
)


logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "pomobuddy"
SETTINGS_PATH = CONFIG_DIR / "settings.json"
SETTINGS_ENV_VAR = "POMOBUDDY_SETTINGS"


@dataclass
class Settings:
    """All user-tunable values."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = WORK_SECONDS      # seconds
    short_break_duration: int = SHORT_BREAK_SECONDS
    long_break_duration: int = LONG_BREAK_SECONDS
    long_break_interval: int = LONG_BREAK_INTERVAL

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False

    def durations(self) -> dict[Phase, int]:
        return {
            Phase.WORK: self.work_duration,
            Phase.SHORT_BREAK: self.short_break_duration,
            Phase.LONG_BREAK: self.long_break_duration,
        }


def _valid_positive(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _valid_volume(value: object) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= 100
    )


def _valid_flag(value: object) -> bool:
    return isinstance(value, bool)


_VALIDATORS = {
    "work_duration": _valid_positive,
    "short_break_duration": _valid_positive,
    "long_break_duration": _valid_positive,
    "long_break_interval": _valid_positive,
    "sound_enabled": _valid_flag,
    "sound_volume": _valid_volume,
    "always_on_top": _valid_flag,
}


def settings_path() -> Path:
    """Where settings are read from (env override first)."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return SETTINGS_PATH


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored.  A value of the wrong type or out of
    range is dropped with a warning and its default is used instead.
    """
    path = path or settings_path()
    if not path.exists():
        return Settings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        logger.warning("Could not read settings from %s: %s", path, error)
        return Settings()

    if not isinstance(data, dict):
        logger.warning("Ignoring settings in %s: expected a JSON object", path)
        return Settings()

    valid_keys = {f.name for f in fields(Settings)}
    accepted: dict[str, object] = {}
    for key, value in data.items():
        if key not in valid_keys:
            logger.debug("Ignoring unknown setting %r", key)
            continue
        if not _VALIDATORS[key](value):
            logger.warning("Invalid value for %s: %r (using default)", key, value)
            continue
        accepted[key] = value
    return Settings(**accepted)
