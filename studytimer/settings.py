"""Startup configuration.

Settings come from the dataclass defaults, optionally overridden by a
JSON file.  The file is only ever read: changes made while the app runs
live in memory for the session.

The file is looked up from the ``path`` argument, then the
``STUDYTIMER_SETTINGS`` environment variable.

Usage::

    settings = load_settings()
    engine = TimerEngine(store=TimerStore(settings.timer_settings()))
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.store import TimerSettings, make_settings


SETTINGS_ENV_VAR = "STUDYTIMER_SETTINGS"

logger = logging.getLogger("studytimer.settings")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    focus_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    rounds_per_cycle: int = 4
    auto_continue: bool = True

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = True

    def timer_settings(self) -> TimerSettings:
        """Timer durations with every field clamped to its valid range."""
        return make_settings(
            focus_minutes=self.focus_minutes,
            short_break_minutes=self.short_break_minutes,
            long_break_minutes=self.long_break_minutes,
            rounds_per_cycle=self.rounds_per_cycle,
        )


def settings_path(path: str | Path | None = None) -> Path | None:
    if path is not None:
        return Path(path)
    env_value = os.environ.get(SETTINGS_ENV_VAR)
    return Path(env_value) if env_value else None


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from JSON, falling back to defaults."""
    source = settings_path(path)
    if source is None or not source.exists():
        return Settings()
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        logger.warning("Ignoring unreadable settings file %s: %s", source, error)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", source)
        return Settings()

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    try:
        settings = Settings(**{k: _coerce(k, v) for k, v in filtered.items()})
        settings.timer_settings()
    except (TypeError, ValueError, OverflowError) as error:
        logger.warning("Ignoring settings file %s: %s", source, error)
        return Settings()
    return settings


def _coerce(name: str, value):
    """Check *value* against the type of the field's default."""
    default = getattr(Settings, name)
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be true or false, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    # int() rejects NaN and infinities
    return int(value)
