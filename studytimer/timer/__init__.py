"""Timer package."""

from .engine import TimerEngine, format_time
from .store import (
    SETTINGS_BOUNDS,
    TimerMode,
    TimerSettings,
    TimerState,
    TimerStatus,
    TimerStore,
    make_settings,
)
from .ticks import TICK_INTERVAL_MS, TickSource

__all__ = [
    "TimerEngine",
    "format_time",
    "SETTINGS_BOUNDS",
    "TimerMode",
    "TimerSettings",
    "TimerState",
    "TimerStatus",
    "TimerStore",
    "make_settings",
    "TICK_INTERVAL_MS",
    "TickSource",
]
