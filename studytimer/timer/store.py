"""Authoritative timer state and the rules for changing it.

The store knows nothing about real time.  It holds one ``TimerState``
snapshot and replaces it on every mutation; listeners are told about each
new snapshot.  ``TimerEngine`` is the only intended caller of the
mutating operations.

Modes
-----
FOCUS         Study countdown.
SHORT_BREAK   Break after a focus session inside the cycle.
LONG_BREAK    Break that closes the cycle.

Statuses
--------
IDLE        Waiting; remaining time follows the settings.
RUNNING     Counting down.
PAUSED      Frozen mid-countdown.
COMPLETED   Countdown hit zero; waits to be acknowledged.

Cycling
-------
FOCUS → LONG_BREAK   when current_round % rounds_per_cycle == 0
FOCUS → SHORT_BREAK  otherwise (round unchanged)
SHORT_BREAK → FOCUS  round + 1
LONG_BREAK → FOCUS   round reset to 1
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Callable


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


# ── settings ──────────────────────────────────────────────────────────────

# (low, high) per field, inclusive
SETTINGS_BOUNDS: dict[str, tuple[int, int]] = {
    "focus_minutes": (1, 60),
    "short_break_minutes": (1, 30),
    "long_break_minutes": (1, 60),
    "rounds_per_cycle": (1, 10),
}

_MODE_FIELD: dict[TimerMode, str] = {
    TimerMode.FOCUS: "focus_minutes",
    TimerMode.SHORT_BREAK: "short_break_minutes",
    TimerMode.LONG_BREAK: "long_break_minutes",
}


@dataclass(frozen=True)
class TimerSettings:
    """Durations (minutes) and cycle length."""

    focus_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    rounds_per_cycle: int = 4

    def minutes_for(self, mode: TimerMode) -> int:
        return getattr(self, _MODE_FIELD[mode])

    def seconds_for(self, mode: TimerMode) -> int:
        return self.minutes_for(mode) * 60


def clamp_setting(name: str, value) -> int:
    """Clamp *value* into the valid range for settings field *name*."""
    low, high = SETTINGS_BOUNDS[name]
    # clamp before int() so infinities land on a bound
    return int(max(low, min(high, float(value))))


def make_settings(**values) -> TimerSettings:
    """Build a ``TimerSettings`` with every given field clamped."""
    return merge_settings(TimerSettings(), values)


def merge_settings(base: TimerSettings, partial: dict) -> TimerSettings:
    valid = {f.name for f in fields(TimerSettings)}
    unknown = set(partial) - valid
    if unknown:
        raise TypeError(f"unknown timer setting(s): {', '.join(sorted(unknown))}")
    clamped = {name: clamp_setting(name, value) for name, value in partial.items()}
    return replace(base, **clamped)


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot of the timer."""

    settings: TimerSettings
    mode: TimerMode
    status: TimerStatus
    remaining_seconds: int
    current_round: int

    @property
    def is_running(self) -> bool:
        return self.status == TimerStatus.RUNNING


StateListener = Callable[[TimerState], None]


# ── store ─────────────────────────────────────────────────────────────────


class TimerStore:
    """Owns the single ``TimerState`` and every transition on it."""

    def __init__(self, settings: TimerSettings | None = None) -> None:
        settings = settings or TimerSettings()
        self._state = TimerState(
            settings=settings,
            mode=TimerMode.FOCUS,
            status=TimerStatus.IDLE,
            remaining_seconds=settings.seconds_for(TimerMode.FOCUS),
            current_round=1,
        )
        self._listeners: list[StateListener] = []

    # ── observation ───────────────────────────────────────────────────

    @property
    def state(self) -> TimerState:
        return self._state

    def snapshot(self) -> TimerState:
        """Same as ``state``."""
        return self.state

    def duration_for(self, mode: TimerMode) -> int:
        """Configured countdown length for *mode*, in seconds."""
        return self._state.settings.seconds_for(mode)

    def add_listener(self, listener: StateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── operations ────────────────────────────────────────────────────

    def update_settings(self, **partial) -> None:
        """Merge *partial* into the settings, clamping each field.

        An active or paused countdown keeps its remaining time; only an
        idle timer picks up the new duration straight away.
        """
        state = self._state
        settings = merge_settings(state.settings, partial)
        changes: dict = {
            "settings": settings,
            "current_round": min(state.current_round, settings.rounds_per_cycle),
        }
        if state.status == TimerStatus.IDLE:
            changes["remaining_seconds"] = settings.seconds_for(state.mode)
        self._commit(**changes)

    def set_mode(self, mode: TimerMode) -> None:
        """Switch mode and land in IDLE with that mode's full duration.

        A running countdown is paused first, so RUNNING is never reported
        together with the new mode.
        """
        if self._state.status == TimerStatus.RUNNING:
            self._commit(status=TimerStatus.PAUSED)
        self._commit(
            mode=mode,
            status=TimerStatus.IDLE,
            remaining_seconds=self._state.settings.seconds_for(mode),
        )

    def set_status(self, status: TimerStatus) -> None:
        if status != self._state.status:
            self._commit(status=status)

    def reset_for_current_mode(self) -> None:
        state = self._state
        self._commit(
            status=TimerStatus.IDLE,
            remaining_seconds=state.settings.seconds_for(state.mode),
        )

    def set_remaining(self, seconds: int) -> None:
        self._commit(remaining_seconds=max(0, int(seconds)))

    def decrement_remaining(self) -> None:
        state = self._state
        if state.status != TimerStatus.RUNNING:
            return
        self._commit(remaining_seconds=max(0, state.remaining_seconds - 1))

    def advance_after_completion(self) -> None:
        """Move to the next mode/round and mark the countdown COMPLETED."""
        state = self._state
        mode = state.mode
        current_round = state.current_round

        if mode == TimerMode.FOCUS:
            # round is credited when the short break ends, not here
            if current_round % state.settings.rounds_per_cycle == 0:
                mode = TimerMode.LONG_BREAK
            else:
                mode = TimerMode.SHORT_BREAK
        elif mode == TimerMode.SHORT_BREAK:
            mode = TimerMode.FOCUS
            # capped in case rounds_per_cycle shrank during the break
            current_round = min(
                current_round + 1, state.settings.rounds_per_cycle,
            )
        else:
            mode = TimerMode.FOCUS
            current_round = 1

        self._commit(
            mode=mode,
            current_round=current_round,
            status=TimerStatus.COMPLETED,
        )

    # ── internal ──────────────────────────────────────────────────────

    def _commit(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)
