"""Real-time driver for the study timer.

``TimerEngine`` owns the one tick source and the command surface used by
the UI.  All state lives in ``TimerStore``; the engine only decides when
to tick, when a countdown is over, and what to announce.

Status transitions
------------------
IDLE → RUNNING                  (start)
RUNNING → PAUSED                (pause)
PAUSED → RUNNING                (start)
RUNNING → COMPLETED             (countdown reaches 0)
COMPLETED → RUNNING             (acknowledge_completion / start)
RUNNING | PAUSED → IDLE         (reset)
any → IDLE                      (change_mode)
"""

from __future__ import annotations

import logging
from typing import Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from .store import (
    TimerMode,
    TimerSettings,
    TimerState,
    TimerStatus,
    TimerStore,
)
from .ticks import TickSource


class AlertPlayer(Protocol):
    def play_alert(self) -> None: ...


class Armable(Protocol):
    @property
    def is_armed(self) -> bool: ...

    def arm(self) -> None: ...

    def disarm(self) -> None: ...


def format_time(seconds: int) -> str:
    """``MM:SS`` with both parts zero-padded."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Pomodoro countdown on the Qt event loop.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every second counted while running.
    state_changed(state: TimerState)
        Emitted for every store mutation, intermediate steps included.
    completed(data: dict)
        Emitted once a countdown reaches zero.  Keys: ``completed_mode``,
        ``next_mode``, ``current_round``, ``rounds_per_cycle``.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    completed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: TimerStore | None = None,
        alert: AlertPlayer | None = None,
        tick_source: Armable | None = None,
        auto_continue: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store or TimerStore()
        self._alert = alert
        self._auto_continue = auto_continue
        self._logger = logger or logging.getLogger("studytimer.timer")
        self._tick_source: Armable = tick_source or TickSource(self._on_tick, self)

        self._store.add_listener(self._on_store_changed)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def store(self) -> TimerStore:
        return self._store

    @property
    def tick_source(self) -> Armable:
        return self._tick_source

    @property
    def state(self) -> TimerState:
        return self._store.state

    @property
    def mode(self) -> TimerMode:
        return self._store.state.mode

    @property
    def status(self) -> TimerStatus:
        return self._store.state.status

    @property
    def settings(self) -> TimerSettings:
        return self._store.state.settings

    @property
    def current_round(self) -> int:
        return self._store.state.current_round

    @property
    def remaining_seconds(self) -> int:
        return self._store.state.remaining_seconds

    @property
    def formatted_time(self) -> str:
        return format_time(self._store.state.remaining_seconds)

    @property
    def is_running(self) -> bool:
        return self._store.state.status == TimerStatus.RUNNING

    @property
    def auto_continue(self) -> bool:
        """Whether acknowledging a completion starts the next phase."""
        return self._auto_continue

    @auto_continue.setter
    def auto_continue(self, value: bool) -> None:
        self._auto_continue = value

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start or resume.  No-op while already running."""
        status = self.status
        if status == TimerStatus.RUNNING:
            return
        if status == TimerStatus.COMPLETED:
            self._begin_next_phase()
            return
        self._store.set_status(TimerStatus.RUNNING)
        self._tick_source.arm()
        self._logger.info(
            "Timer started: mode=%s remaining=%ss",
            self.mode.value,
            self.remaining_seconds,
        )

    def pause(self) -> None:
        if self.status != TimerStatus.RUNNING:
            return
        self._tick_source.disarm()
        self._store.set_status(TimerStatus.PAUSED)
        self._logger.info(
            "Timer paused: mode=%s remaining=%ss",
            self.mode.value,
            self.remaining_seconds,
        )

    def reset(self) -> None:
        self._tick_source.disarm()
        self._store.reset_for_current_mode()
        self._logger.info("Timer reset: mode=%s", self.mode.value)

    def change_mode(self, mode: TimerMode) -> None:
        self._tick_source.disarm()
        self._store.set_mode(mode)
        self._logger.info("Timer mode changed: mode=%s", mode.value)

    def update_settings(self, **partial) -> None:
        self._store.update_settings(**partial)
        self._logger.debug("Timer settings updated: %s", self.settings)

    def acknowledge_completion(self) -> None:
        """Resolve a COMPLETED countdown.

        Starts the next phase straight away, or parks it in IDLE when
        ``auto_continue`` is off.
        """
        if self.status != TimerStatus.COMPLETED:
            return
        if self._auto_continue:
            self._begin_next_phase()
        else:
            self._store.reset_for_current_mode()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _begin_next_phase(self) -> None:
        mode = self.mode
        self._store.set_remaining(self._store.duration_for(mode))
        self._store.set_status(TimerStatus.RUNNING)
        self._tick_source.arm()
        self._logger.info(
            "Timer started: mode=%s remaining=%ss",
            mode.value,
            self.remaining_seconds,
        )

    def _on_tick(self) -> None:
        state = self._store.state
        if state.status != TimerStatus.RUNNING:
            self._tick_source.disarm()
            return

        if state.remaining_seconds > 1:
            self._store.decrement_remaining()
            self.tick.emit(self._store.state.remaining_seconds)
            return

        self._finish_countdown()

    def _finish_countdown(self) -> None:
        self._store.set_remaining(0)
        self.tick.emit(0)
        self._tick_source.disarm()
        self._play_alert()

        completed_mode = self.mode
        self._store.advance_after_completion()
        state = self._store.state
        self._logger.info(
            "Timer completed: mode=%s next=%s round=%s/%s",
            completed_mode.value,
            state.mode.value,
            state.current_round,
            state.settings.rounds_per_cycle,
        )
        self.completed.emit({
            "completed_mode": completed_mode,
            "next_mode": state.mode,
            "current_round": state.current_round,
            "rounds_per_cycle": state.settings.rounds_per_cycle,
        })

    def _play_alert(self) -> None:
        if self._alert is None:
            return
        try:
            self._alert.play_alert()
        except Exception as error:
            self._logger.warning("Completion alert failed: %s", error)

    def _on_store_changed(self, state: TimerState) -> None:
        self.state_changed.emit(state)
