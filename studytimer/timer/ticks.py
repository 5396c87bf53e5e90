"""Periodic tick source for the timer engine."""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer


TICK_INTERVAL_MS = 1000


class TickSource(QObject):
    """One ``QTimer`` that can be armed and disarmed any number of times.

    Arming an armed source and disarming a disarmed one do nothing, so a
    double ``start()`` never ends up with two tick streams.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(callback)

    @property
    def is_armed(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def arm(self) -> None:
        if not self._qt_timer.isActive():
            self._qt_timer.start()

    def disarm(self) -> None:
        if self._qt_timer.isActive():
            self._qt_timer.stop()
