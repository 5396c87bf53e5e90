"""Floating timer panel.

Collapsed it shows only the clock.  Expanded (click the clock icon) it
adds the round counter, mode buttons, start/pause and reset, and a
settings button.  All timing lives in ``TimerEngine``; the panel only
reads state and forwards clicks.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame,
)

from ..timer.engine import TimerEngine, format_time
from ..timer.store import TimerMode, TimerState, TimerStatus
from .completion_popup import CompletionPopup
from .settings_dialog import SettingsDialog


MODE_COLORS: dict[TimerMode, str] = {
    TimerMode.FOCUS:       "#2563EB",
    TimerMode.SHORT_BREAK: "#16A34A",
    TimerMode.LONG_BREAK:  "#9333EA",
}

MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.FOCUS:       "Focus",
    TimerMode.SHORT_BREAK: "Short Break",
    TimerMode.LONG_BREAK:  "Long Break",
}


class TimerWidget(QWidget):
    """The small always-visible timer card."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._expanded: bool = False
        self._styled_mode: TimerMode | None = None
        self._popup = CompletionPopup(self)
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(engine.state)
        self.set_expanded(False)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self._card = QFrame(self)
        self._card.setObjectName("timerCard")
        root.addWidget(self._card)

        layout = QVBoxLayout(self._card)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(10)

        # ── header: toggle, round, clock, settings ───────────────────
        header = QHBoxLayout()
        header.setSpacing(8)

        self._toggle_btn = QPushButton("⏱", self._card)
        self._toggle_btn.setFlat(True)
        self._toggle_btn.setToolTip("Show timer controls")
        header.addWidget(self._toggle_btn)

        self._round_label = QLabel("", self._card)
        self._round_label.setStyleSheet("font-weight: 600; font-size: 12px;")
        header.addWidget(self._round_label)

        header.addStretch()

        self._time_label = QLabel("00:00", self._card)
        self._time_label.setStyleSheet(
            "font-family: monospace; font-size: 20px; font-weight: 700;"
        )
        header.addWidget(self._time_label)

        self._settings_btn = QPushButton("⚙", self._card)
        self._settings_btn.setFlat(True)
        self._settings_btn.setToolTip("Timer Settings")
        header.addWidget(self._settings_btn)

        layout.addLayout(header)

        # ── expanded controls ────────────────────────────────────────
        self._controls = QWidget(self._card)
        controls = QVBoxLayout(self._controls)
        controls.setContentsMargins(0, 0, 0, 0)
        controls.setSpacing(8)

        mode_row = QHBoxLayout()
        mode_row.setSpacing(6)
        self._mode_buttons: dict[TimerMode, QPushButton] = {}
        for mode in TimerMode:
            btn = QPushButton(MODE_LABELS[mode], self._controls)
            btn.setCheckable(True)
            btn.setObjectName("modeButton")
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        controls.addLayout(mode_row)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)
        self._start_pause_btn = QPushButton("Start", self._controls)
        self._start_pause_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", self._controls)
        self._reset_btn.setObjectName("secondaryButton")
        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        btn_row.addStretch()
        controls.addLayout(btn_row)

        layout.addWidget(self._controls)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(lambda: self.set_expanded(not self._expanded))
        self._settings_btn.clicked.connect(self._open_settings)
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(self._engine.reset)
        for mode, btn in self._mode_buttons.items():
            btn.clicked.connect(lambda _checked=False, m=mode: self._engine.change_mode(m))

        self._popup.finished.connect(self._on_popup_finished)

        self._engine.tick.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.completed.connect(self._on_completed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._engine.is_running:
            self._engine.pause()
        else:
            self._engine.start()

    def _on_state_changed(self, state: TimerState) -> None:
        self._start_pause_btn.setText(
            "Pause" if state.status == TimerStatus.RUNNING else "Start"
        )
        self._round_label.setText(
            f"Round {state.current_round}/{state.settings.rounds_per_cycle}"
        )
        for mode, btn in self._mode_buttons.items():
            btn.setChecked(mode == state.mode)
        if state.mode != self._styled_mode:
            self._styled_mode = state.mode
            self._card.setStyleSheet(
                f"#timerCard {{ background-color: {MODE_COLORS[state.mode]};"
                " border-radius: 8px; } QLabel, QPushButton { color: white; }"
            )
        self._refresh_display(state.remaining_seconds)

    def _refresh_display(self, remaining: int) -> None:
        self._time_label.setText(format_time(remaining))

    def _on_completed(self, data: dict) -> None:
        self._popup.show_for(data["completed_mode"])

    def _on_popup_finished(self, _result: int) -> None:
        self._engine.acknowledge_completion()

    def _open_settings(self) -> None:
        dialog = SettingsDialog(self._engine.settings, self)
        if dialog.exec():
            self.apply_settings(dialog.values())

    # ── public ────────────────────────────────────────────────────────────

    def apply_settings(self, values: dict) -> None:
        self._engine.update_settings(**values)

    @property
    def is_expanded(self) -> bool:
        return self._expanded

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def round_text(self) -> str:
        return self._round_label.text()

    def set_expanded(self, expanded: bool) -> None:
        self._expanded = expanded
        self._controls.setVisible(expanded)
        self._round_label.setVisible(expanded)
        self._settings_btn.setVisible(expanded)
        self._toggle_btn.setToolTip(
            "Hide timer controls" if expanded else "Show timer controls"
        )
        self.adjustSize()
