"""Timer settings dialog.

Spin boxes for the three durations and the cycle length.  Nothing is
applied until Save; Cancel discards the edits.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QPushButton, QWidget,
)

from ..timer.store import SETTINGS_BOUNDS, TimerSettings


class SettingsDialog(QDialog):
    """Modal dialog for timer durations and rounds."""

    def __init__(
        self,
        settings: TimerSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Timer Settings")
        self.setMinimumWidth(320)
        self.setModal(True)

        self._settings = settings

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        title = QLabel("Timer Settings")
        title.setStyleSheet("font-size: 15px; font-weight: 700;")
        root.addWidget(title)

        form = QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._focus_spin = self._spin("focus_minutes", " min")
        form.addRow("Focus Time:", self._focus_spin)

        self._short_spin = self._spin("short_break_minutes", " min")
        form.addRow("Short Break:", self._short_spin)

        self._long_spin = self._spin("long_break_minutes", " min")
        form.addRow("Long Break:", self._long_spin)

        self._rounds_spin = self._spin("rounds_per_cycle")
        form.addRow("Rounds before Long Break:", self._rounds_spin)

        root.addLayout(form)

        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self.accept)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    @staticmethod
    def _spin(field: str, suffix: str = "") -> QSpinBox:
        low, high = SETTINGS_BOUNDS[field]
        spin = QSpinBox()
        spin.setRange(low, high)
        if suffix:
            spin.setSuffix(suffix)
        return spin

    def _populate(self) -> None:
        s = self._settings
        self._focus_spin.setValue(s.focus_minutes)
        self._short_spin.setValue(s.short_break_minutes)
        self._long_spin.setValue(s.long_break_minutes)
        self._rounds_spin.setValue(s.rounds_per_cycle)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def values(self) -> dict[str, int]:
        """The edited fields, ready for ``TimerEngine.update_settings``."""
        return {
            "focus_minutes": self._focus_spin.value(),
            "short_break_minutes": self._short_spin.value(),
            "long_break_minutes": self._long_spin.value(),
            "rounds_per_cycle": self._rounds_spin.value(),
        }
