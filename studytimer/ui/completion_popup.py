"""Dismissible prompt shown when a countdown finishes."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from ..timer.store import TimerMode


FOCUS_DONE_MESSAGE = "Focus session completed! Take a break."
BREAK_DONE_MESSAGE = "Break time over! Ready to focus again?"


def completion_message(completed_mode: TimerMode) -> str:
    if completed_mode == TimerMode.FOCUS:
        return FOCUS_DONE_MESSAGE
    return BREAK_DONE_MESSAGE


class CompletionPopup(QDialog):
    """Window-modal prompt with a single Continue button.

    Any way of closing it emits ``finished``; the timer panel treats that
    as the acknowledgement.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Timer")
        self.setWindowModality(Qt.WindowModality.WindowModal)
        self.setMinimumWidth(280)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._message = QLabel("", self)
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message.setWordWrap(True)
        self._message.setStyleSheet("font-size: 15px; font-weight: 600;")
        layout.addWidget(self._message)

        self._continue_btn = QPushButton("Continue", self)
        self._continue_btn.setObjectName("primaryButton")
        self._continue_btn.setDefault(True)
        self._continue_btn.clicked.connect(self.accept)
        layout.addWidget(self._continue_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    @property
    def message(self) -> str:
        return self._message.text()

    def show_for(self, completed_mode: TimerMode) -> None:
        self._message.setText(completion_message(completed_mode))
        self.open()
