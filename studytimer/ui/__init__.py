"""UI package — floating timer panel and its dialogs."""

from .completion_popup import CompletionPopup, completion_message
from .settings_dialog import SettingsDialog
from .timer_widget import TimerWidget

__all__ = [
    "CompletionPopup",
    "completion_message",
    "SettingsDialog",
    "TimerWidget",
]
