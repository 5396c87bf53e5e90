"""Study timer: a Pomodoro-style focus/break countdown."""

__version__ = "0.1.0"
