"""Shared pytest fixtures for the study timer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from studytimer.timer.engine import TimerEngine
from studytimer.timer.store import TimerStore, make_settings

from helpers import RecordingAlert, RecordingTickSource


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def alert():
    return RecordingAlert()


@pytest.fixture
def ticks():
    return RecordingTickSource()


@pytest.fixture
def engine(qapp, alert, ticks):
    """Default settings (25/5/15, 4 rounds), fake tick source."""
    return TimerEngine(parent=None, alert=alert, tick_source=ticks)


@pytest.fixture
def short_engine(qapp, alert, ticks):
    """One-minute phases, two rounds per cycle."""
    store = TimerStore(make_settings(
        focus_minutes=1,
        short_break_minutes=1,
        long_break_minutes=1,
        rounds_per_cycle=2,
    ))
    return TimerEngine(parent=None, store=store, alert=alert, tick_source=ticks)


@pytest.fixture
def qt_engine(qapp):
    """Engine driven by a real QTimer-backed tick source, no alert."""
    return TimerEngine(parent=None)
