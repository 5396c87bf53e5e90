"""Shared test helpers for the study timer."""

from studytimer.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RecordingTickSource:
    """Stand-in for ``TickSource``; ticks are driven by hand in tests."""

    def __init__(self):
        self.is_armed = False
        self.arm_calls = 0
        self.disarm_calls = 0
        self.activations = 0

    def arm(self):
        self.arm_calls += 1
        if not self.is_armed:
            self.is_armed = True
            self.activations += 1

    def disarm(self):
        self.disarm_calls += 1
        self.is_armed = False


class RecordingAlert:
    def __init__(self):
        self.plays = 0

    def play_alert(self):
        self.plays += 1


class FailingAlert:
    def play_alert(self):
        raise RuntimeError("no audio device")


def run_ticks(engine: TimerEngine, count: int) -> None:
    for _ in range(count):
        engine._on_tick()


def complete_countdown(engine: TimerEngine) -> None:
    """Fast-complete the current countdown by jumping to the last tick."""
    engine.store.set_remaining(1)
    engine._on_tick()
