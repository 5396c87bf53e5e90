"""Allow running the study timer as a module: python -m studytimer."""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from .audio.alert import AlertSound
from .settings import load_settings
from .timer.engine import TimerEngine
from .timer.store import TimerStore
from .ui.timer_widget import TimerWidget


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("studytimer")


def main() -> None:
    logger = setup_logging()
    settings = load_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("Study Timer")
    app.setOrganizationName("StudyTimer")

    alert = AlertSound(
        enabled=settings.sound_enabled,
        volume=settings.sound_volume,
    )
    engine = TimerEngine(
        store=TimerStore(settings.timer_settings()),
        alert=alert,
        auto_continue=settings.auto_continue,
        logger=logging.getLogger("studytimer.timer"),
    )
    # keep the alert alive as long as the engine
    alert.setParent(engine)

    window = TimerWidget(engine)
    window.setWindowTitle("Study Timer")
    if settings.always_on_top:
        window.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
    window.show()
    logger.info("Study timer ready (%s)", engine.formatted_time)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
