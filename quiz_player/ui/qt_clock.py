"""Session clock ticking on the Qt event loop."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from quiz_player.constants.quiz_constants import TICK_INTERVAL_MS
from quiz_player.core.services.session_clock import SessionClock


class QtSessionClock(SessionClock):
    """Countdown driven by a single repeating ``QTimer``."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        super().__init__()
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._tick)

    def _start_ticker(self) -> None:
        self._timer.start()

    def _stop_ticker(self) -> None:
        self._timer.stop()
