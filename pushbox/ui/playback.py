"""Qt timer that drives a demo replay one move per tick."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from pushbox.core.playback import DemoPlayback, PlaybackStatus
from pushbox.core.session import GameSession

DEFAULT_INTERVAL_MS = 200


class PlaybackController(QObject):
    """Replays the current level's demo moves at a fixed interval.

    ``stateChanged`` carries the session's new ``GameState`` after every tick;
    ``finished`` carries the ``PlaybackStatus`` value once the replay stops.
    """

    stateChanged = Signal(object)
    finished = Signal(str)

    def __init__(
        self,
        session: GameSession,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._playback = DemoPlayback(session)
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def status(self) -> PlaybackStatus:
        return self._playback.status

    @property
    def is_running(self) -> bool:
        return self._playback.is_running

    def start(self) -> None:
        self._timer.stop()
        self._playback = DemoPlayback(self._session)
        state = self._playback.start()
        self.stateChanged.emit(state)
        if self._playback.is_running:
            self._timer.start()
        else:
            self.finished.emit(self._playback.status.value)

    def stop(self) -> None:
        """Cancel a running replay; the board keeps whatever state it reached."""
        if not self._playback.is_running:
            return
        self._timer.stop()
        self._playback.cancel()
        self.finished.emit(self._playback.status.value)

    def _on_tick(self) -> None:
        state = self._playback.step()
        if state is not None:
            self.stateChanged.emit(state)
        if not self._playback.is_running:
            self._timer.stop()
            self.finished.emit(self._playback.status.value)
