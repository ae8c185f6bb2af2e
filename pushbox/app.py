"""Application entry point: replays the bundled level demos headlessly."""

import logging
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from pushbox.core.levels import LevelRepository
from pushbox.core.progress import ProgressStore
from pushbox.core.session import GameSession
from pushbox.ui.playback import DEFAULT_INTERVAL_MS, PlaybackController


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


class DemoRunner:
    """Plays every level that ships a demo, one after another."""

    def __init__(self, app: QCoreApplication, session: GameSession, interval_ms: int) -> None:
        self._app = app
        self._session = session
        self._pending = [i for i, level in enumerate(session.levels) if level.demo_moves]
        self._controller = PlaybackController(session, interval_ms=interval_ms)
        self._controller.finished.connect(self._on_finished)

    def start(self) -> None:
        if not self._pending:
            logging.warning("No level ships demo moves; nothing to replay")
            self._app.quit()
            return
        self._play_next()

    def _play_next(self) -> None:
        self._session.load_level(self._pending.pop(0))
        self._controller.start()

    def _on_finished(self, status: str) -> None:
        state = self._session.state
        logging.info(
            "Level %s demo %s: moves=%d pushes=%d complete=%s stars=%d",
            self._session.level.id,
            status,
            state.moves,
            state.pushes,
            state.level_complete,
            state.stars,
        )
        if self._pending:
            self._play_next()
        else:
            logging.info("Total stars: %d", self._session.progress.total_stars())
            self._app.quit()


def run() -> None:
    """Load the level catalog and replay each demo at the default pace."""
    configure_logging()
    app = QCoreApplication(sys.argv)
    app.setApplicationName("Pushbox")

    levels = LevelRepository()
    session = GameSession(levels.all(), progress=ProgressStore())
    runner = DemoRunner(app, session, DEFAULT_INTERVAL_MS)
    # quit() is ignored before exec() starts the loop.
    QTimer.singleShot(0, runner.start)
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
