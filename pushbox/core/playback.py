"""Step-by-step replay of a level's prerecorded demo moves.

Nothing here knows about time: a driver (see ``pushbox.ui.playback``) calls
``DemoPlayback.step`` at whatever pace it likes and may stop between any two
calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, Optional

from pushbox.core.session import GameSession
from pushbox.core.state import GameState
from pushbox.core.tiles import Direction

logger = logging.getLogger(__name__)


class PlaybackStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    INVALID_MOVE_CODE = "invalid_move_code"
    CANCELLED = "cancelled"


def demo_directions(moves: str) -> Iterator[Direction]:
    """Yield directions for ``moves``, stopping at the first unknown character."""
    for code in moves:
        direction = Direction.from_code(code)
        if direction is None:
            return
        yield direction


class DemoPlayback:
    """Replays the current level's demo against a ``GameSession``.

    The replay only drives the level and board it started on: if the session
    loads another level or restarts, the next ``step`` cancels it.
    """

    def __init__(self, session: GameSession) -> None:
        self._session = session
        self._moves = session.level.demo_moves or ""
        self._directions: List[Direction] = []
        self._cursor = 0
        self._status = PlaybackStatus.IDLE
        self._level_index = session.index
        self._last_state: Optional[GameState] = None

    @property
    def status(self) -> PlaybackStatus:
        return self._status

    @property
    def cursor(self) -> int:
        """Index of the next demo character to play."""
        return self._cursor

    @property
    def is_running(self) -> bool:
        return self._status is PlaybackStatus.RUNNING

    def start(self) -> GameState:
        """Reset the level and arm the replay from the first character."""
        self._moves = self._session.level.demo_moves or ""
        self._directions = list(demo_directions(self._moves))
        self._cursor = 0
        state = self._session.reset_board()
        self._level_index = self._session.index
        self._last_state = state
        if not self._moves:
            self._status = PlaybackStatus.FINISHED
        else:
            self._status = PlaybackStatus.RUNNING
            logger.info("Replaying demo for level %s", self._session.level.id)
        return state

    def cancel(self) -> None:
        if self._status is PlaybackStatus.RUNNING:
            self._status = PlaybackStatus.CANCELLED
            logger.info("Demo for level %s cancelled at move %d", self._session.level.id, self._cursor)

    def step(self) -> Optional[GameState]:
        """Play one demo character. Returns the current state, or None once stopped.

        A rejected move still consumes its character.
        """
        if self._status is not PlaybackStatus.RUNNING:
            return None
        if self._session.index != self._level_index or self._session.state is not self._last_state:
            self.cancel()
            return None
        if self._cursor >= len(self._moves) or self._session.state.level_complete:
            self._status = PlaybackStatus.FINISHED
            return None

        if self._cursor >= len(self._directions):
            logger.warning(
                "Demo for level %s stopped at invalid move code %r (position %d)",
                self._session.level.id,
                self._moves[self._cursor],
                self._cursor,
            )
            self._status = PlaybackStatus.INVALID_MOVE_CODE
            return None

        self._session.move(self._directions[self._cursor])
        self._cursor += 1
        self._last_state = self._session.state
        if self._cursor >= len(self._moves) or self._session.state.level_complete:
            self._status = PlaybackStatus.FINISHED
        return self._last_state
