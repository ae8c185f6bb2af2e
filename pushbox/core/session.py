from __future__ import annotations

import logging
from typing import List, Optional

from pushbox.core.levels import LevelDescriptor
from pushbox.core.moves import process_move
from pushbox.core.parser import initialize_level
from pushbox.core.progress import ProgressStore
from pushbox.core.state import GameState
from pushbox.core.tiles import Direction

logger = logging.getLogger(__name__)

HINT_RETRY_THRESHOLD = 3


class GameSession:
    """Holds the level being played and routes input into the move resolver.

    The session owns the only reference to the current ``GameState``; each
    accepted move swaps it for the resolver's new snapshot.
    """

    def __init__(
        self,
        levels: List[LevelDescriptor],
        progress: Optional[ProgressStore] = None,
        start_index: int = 0,
    ) -> None:
        """Start a session on ``levels[start_index]``."""
        if not levels:
            raise ValueError("GameSession needs at least one level")
        self._levels = list(levels)
        self._progress = progress if progress is not None else ProgressStore()
        self._index = 0
        self._retry_count = 0
        self._state: GameState
        self.load_level(start_index)

    @property
    def index(self) -> int:
        """Index of the current level in the catalog (0-based)."""
        return self._index

    @property
    def level(self) -> LevelDescriptor:
        return self._levels[self._index]

    @property
    def levels(self) -> List[LevelDescriptor]:
        return list(self._levels)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def progress(self) -> ProgressStore:
        return self._progress

    @property
    def retry_count(self) -> int:
        """Number of restarts since the level was loaded."""
        return self._retry_count

    @property
    def hint_available(self) -> bool:
        """The hint is offered after a few restarts, when the level has one."""
        return self._retry_count >= HINT_RETRY_THRESHOLD and bool(self.level.hint)

    @property
    def demo_available(self) -> bool:
        return bool(self.level.demo_moves)

    def load_level(self, index: int) -> GameState:
        if index < 0 or index >= len(self._levels):
            raise IndexError(f"Level index out of range: {index}")
        self._state = initialize_level(self._levels[index])
        self._index = index
        self._retry_count = 0
        logger.info("Loaded level %s", self._levels[index].id)
        return self._state

    def restart(self) -> GameState:
        self._state = initialize_level(self.level)
        self._retry_count += 1
        return self._state

    def reset_board(self) -> GameState:
        """Reload the current level without counting it as a retry."""
        self._state = initialize_level(self.level)
        return self._state

    def next_level(self) -> bool:
        if self._index + 1 >= len(self._levels):
            return False
        self.load_level(self._index + 1)
        return True

    def previous_level(self) -> bool:
        if self._index == 0:
            return False
        self.load_level(self._index - 1)
        return True

    def move(self, direction: Direction) -> bool:
        """Apply one directional input. Returns True if the board changed."""
        new_state = process_move(self._state, direction, self.level)
        if new_state is self._state:
            return False
        self._state = new_state
        if new_state.level_complete:
            logger.info(
                "Level %s complete in %d moves / %d pushes (%d stars)",
                self.level.id,
                new_state.moves,
                new_state.pushes,
                new_state.stars,
            )
            self._progress.record(self.level.id, new_state.stars)
        return True
