from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pushbox.core.board import Board, Row
from pushbox.core.tiles import Position


@dataclass(frozen=True)
class GameState:
    """Snapshot of a level in play. Every accepted move builds a new one."""

    board: Board
    moves: int = 0
    pushes: int = 0
    level_complete: bool = False
    stars: int = 0  # 0 until the level is complete

    @property
    def grid(self) -> Tuple[Row, ...]:
        return self.board.rows

    @property
    def player(self) -> Position:
        return self.board.player
