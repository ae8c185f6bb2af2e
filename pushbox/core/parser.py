"""Level parser: turns a descriptor's textual map into the initial game state."""

from __future__ import annotations

import logging
from typing import List, Sequence

from pushbox.core.board import Board, board_from_rows
from pushbox.core.levels import LevelDescriptor
from pushbox.core.state import GameState
from pushbox.core.tiles import Position, Tile, is_player

logger = logging.getLogger(__name__)


class InvalidLevelFormat(ValueError):
    """Raised at load time for maps that cannot produce a playable board."""


def parse_map(rows: Sequence[str]) -> Board:
    """Build a board from legend rows. Ragged rows are kept as they are."""
    if not rows:
        raise InvalidLevelFormat("Level map is empty")

    grid: List[List[Tile]] = []
    players: List[Position] = []
    for y, line in enumerate(rows):
        row: List[Tile] = []
        for x, char in enumerate(line):
            tile = Tile.from_char(char)
            if is_player(tile):
                players.append((x, y))
            row.append(tile)
        grid.append(row)

    if not players:
        raise InvalidLevelFormat("Level map has no player ('@' or '+')")
    if len(players) > 1:
        raise InvalidLevelFormat(
            f"Level map has {len(players)} players, expected exactly one: {players}"
        )
    return board_from_rows(grid, players[0])


def initialize_level(descriptor: LevelDescriptor) -> GameState:
    """Fresh state for a level load or restart."""
    try:
        board = parse_map(descriptor.map)
    except InvalidLevelFormat as e:
        raise InvalidLevelFormat(f"Level {descriptor.id}: {e}") from e
    logger.debug("Initialized level %s (%dx%d)", descriptor.id, board.width, board.height)
    return GameState(board=board)
