"""Tile and direction types shared by the parser and the move resolver.

A tile merges terrain (floor, spot, wall, void) and occupant (player, box)
into one value, so every cell of a board holds exactly one ``Tile``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

Position = Tuple[int, int]  # (x, y) == (column, row)


class Tile(Enum):
    WALL = "#"
    FLOOR = " "
    SPOT = "."
    BOX = "$"
    PLAYER = "@"
    BOX_ON_SPOT = "*"
    PLAYER_ON_SPOT = "+"
    VOID = "_"

    @classmethod
    def from_char(cls, char: str) -> "Tile":
        """Map a level legend character to a tile. Unknown characters are floor."""
        if char == Tile.VOID.value:
            return Tile.FLOOR
        try:
            return cls(char)
        except ValueError:
            return Tile.FLOOR


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Position:
        return _OFFSETS[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["Direction"]:
        """Decode a demo move character (u/d/l/r, any case)."""
        return _CODES.get(code.lower()) if len(code) == 1 else None


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_CODES = {
    "u": Direction.UP,
    "d": Direction.DOWN,
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
}

_SPOT_BASED = frozenset({Tile.SPOT, Tile.BOX_ON_SPOT, Tile.PLAYER_ON_SPOT})


def is_box(tile: Tile) -> bool:
    return tile is Tile.BOX or tile is Tile.BOX_ON_SPOT


def is_wall(tile: Tile) -> bool:
    return tile is Tile.WALL


def is_player(tile: Tile) -> bool:
    return tile is Tile.PLAYER or tile is Tile.PLAYER_ON_SPOT


def base_tile(tile: Tile) -> Tile:
    """Terrain left behind when the occupant moves off ``tile``."""
    return Tile.SPOT if tile in _SPOT_BASED else Tile.FLOOR


def occupied_tile(target: Tile, entity: Tile) -> Tile:
    """Tile produced when ``entity`` (PLAYER or BOX) moves onto ``target``.

    Only the base terrain of ``target`` matters: a spot-based target yields the
    ``*_ON_SPOT`` variant.
    """
    on_spot = target in _SPOT_BASED
    if entity is Tile.PLAYER:
        return Tile.PLAYER_ON_SPOT if on_spot else Tile.PLAYER
    if entity is Tile.BOX:
        return Tile.BOX_ON_SPOT if on_spot else Tile.BOX
    raise ValueError(f"Not a movable entity: {entity!r}")
