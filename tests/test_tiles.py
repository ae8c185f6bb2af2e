"""Tests for pushbox.core.tiles – tile legend and overlay helpers."""

from __future__ import annotations

import pytest

from pushbox.core.tiles import (
    Direction,
    Tile,
    base_tile,
    is_box,
    is_player,
    is_wall,
    occupied_tile,
)


# ---------------------------------------------------------------------------
# Tile.from_char
# ---------------------------------------------------------------------------

class TestFromChar:
    @pytest.mark.parametrize(
        "char, tile",
        [
            ("#", Tile.WALL),
            (" ", Tile.FLOOR),
            (".", Tile.SPOT),
            ("$", Tile.BOX),
            ("@", Tile.PLAYER),
            ("*", Tile.BOX_ON_SPOT),
            ("+", Tile.PLAYER_ON_SPOT),
        ],
    )
    def test_legend(self, char, tile):
        assert Tile.from_char(char) is tile

    @pytest.mark.parametrize("char", ["x", "-", "_", "0"])
    def test_unknown_is_floor(self, char):
        assert Tile.from_char(char) is Tile.FLOOR


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------

class TestDirection:
    def test_offsets(self):
        assert Direction.UP.offset == (0, -1)
        assert Direction.DOWN.offset == (0, 1)
        assert Direction.LEFT.offset == (-1, 0)
        assert Direction.RIGHT.offset == (1, 0)

    def test_from_code_case_insensitive(self):
        assert Direction.from_code("u") is Direction.UP
        assert Direction.from_code("D") is Direction.DOWN
        assert Direction.from_code("L") is Direction.LEFT
        assert Direction.from_code("r") is Direction.RIGHT

    @pytest.mark.parametrize("code", ["x", " ", "", "ud"])
    def test_from_code_invalid(self, code):
        assert Direction.from_code(code) is None


# ---------------------------------------------------------------------------
# predicates
# ---------------------------------------------------------------------------

class TestPredicates:
    def test_is_box(self):
        assert is_box(Tile.BOX)
        assert is_box(Tile.BOX_ON_SPOT)
        assert not is_box(Tile.SPOT)

    def test_is_wall(self):
        assert is_wall(Tile.WALL)
        assert not is_wall(Tile.VOID)

    def test_is_player(self):
        assert is_player(Tile.PLAYER)
        assert is_player(Tile.PLAYER_ON_SPOT)
        assert not is_player(Tile.BOX)

    @pytest.mark.parametrize(
        "tile, base",
        [
            (Tile.PLAYER_ON_SPOT, Tile.SPOT),
            (Tile.BOX_ON_SPOT, Tile.SPOT),
            (Tile.SPOT, Tile.SPOT),
            (Tile.PLAYER, Tile.FLOOR),
            (Tile.BOX, Tile.FLOOR),
            (Tile.FLOOR, Tile.FLOOR),
        ],
    )
    def test_base_tile(self, tile, base):
        assert base_tile(tile) is base

    def test_occupied_tile_on_spot(self):
        assert occupied_tile(Tile.SPOT, Tile.PLAYER) is Tile.PLAYER_ON_SPOT
        assert occupied_tile(Tile.SPOT, Tile.BOX) is Tile.BOX_ON_SPOT

    def test_occupied_tile_on_floor(self):
        assert occupied_tile(Tile.FLOOR, Tile.PLAYER) is Tile.PLAYER
        assert occupied_tile(Tile.FLOOR, Tile.BOX) is Tile.BOX

    def test_occupied_tile_rejects_terrain(self):
        with pytest.raises(ValueError):
            occupied_tile(Tile.FLOOR, Tile.WALL)
