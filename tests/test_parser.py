"""Tests for pushbox.core.parser – map text to initial game state."""

from __future__ import annotations

import pytest

from helpers import make_level
from pushbox.core.parser import InvalidLevelFormat, initialize_level, parse_map
from pushbox.core.tiles import Tile


# ---------------------------------------------------------------------------
# parse_map
# ---------------------------------------------------------------------------

class TestParseMap:
    def test_single_row(self):
        board = parse_map(["#@$.#"])
        assert board.rows == ((Tile.WALL, Tile.PLAYER, Tile.BOX, Tile.SPOT, Tile.WALL),)
        assert board.player == (1, 0)

    def test_full_legend(self):
        board = parse_map(["# .$", "@*x "])
        assert board.rows[0] == (Tile.WALL, Tile.FLOOR, Tile.SPOT, Tile.BOX)
        assert board.rows[1] == (Tile.PLAYER, Tile.BOX_ON_SPOT, Tile.FLOOR, Tile.FLOOR)

    def test_player_on_spot(self):
        board = parse_map(["###", "#+#", "###"])
        assert board.player == (1, 1)
        assert board.at(1, 1) is Tile.PLAYER_ON_SPOT

    def test_ragged_rows_preserved(self):
        board = parse_map(["  #####", "#@$.#", "##"])
        assert [len(row) for row in board.rows] == [7, 5, 2]

    def test_render_matches_input(self):
        rows = ["  ##### ", "###   # ", "#.@$  # ", "########"]
        assert parse_map(rows).render() == rows


# ---------------------------------------------------------------------------
# malformed maps
# ---------------------------------------------------------------------------

class TestInvalidMaps:
    def test_empty_map(self):
        with pytest.raises(InvalidLevelFormat, match="empty"):
            parse_map([])

    def test_no_player(self):
        with pytest.raises(InvalidLevelFormat, match="no player"):
            parse_map(["#$.#"])

    def test_two_players(self):
        with pytest.raises(InvalidLevelFormat, match="2 players"):
            parse_map(["#@ +#"])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_map(["###"])

    def test_initialize_level_names_level(self):
        with pytest.raises(InvalidLevelFormat, match="Level 7"):
            initialize_level(make_level("#$.#", level_id=7))


# ---------------------------------------------------------------------------
# initialize_level
# ---------------------------------------------------------------------------

class TestInitializeLevel:
    def test_counters_start_at_zero(self):
        state = initialize_level(make_level("#@$.#"))
        assert state.moves == 0
        assert state.pushes == 0
        assert state.level_complete is False
        assert state.stars == 0

    def test_player_position(self):
        state = initialize_level(make_level("#####", "# @ #", "#####"))
        assert state.player == (2, 1)
        assert state.board.player == (2, 1)

    def test_fresh_state_each_call(self):
        level = make_level("#@$.#")
        a = initialize_level(level)
        b = initialize_level(level)
        assert a == b
        assert a is not b

    def test_already_placed_boxes_not_complete(self):
        state = initialize_level(make_level("#@*#"))
        assert state.level_complete is False
