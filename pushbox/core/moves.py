from __future__ import annotations

import logging

from pushbox.core.board import Board
from pushbox.core.levels import LevelDescriptor
from pushbox.core.state import GameState
from pushbox.core.tiles import (
    Direction,
    Position,
    Tile,
    base_tile,
    is_box,
    is_wall,
    occupied_tile,
)

logger = logging.getLogger(__name__)

THREE_STAR_RATIO = 1.2
TWO_STAR_RATIO = 1.6


def next_position(pos: Position, direction: Direction) -> Position:
    dx, dy = direction.offset
    return pos[0] + dx, pos[1] + dy


def _blocked(board: Board, pos: Position) -> bool:
    """Out of bounds, void and wall cells cannot be entered."""
    if not board.in_bounds(*pos):
        return True
    tile = board.at(*pos)
    return is_wall(tile) or tile is Tile.VOID


def is_solved(board: Board) -> bool:
    """A level is solved when no box is left off a spot."""
    return all(cell is not Tile.BOX for cell in board.cells())


def calculate_stars(moves: int, pushes: int, par_moves: int, par_pushes: int) -> int:
    if moves <= par_moves * THREE_STAR_RATIO and pushes <= par_pushes * THREE_STAR_RATIO:
        return 3
    if moves <= par_moves * TWO_STAR_RATIO or pushes <= par_pushes * TWO_STAR_RATIO:
        return 2
    return 1


def process_move(state: GameState, direction: Direction, level: LevelDescriptor) -> GameState:
    """Resolve one step of the player.

    Returns ``state`` itself when nothing happens (level already complete,
    wall, out of bounds, blocked push); otherwise a brand-new state.
    """
    if state.level_complete:
        return state

    board = state.board
    origin = board.player
    target = next_position(origin, direction)
    if _blocked(board, target):
        return state

    target_tile = board.at(*target)
    origin_tile = board.at(*origin)
    moves, pushes = state.moves + 1, state.pushes

    if not is_box(target_tile):
        changes = {
            origin: base_tile(origin_tile),
            target: occupied_tile(target_tile, Tile.PLAYER),
        }
    else:
        box_target = next_position(target, direction)
        if _blocked(board, box_target):
            logger.debug("Push %s from %s blocked at %s", direction.name, target, box_target)
            return state
        box_target_tile = board.at(*box_target)
        if is_box(box_target_tile):
            logger.debug("Push %s from %s blocked by box at %s", direction.name, target, box_target)
            return state
        changes = {
            origin: base_tile(origin_tile),
            target: occupied_tile(base_tile(target_tile), Tile.PLAYER),
            box_target: occupied_tile(box_target_tile, Tile.BOX),
        }
        pushes += 1

    new_board = board.with_cells(changes, player=target)
    complete = is_solved(new_board)
    stars = calculate_stars(moves, pushes, level.par_moves, level.par_pushes) if complete else 0
    return GameState(
        board=new_board,
        moves=moves,
        pushes=pushes,
        level_complete=complete,
        stars=stars,
    )
