"""Shared builders for engine tests."""

from __future__ import annotations

from typing import Optional

from pushbox.core.levels import LevelDescriptor


def make_level(
    *rows: str,
    level_id: int = 1,
    par_moves: int = 10,
    par_pushes: int = 3,
    hint: Optional[str] = None,
    demo_moves: Optional[str] = None,
) -> LevelDescriptor:
    return LevelDescriptor(
        id=level_id,
        map=tuple(rows),
        par_moves=par_moves,
        par_pushes=par_pushes,
        hint=hint,
        demo_moves=demo_moves,
    )
