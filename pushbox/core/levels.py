from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_DIR = Path(__file__).resolve().parent.parent / "data" / "levels"


@dataclass(frozen=True)
class LevelDescriptor:
    id: int
    map: Tuple[str, ...]
    par_moves: int
    par_pushes: int
    hint: Optional[str] = None
    demo_moves: Optional[str] = None


class LevelRepository:
    """Ordered catalog of level descriptors read from ``level*.yaml`` files."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else DEFAULT_LEVELS_DIR
        self._levels = self._load_levels()

    def __len__(self) -> int:
        return len(self._levels)

    def all(self) -> List[LevelDescriptor]:
        return list(self._levels.values())

    def get(self, level_id: int) -> LevelDescriptor:
        return self._levels[level_id]

    def index_of(self, level_id: int) -> int:
        for index, key in enumerate(self._levels):
            if key == level_id:
                return index
        raise KeyError(level_id)

    def _load_levels(self) -> Dict[int, LevelDescriptor]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[int, LevelDescriptor] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            level = _parse_level(level_path.name, raw)
            if level.id in levels:
                raise ValueError(f"{level_path.name}: duplicate level id {level.id}")
            levels[level.id] = level

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        logger.info("Loaded %d levels from %s", len(levels), base_dir)
        return levels


def _parse_level(name: str, raw: object) -> LevelDescriptor:
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{name}: expected YAML mapping with 'id', 'map' and par counts")

    level_id = raw.get("id")
    if not isinstance(level_id, int) or isinstance(level_id, bool):
        raise ValueError(f"{name}: missing or invalid 'id'")

    rows = raw.get("map")
    if not isinstance(rows, list) or not rows:
        raise ValueError(f"{name}: 'map' must be a non-empty list of rows")
    if not all(isinstance(row, str) for row in rows):
        raise ValueError(f"{name}: every 'map' row must be a string")

    par = {}
    for field in ("par_moves", "par_pushes"):
        value = raw.get(field)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"{name}: missing or invalid '{field}'")
        par[field] = value

    hint = raw.get("hint")
    if hint is not None:
        hint = str(hint).strip() or None
    demo = raw.get("demo_moves")
    if demo is not None:
        demo = str(demo).strip() or None

    return LevelDescriptor(
        id=level_id,
        map=tuple(rows),
        par_moves=par["par_moves"],
        par_pushes=par["par_pushes"],
        hint=hint,
        demo_moves=demo,
    )
