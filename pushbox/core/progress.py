from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from pushbox.core.levels import LevelDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelCompletion:
    level_id: int
    stars: int = 0
    completed: bool = False


class ProgressStore:
    """Best star rating per level. Held in memory for the lifetime of the app."""

    def __init__(self) -> None:
        self._progress: Dict[int, LevelCompletion] = {}

    def get(self, level_id: int) -> Optional[LevelCompletion]:
        return self._progress.get(level_id)

    def stars_for(self, level_id: int) -> int:
        completion = self._progress.get(level_id)
        return completion.stars if completion else 0

    def all(self) -> List[LevelCompletion]:
        return list(self._progress.values())

    def total_stars(self) -> int:
        return sum(c.stars for c in self._progress.values())

    def record(self, level_id: int, stars: int) -> bool:
        """Store a finished run. Only a strictly better star count replaces an earlier one."""
        existing = self._progress.get(level_id)
        if existing is not None and stars <= existing.stars:
            return False
        self._progress[level_id] = LevelCompletion(level_id=level_id, stars=stars, completed=True)
        logger.info("Level %s: new best %d star(s)", level_id, stars)
        return True

    def is_unlocked(self, levels: Sequence[LevelDescriptor], index: int) -> bool:
        """The first level is always open; later ones need stars on the previous level."""
        if index < 0 or index >= len(levels):
            return False
        if index == 0:
            return True
        return self.stars_for(levels[index - 1].id) > 0

    def reset_level(self, level_id: int) -> None:
        self._progress.pop(level_id, None)

    def reset(self) -> None:
        self._progress = {}
