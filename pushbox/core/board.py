from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from pushbox.core.tiles import Position, Tile

Row = Tuple[Tile, ...]


@dataclass(frozen=True)
class Board:
    """Grid of tiles plus the player's position, kept redundantly for O(1) access.

    Rows may differ in length; ``width`` is the length of the first row.
    """

    rows: Tuple[Row, ...]
    player: Position

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        """True when (x, y) names an existing cell of its own row."""
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def at(self, x: int, y: int) -> Tile:
        """Tile at (x, y). Cells past the end of a short row read as void."""
        if not self.in_bounds(x, y):
            return Tile.VOID
        return self.rows[y][x]

    def cells(self) -> Iterator[Tile]:
        for row in self.rows:
            yield from row

    def count(self, *tiles: Tile) -> int:
        wanted = set(tiles)
        return sum(1 for cell in self.cells() if cell in wanted)

    def with_cells(self, changes: Mapping[Position, Tile], player: Position) -> "Board":
        """Return a new board with ``changes`` applied; untouched rows are shared."""
        by_row: Dict[int, List[Tuple[int, Tile]]] = {}
        for (x, y), tile in changes.items():
            by_row.setdefault(y, []).append((x, tile))
        rows = list(self.rows)
        for y, updates in by_row.items():
            row = list(rows[y])
            for x, tile in updates:
                row[x] = tile
            rows[y] = tuple(row)
        return Board(rows=tuple(rows), player=player)

    def render(self) -> List[str]:
        """Legend text for each row, the inverse of parsing."""
        return ["".join(tile.value for tile in row) for row in self.rows]

    def pretty(self) -> str:
        return "\n".join(self.render())


def board_from_rows(rows: Iterable[Iterable[Tile]], player: Position) -> Board:
    return Board(rows=tuple(tuple(row) for row in rows), player=player)
