"""Rectangular terrain grid with row-major coordinate math."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

from wheretech.errors import OutOfBoundsError
from wheretech.models import MapSize, Position, TerrainLabel


def dimensions_for(cell_count: int) -> tuple[int, int]:
    """Return ``(width, height)`` for a cell count.

    The selectable map sizes carry explicit dimensions; any other count must be
    a perfect square.
    """
    try:
        return MapSize(cell_count).dimensions
    except ValueError:
        pass

    side = math.isqrt(max(0, cell_count))
    if side * side != cell_count:
        raise ValueError(f"{cell_count} cells cannot be laid out as a grid")
    return side, side


class Grid:
    def __init__(self, cells: Sequence[TerrainLabel], width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        if len(cells) != width * height:
            raise ValueError(f"{len(cells)} cells do not fill a {width}x{height} grid")
        self._cells = tuple(cells)
        self._width = width
        self._height = height

    @classmethod
    def for_cell_count(cls, cells: Sequence[TerrainLabel]) -> Grid:
        width, height = dimensions_for(len(cells))
        return cls(cells, width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> tuple[TerrainLabel, ...]:
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_of(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return y * self._width + x

    def coord_of(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self._cells):
            raise OutOfBoundsError(f"index {index} out of bounds for {len(self._cells)} cells")
        return index % self._width, index // self._width

    def label_at(self, x: int, y: int) -> TerrainLabel:
        return self._cells[self.index_of(x, y)]

    def center(self) -> Position:
        return Position(self._width // 2, self._height // 2)

    def counts(self) -> dict[TerrainLabel, int]:
        tally = Counter(self._cells)
        return {label: tally.get(label, 0) for label in TerrainLabel}

    def rows(self) -> list[tuple[TerrainLabel, ...]]:
        return [self._cells[row * self._width : (row + 1) * self._width] for row in range(self._height)]

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBoundsError(f"({x}, {y}) out of bounds for {self._width}x{self._height} grid")
