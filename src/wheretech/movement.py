"""One-step movement on the terrain grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wheretech.grid import Grid
from wheretech.models import Position, TerrainLabel


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @classmethod
    def parse(cls, key: str) -> Direction | None:
        """Map a key name (``ArrowUp``, ``up``, ``w`` ...) to a direction."""
        return _KEY_ALIASES.get(key.strip().lower())


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_KEY_ALIASES: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    position: Position
    moved: bool
    terrain: TerrainLabel | None = None

    @property
    def entered_grass(self) -> bool:
        return self.moved and self.terrain == TerrainLabel.GRASS


def attempt_move(position: Position, direction: Direction | None, grid: Grid) -> MoveOutcome:
    """Step one cell in ``direction``.

    Edges and Sea cells reject the step and leave ``position`` unchanged. The
    terrain is looked up once and reported so the caller can decide on an
    encounter from the same lookup.
    """
    if direction is None:
        return MoveOutcome(position=position, moved=False)

    dx, dy = direction.delta
    x, y = position.x + dx, position.y + dy
    if not grid.contains(x, y):
        return MoveOutcome(position=position, moved=False)

    terrain = grid.label_at(x, y)
    if terrain == TerrainLabel.SEA:
        return MoveOutcome(position=position, moved=False, terrain=terrain)
    return MoveOutcome(position=Position(x, y), moved=True, terrain=terrain)
