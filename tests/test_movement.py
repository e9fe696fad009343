from __future__ import annotations

import random

import pytest

from wheretech.grid import Grid
from wheretech.mapgen import generate_terrain
from wheretech.models import Position, TerrainLabel
from wheretech.movement import Direction, attempt_move

L, S, G = TerrainLabel.LAND, TerrainLabel.SEA, TerrainLabel.GRASS


def _grid() -> Grid:
    # 3x3 with sea above the centre and grass to its right
    return Grid(
        [
            L, S, L,
            L, L, G,
            L, L, L,
        ],
        width=3,
        height=3,
    )


def test_move_onto_land_is_accepted() -> None:
    outcome = attempt_move(Position(1, 1), Direction.DOWN, _grid())

    assert outcome.moved is True
    assert outcome.position == Position(1, 2)
    assert outcome.terrain == TerrainLabel.LAND
    assert outcome.entered_grass is False


def test_sea_blocks_movement() -> None:
    outcome = attempt_move(Position(1, 1), Direction.UP, _grid())

    assert outcome.moved is False
    assert outcome.position == Position(1, 1)
    assert outcome.terrain == TerrainLabel.SEA


def test_grass_move_completes_and_flags_encounter() -> None:
    outcome = attempt_move(Position(1, 1), Direction.RIGHT, _grid())

    assert outcome.position == Position(2, 1)
    assert outcome.entered_grass is True


@pytest.mark.parametrize(
    ("start", "direction"),
    [
        (Position(0, 0), Direction.UP),
        (Position(0, 0), Direction.LEFT),
        (Position(2, 2), Direction.DOWN),
        (Position(2, 2), Direction.RIGHT),
    ],
)
def test_edges_reject_move_without_error(start: Position, direction: Direction) -> None:
    outcome = attempt_move(start, direction, _grid())

    assert outcome.moved is False
    assert outcome.position == start


def test_unknown_direction_is_noop() -> None:
    outcome = attempt_move(Position(1, 1), Direction.parse("PageUp"), _grid())

    assert outcome.moved is False
    assert outcome.position == Position(1, 1)


def test_direction_aliases() -> None:
    assert Direction.parse("ArrowUp") is Direction.UP
    assert Direction.parse("down") is Direction.DOWN
    assert Direction.parse(" A ") is Direction.LEFT
    assert Direction.parse("ArrowRight") is Direction.RIGHT
    assert Direction.parse("x") is None


def test_random_walk_stays_in_bounds_and_off_sea() -> None:
    rng = random.Random(11)
    grid = Grid.for_cell_count(generate_terrain(30, 30, 500, rng=rng))
    position = grid.center()
    if grid.label_at(position.x, position.y) == TerrainLabel.SEA:
        position = Position(*grid.coord_of(grid.cells.index(TerrainLabel.LAND)))

    for _ in range(2_000):
        position = attempt_move(position, rng.choice(list(Direction)), grid).position
        assert grid.contains(position.x, position.y)
        assert grid.label_at(position.x, position.y) != TerrainLabel.SEA
