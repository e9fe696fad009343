"""Terrain generation from sea/grass percentages."""

from __future__ import annotations

import random

from wheretech.models import TerrainLabel


def terrain_counts(sea_percent: float, grass_percent: float, cell_count: int) -> tuple[int, int, int]:
    """Return ``(sea, grass, land)`` cell counts, clamped to the available cells."""
    total = max(0, int(cell_count))
    sea_count = min(max(0, int(sea_percent / 100 * total)), total)
    grass_count = min(max(0, int(grass_percent / 100 * total)), total - sea_count)
    return sea_count, grass_count, total - sea_count - grass_count


def generate_terrain(
    sea_percent: float,
    grass_percent: float,
    cell_count: int,
    rng: random.Random | None = None,
) -> list[TerrainLabel]:
    """Build a shuffled terrain sequence with an exact composition.

    Only the number of cells per label is deterministic; positions come from a
    uniform shuffle of ``rng`` (a fresh unseeded generator when omitted).
    """
    sea_count, grass_count, land_count = terrain_counts(sea_percent, grass_percent, cell_count)
    cells = (
        [TerrainLabel.SEA] * sea_count
        + [TerrainLabel.GRASS] * grass_count
        + [TerrainLabel.LAND] * land_count
    )
    (rng or random.Random()).shuffle(cells)
    return cells
