from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TerrainLabel(str, Enum):
    """Terrain assigned to a single cell when the map is generated."""

    SEA = "Sea"
    GRASS = "Grass"
    LAND = "Land"


class MapSize(int, Enum):
    """Selectable map sizes, keyed by total cell count."""

    SMALL = 100
    MEDIUM = 500
    LARGE = 1000

    @property
    def dimensions(self) -> tuple[int, int]:
        return _MAP_DIMENSIONS[self]


_MAP_DIMENSIONS: dict[MapSize, tuple[int, int]] = {
    MapSize.SMALL: (10, 10),
    MapSize.MEDIUM: (25, 20),
    MapSize.LARGE: (40, 25),
}


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Creature:
    """Display data for a creature returned by the catalog."""

    name: str
    image_ref: str
    creature_id: int | None = None


class EncounterState(str, Enum):
    """Lifecycle of a single encounter; input is accepted only while idle."""

    IDLE = "idle"
    AWAITING_CATALOG = "awaiting_catalog"
    PRESENTING = "presenting"


class EncounterChoice(str, Enum):
    CAPTURE = "capture"
    FLEE = "flee"
