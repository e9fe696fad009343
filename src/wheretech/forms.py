"""Validated map generation parameters, as collected from the player."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wheretech.models import MapSize


class GenerationParams(BaseModel):
    """Form input for a new map.

    The game core trusts these values; all range checks live here.
    """

    model_config = ConfigDict(frozen=True)

    sea_percent: int = Field(ge=10, le=30, description="Share of Sea cells, in percent.")
    grass_percent: int = Field(ge=10, le=30, description="Share of Grass cells, in percent.")
    map_size: MapSize = Field(default=MapSize.SMALL, description="Total number of cells.")

    @property
    def cell_count(self) -> int:
        return int(self.map_size)
