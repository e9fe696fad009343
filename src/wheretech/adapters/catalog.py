"""Boundary for creature catalog lookups."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from wheretech.errors import CatalogUnavailableError
from wheretech.models import Creature


class CatalogClient(Protocol):
    """Resolves a numeric creature id to display data."""

    def fetch(self, creature_id: int) -> Creature:
        """Return the creature for ``creature_id`` or raise ``CatalogUnavailableError``."""


@dataclass(slots=True)
class StaticCatalogClient:
    """Offline catalog used for local play and tests.

    Known ids resolve to their creature; any other id wraps around the list,
    so every id in range resolves.
    """

    creatures: Sequence[Creature] = field(
        default_factory=lambda: (
            Creature(name="bulbasaur", image_ref="", creature_id=1),
            Creature(name="charmander", image_ref="", creature_id=4),
            Creature(name="squirtle", image_ref="", creature_id=7),
            Creature(name="pikachu", image_ref="", creature_id=25),
        )
    )

    def fetch(self, creature_id: int) -> Creature:
        if not self.creatures:
            raise CatalogUnavailableError("Static catalog is empty")
        for creature in self.creatures:
            if creature.creature_id == creature_id:
                return creature
        return self.creatures[(creature_id - 1) % len(self.creatures)]
