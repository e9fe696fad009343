"""Per-session record of captured creatures."""

from __future__ import annotations

from collections.abc import Iterator

from wheretech.models import Creature


class CaptureLedger:
    """Append-only list of captures, cleared when a new map is generated."""

    def __init__(self) -> None:
        self._creatures: list[Creature] = []

    def append(self, creature: Creature) -> None:
        self._creatures.append(creature)

    def clear(self) -> None:
        self._creatures.clear()

    def names(self) -> list[str]:
        return [creature.name for creature in self._creatures]

    def snapshot(self) -> list[Creature]:
        return list(self._creatures)

    def summary(self) -> str:
        if not self._creatures:
            return "No creatures captured yet."
        return f"You captured {len(self._creatures)} creature(s): {', '.join(self.names())}"

    def __len__(self) -> int:
        return len(self._creatures)

    def __iter__(self) -> Iterator[Creature]:
        return iter(list(self._creatures))

