"""Random encounter gate for moves that land on grass."""

from __future__ import annotations

import asyncio
import logging
import random

from wheretech.adapters import CatalogClient
from wheretech.errors import CatalogUnavailableError, EncounterNotPendingError
from wheretech.models import Creature, EncounterChoice, EncounterState

DEFAULT_ENCOUNTER_RATE = 0.2
DEFAULT_MAX_CREATURE_ID = 898


class EncounterTrigger:
    """Rolls for encounters and tracks the creature currently presented.

    Only one encounter can be unresolved at a time: ``try_encounter`` is refused
    unless the state is idle, and every idle -> awaiting transition makes exactly
    one catalog call.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        *,
        rng: random.Random | None = None,
        encounter_rate: float = DEFAULT_ENCOUNTER_RATE,
        max_creature_id: int = DEFAULT_MAX_CREATURE_ID,
        catalog_timeout_seconds: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._rng = rng or random.Random()
        self._encounter_rate = encounter_rate
        self._max_creature_id = max_creature_id
        self._catalog_timeout_seconds = catalog_timeout_seconds
        self._logger = logger or logging.getLogger("wheretech.encounters")

        self._state = EncounterState.IDLE
        self._pending: Creature | None = None
        self._generation = 0

    @property
    def state(self) -> EncounterState:
        return self._state

    @property
    def pending(self) -> Creature | None:
        return self._pending

    @property
    def idle(self) -> bool:
        return self._state == EncounterState.IDLE

    def reset(self) -> None:
        """Return to idle; a lookup still in flight is discarded when it completes."""
        self._generation += 1
        self._state = EncounterState.IDLE
        self._pending = None

    async def try_encounter(self) -> Creature | None:
        """Roll for an encounter and fetch a creature when the roll hits.

        Returns the presented creature, or ``None`` when there is no encounter
        (missed roll, catalog failure, or an encounter already in progress).
        """
        if not self.idle:
            self._logger.debug("encounter_refused", extra={"state": self._state.value})
            return None

        roll = self._rng.random()
        if roll >= self._encounter_rate:
            return None

        creature_id = self._rng.randint(1, self._max_creature_id)
        self._state = EncounterState.AWAITING_CATALOG
        generation = self._generation
        self._logger.info("catalog_lookup_started", extra={"creature_id": creature_id, "roll": roll})

        try:
            creature = await self._fetch(creature_id)
        except Exception as exc:  # noqa: BLE001 - any catalog failure ends the encounter.
            if generation != self._generation:
                self._logger.info(
                    "encounter_discarded",
                    extra={"creature_id": creature_id, "error": f"{type(exc).__name__}: {exc}"},
                )
                return None
            self._state = EncounterState.IDLE
            self._logger.warning(
                "catalog_unavailable",
                extra={"creature_id": creature_id, "error": f"{type(exc).__name__}: {exc}"},
            )
            return None

        if generation != self._generation:
            self._logger.info("encounter_discarded", extra={"creature_id": creature_id})
            return None

        self._pending = creature
        self._state = EncounterState.PRESENTING
        self._logger.info("encounter_presented", extra={"creature_id": creature_id, "creature": creature.name})
        return creature

    def resolve(self, choice: EncounterChoice) -> Creature | None:
        """Close the presented encounter; returns the creature only when captured."""
        if self._state != EncounterState.PRESENTING or self._pending is None:
            raise EncounterNotPendingError(f"No encounter to resolve (state: {self._state.value})")

        creature = self._pending
        self.reset()
        self._logger.info("encounter_resolved", extra={"creature": creature.name, "choice": choice.value})
        if choice == EncounterChoice.CAPTURE:
            return creature
        return None

    async def _fetch(self, creature_id: int) -> Creature:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._catalog.fetch, creature_id),
                timeout=self._catalog_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise CatalogUnavailableError(
                f"Catalog lookup for creature {creature_id} timed out after {self._catalog_timeout_seconds}s"
            ) from exc
