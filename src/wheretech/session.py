"""Game session orchestration: map generation, movement and encounters."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Protocol

from wheretech.adapters import CatalogClient
from wheretech.encounters import DEFAULT_ENCOUNTER_RATE, DEFAULT_MAX_CREATURE_ID, EncounterTrigger
from wheretech.errors import GameNotStartedError
from wheretech.forms import GenerationParams
from wheretech.grid import Grid
from wheretech.ledger import CaptureLedger
from wheretech.mapgen import generate_terrain
from wheretech.models import Creature, EncounterChoice, EncounterState, Position, TerrainLabel
from wheretech.movement import Direction, attempt_move
from wheretech.telemetry import Telemetry


class CaptureNotifier(Protocol):
    """Delivers the non-blocking capture confirmation to the player."""

    def notify(self, creature: Creature) -> None:
        """Announce that ``creature`` was captured."""


@dataclass(frozen=True, slots=True)
class MoveResult:
    position: Position
    moved: bool
    ignored: bool
    terrain: TerrainLabel | None
    encounter_state: EncounterState
    creature: Creature | None = None


class GameSession:
    """Owns the grid, player position, encounter state and capture ledger.

    All mutation goes through ``generate``, ``move`` and ``resolve_encounter``;
    directional input is dropped while an encounter is awaiting the catalog or
    being presented.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        *,
        rng: random.Random | None = None,
        encounter_rate: float = DEFAULT_ENCOUNTER_RATE,
        max_creature_id: int = DEFAULT_MAX_CREATURE_ID,
        catalog_timeout_seconds: float | None = None,
        capture_notice_delay_seconds: float = 0.5,
        notifier: CaptureNotifier | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger("wheretech.session")
        self._encounters = EncounterTrigger(
            catalog,
            rng=self._rng,
            encounter_rate=encounter_rate,
            max_creature_id=max_creature_id,
            catalog_timeout_seconds=catalog_timeout_seconds,
        )
        self._capture_notice_delay_seconds = capture_notice_delay_seconds
        self._notifier = notifier
        self._telemetry = telemetry

        self._grid: Grid | None = None
        self._position: Position | None = None
        self._ledger = CaptureLedger()
        self._notifications: set[asyncio.Task[None]] = set()

    @property
    def grid(self) -> Grid | None:
        return self._grid

    @property
    def position(self) -> Position | None:
        return self._position

    @property
    def ledger(self) -> CaptureLedger:
        return self._ledger

    @property
    def encounter_state(self) -> EncounterState:
        return self._encounters.state

    @property
    def pending_creature(self) -> Creature | None:
        return self._encounters.pending

    @property
    def input_enabled(self) -> bool:
        return self._grid is not None and self._encounters.idle

    def generate(self, params: GenerationParams) -> Grid:
        """Build a new map and reset position, ledger and encounter state."""
        cells = generate_terrain(params.sea_percent, params.grass_percent, params.cell_count, rng=self._rng)
        self._grid = Grid.for_cell_count(cells)
        self._position = self._grid.center()
        self._ledger.clear()
        self._encounters.reset()

        counts = self._grid.counts()
        self._emit(
            "map_generated",
            {
                "width": self._grid.width,
                "height": self._grid.height,
                "sea": counts[TerrainLabel.SEA],
                "grass": counts[TerrainLabel.GRASS],
                "land": counts[TerrainLabel.LAND],
            },
        )
        return self._grid

    async def move(self, direction: Direction | None) -> MoveResult:
        """Apply one directional input, rolling for an encounter on grass."""
        if self._grid is None or self._position is None:
            raise GameNotStartedError("Generate a map before moving")

        if not self._encounters.idle:
            self._logger.debug("input_ignored", extra={"state": self._encounters.state.value})
            return self._result(moved=False, ignored=True, terrain=None)

        outcome = attempt_move(self._position, direction, self._grid)
        self._position = outcome.position
        if not outcome.entered_grass:
            return self._result(moved=outcome.moved, ignored=False, terrain=outcome.terrain)

        creature = await self._encounters.try_encounter()
        return self._result(moved=True, ignored=False, terrain=outcome.terrain, creature=creature)

    async def resolve_encounter(self, choice: EncounterChoice) -> Creature | None:
        """Capture or flee the presented creature and re-enable input.

        A capture is recorded immediately; the confirmation to the player is
        delivered in the background after a short delay.
        """
        creature = self._encounters.resolve(choice)
        if creature is None:
            return None

        self._ledger.append(creature)
        self._emit("creature_captured", {"creature": creature.name, "total": len(self._ledger)})
        if self._notifier is not None:
            task = asyncio.create_task(self._notify_capture(creature), name="capture-notice")
            self._notifications.add(task)
            task.add_done_callback(self._notifications.discard)
        return creature

    async def drain_notifications(self) -> None:
        """Wait for any capture confirmations still scheduled."""
        if self._notifications:
            await asyncio.gather(*list(self._notifications))

    def ledger_summary(self) -> str:
        return self._ledger.summary()

    async def _notify_capture(self, creature: Creature) -> None:
        if self._capture_notice_delay_seconds > 0:
            await asyncio.sleep(self._capture_notice_delay_seconds)
        try:
            self._notifier.notify(creature)
        except Exception:  # noqa: BLE001 - a failed notice must not break the game loop.
            self._logger.exception("capture_notice_failed", extra={"creature": creature.name})

    def _result(
        self,
        *,
        moved: bool,
        ignored: bool,
        terrain: TerrainLabel | None,
        creature: Creature | None = None,
    ) -> MoveResult:
        return MoveResult(
            position=self._position,
            moved=moved,
            ignored=ignored,
            terrain=terrain,
            encounter_state=self._encounters.state,
            creature=creature,
        )

    def _emit(self, event_name: str, payload: dict) -> None:
        if self._telemetry is not None:
            self._telemetry.emit(event_name, payload)
