from __future__ import annotations

import asyncio
import random
import time

import pytest

from wheretech.errors import CatalogUnavailableError, EncounterNotPendingError, GameNotStartedError
from wheretech.forms import GenerationParams
from wheretech.models import Creature, EncounterChoice, EncounterState, MapSize, Position, TerrainLabel
from wheretech.movement import Direction
from wheretech.session import GameSession

PIKACHU = Creature(name="pikachu", image_ref="url", creature_id=25)
PARAMS = GenerationParams(sea_percent=10, grass_percent=20, map_size=MapSize.SMALL)


class StubCatalog:
    def __init__(self, creature: Creature = PIKACHU, fail: bool = False, delay: float = 0.0) -> None:
        self.creature = creature
        self.fail = fail
        self.delay = delay
        self.calls = 0

    def fetch(self, creature_id: int) -> Creature:
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.fail:
            raise CatalogUnavailableError("catalog down")
        return self.creature


class RecordingNotifier:
    def __init__(self) -> None:
        self.names: list[str] = []

    def notify(self, creature: Creature) -> None:
        self.names.append(creature.name)


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


def _fixed_layout(monkeypatch: pytest.MonkeyPatch) -> None:
    """10x10 land with sea above the centre and grass to its right."""
    cells = [TerrainLabel.LAND] * 100
    cells[4 * 10 + 5] = TerrainLabel.SEA
    cells[5 * 10 + 6] = TerrainLabel.GRASS
    monkeypatch.setattr("wheretech.session.generate_terrain", lambda *args, **kwargs: list(cells))


def test_generate_places_player_at_centre_with_expected_composition() -> None:
    telemetry = RecordingTelemetry()
    session = GameSession(StubCatalog(), rng=random.Random(1), telemetry=telemetry)

    grid = session.generate(PARAMS)

    assert (grid.width, grid.height) == (10, 10)
    assert session.position == Position(5, 5)
    assert grid.counts() == {TerrainLabel.SEA: 10, TerrainLabel.GRASS: 20, TerrainLabel.LAND: 70}
    assert session.input_enabled is True
    assert telemetry.events[0][0] == "map_generated"
    assert telemetry.events[0][1]["sea"] == 10


def test_move_into_sea_leaves_position_unchanged(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    session = GameSession(StubCatalog())
    session.generate(PARAMS)

    result = asyncio.run(session.move(Direction.UP))

    assert result.moved is False
    assert session.position == Position(5, 5)


def test_forced_encounter_then_capture(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    notifier = RecordingNotifier()
    session = GameSession(StubCatalog(), encounter_rate=1.0, notifier=notifier, capture_notice_delay_seconds=0.01)
    session.generate(PARAMS)

    async def _run() -> tuple[list[str], list[str]]:
        result = await session.move(Direction.RIGHT)
        assert result.position == Position(6, 5)
        assert result.encounter_state == EncounterState.PRESENTING
        assert session.pending_creature == PIKACHU
        assert session.input_enabled is False

        captured = await session.resolve_encounter(EncounterChoice.CAPTURE)
        assert captured == PIKACHU
        assert session.input_enabled is True
        before = list(notifier.names)
        await session.drain_notifications()
        return before, notifier.names

    before, after = asyncio.run(_run())
    assert before == []
    assert after == ["pikachu"]
    assert session.ledger.snapshot() == [PIKACHU]
    assert session.encounter_state == EncounterState.IDLE


def test_flee_discards_creature(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    session = GameSession(StubCatalog(), encounter_rate=1.0)
    session.generate(PARAMS)

    async def _run() -> Creature | None:
        await session.move(Direction.RIGHT)
        return await session.resolve_encounter(EncounterChoice.FLEE)

    assert asyncio.run(_run()) is None
    assert len(session.ledger) == 0
    assert session.encounter_state == EncounterState.IDLE


def test_catalog_failure_keeps_move_and_ledger(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    catalog = StubCatalog(fail=True)
    session = GameSession(catalog, encounter_rate=1.0)
    session.generate(PARAMS)

    result = asyncio.run(session.move(Direction.RIGHT))

    assert catalog.calls == 1
    assert result.encounter_state == EncounterState.IDLE
    assert session.position == Position(6, 5)
    assert len(session.ledger) == 0
    assert session.input_enabled is True


def test_input_dropped_while_presenting(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    session = GameSession(StubCatalog(), encounter_rate=1.0)
    session.generate(PARAMS)

    async def _run():
        await session.move(Direction.RIGHT)
        return await session.move(Direction.DOWN)

    result = asyncio.run(_run())

    assert result.ignored is True
    assert session.position == Position(6, 5)


def test_input_dropped_while_awaiting_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    catalog = StubCatalog(delay=0.05)
    session = GameSession(catalog, encounter_rate=1.0)
    session.generate(PARAMS)

    async def _run():
        return await asyncio.gather(session.move(Direction.RIGHT), session.move(Direction.DOWN))

    first, second = asyncio.run(_run())

    assert first.encounter_state == EncounterState.PRESENTING
    assert second.ignored is True
    assert session.position == Position(6, 5)
    assert catalog.calls == 1


def test_regenerate_resets_ledger_position_and_encounter(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    session = GameSession(StubCatalog(), encounter_rate=1.0)
    session.generate(PARAMS)

    async def _run() -> None:
        await session.move(Direction.RIGHT)
        await session.resolve_encounter(EncounterChoice.CAPTURE)
        await session.move(Direction.LEFT)
        await session.move(Direction.RIGHT)

    asyncio.run(_run())
    assert len(session.ledger) == 1
    assert session.encounter_state == EncounterState.PRESENTING

    session.generate(PARAMS)

    assert len(session.ledger) == 0
    assert session.position == Position(5, 5)
    assert session.encounter_state == EncounterState.IDLE
    assert session.input_enabled is True


def test_move_before_generate_raises() -> None:
    session = GameSession(StubCatalog())

    with pytest.raises(GameNotStartedError):
        asyncio.run(session.move(Direction.UP))


def test_resolve_without_encounter_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _fixed_layout(monkeypatch)
    session = GameSession(StubCatalog())
    session.generate(PARAMS)

    with pytest.raises(EncounterNotPendingError):
        asyncio.run(session.resolve_encounter(EncounterChoice.CAPTURE))


def test_ledger_summary_lists_captures() -> None:
    session = GameSession(StubCatalog())
    assert session.ledger_summary() == "No creatures captured yet."

    session.ledger.append(PIKACHU)
    assert session.ledger_summary() == "You captured 1 creature(s): pikachu"
