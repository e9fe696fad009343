"""CLI startup entrypoint for WhereTech."""

from __future__ import annotations

import asyncio
import random
from collections.abc import AsyncIterator

import typer
from pydantic import ValidationError
from rich import print
from rich.console import Console

from wheretech.adapters import CatalogClient, PokeApiCatalogClient, StaticCatalogClient
from wheretech.cli import CliGameHandler
from wheretech.config import settings
from wheretech.errors import CatalogUnavailableError
from wheretech.forms import GenerationParams
from wheretech.models import Creature, EncounterState
from wheretech.render import render_counts, render_encounter, render_grid, render_ledger
from wheretech.session import GameSession
from wheretech.telemetry import LoggingTelemetry, configure_logging

app = typer.Typer(help="WhereTech grid exploration game")


async def _read_lines(console: Console) -> AsyncIterator[str]:
    while True:
        try:
            yield await asyncio.to_thread(console.input, "> ")
        except EOFError:
            return


class _ConsoleCaptureNotifier:
    """Prints the capture confirmation once the background delay elapses."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def notify(self, creature: Creature) -> None:
        self._console.print(f"[bold green]You got {creature.name}![/bold green]")


def _build_catalog(offline: bool = False) -> CatalogClient:
    if offline:
        return StaticCatalogClient()
    return PokeApiCatalogClient(
        base_url=settings.catalog_base_url,
        timeout_seconds=settings.catalog_timeout_seconds,
    )


def _build_params(sea: int, grass: int, size: int) -> GenerationParams:
    try:
        return GenerationParams(sea_percent=sea, grass_percent=grass, map_size=size)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_session(*, seed: int | None, offline: bool, console: Console) -> GameSession:
    return GameSession(
        _build_catalog(offline=offline),
        rng=random.Random(seed),
        encounter_rate=settings.encounter_rate,
        max_creature_id=settings.max_creature_id,
        catalog_timeout_seconds=settings.catalog_timeout_seconds,
        capture_notice_delay_seconds=settings.capture_notice_delay_seconds,
        notifier=_ConsoleCaptureNotifier(console),
        telemetry=LoggingTelemetry(enabled=settings.telemetry_enabled),
    )


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


@app.command("config")
def show_config() -> None:
    """Show runtime configuration."""
    print(settings.model_dump())


@app.command()
def generate(
    sea: int = typer.Option(20, help="Sea percentage (10-30)"),
    grass: int = typer.Option(20, help="Grass percentage (10-30)"),
    size: int = typer.Option(100, help="Map size in cells: 100, 500 or 1000"),
    seed: int = typer.Option(None, help="Seed for reproducible maps"),
) -> None:
    """Generate a map and print it without starting a game."""
    params = _build_params(sea, grass, size)
    console = Console()
    session = _build_session(seed=seed, offline=True, console=console)
    grid = session.generate(params)
    console.print(render_grid(grid, session.position))
    console.print(render_counts(grid))


@app.command()
def catch(
    creature_id: int = typer.Argument(..., help="Catalog id, 1-898"),
    offline: bool = typer.Option(False, help="Use the built-in offline catalog"),
) -> None:
    """Look up a single creature in the catalog."""
    try:
        creature = _build_catalog(offline=offline).fetch(creature_id)
    except CatalogUnavailableError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print({"name": creature.name, "image": creature.image_ref, "id": creature.creature_id})


@app.command()
def play(
    sea: int = typer.Option(20, help="Sea percentage (10-30)"),
    grass: int = typer.Option(20, help="Grass percentage (10-30)"),
    size: int = typer.Option(100, help="Map size in cells: 100, 500 or 1000"),
    seed: int = typer.Option(None, help="Seed for reproducible maps and encounters"),
    offline: bool = typer.Option(False, help="Use the built-in offline catalog"),
) -> None:
    """Explore the map with w/a/s/d (or up/down/left/right)."""
    params = _build_params(sea, grass, size)
    console = Console()
    session = _build_session(seed=seed, offline=offline, console=console)
    handler = CliGameHandler(session)

    def _show(message: str) -> None:
        console.print(render_grid(session.grid, session.position))
        if session.encounter_state == EncounterState.PRESENTING and session.pending_creature is not None:
            console.print(render_encounter(session.pending_creature))
        console.print(message)

    async def _run() -> None:
        session.generate(params)
        console.print(render_grid(session.grid, session.position))
        console.print("Move with w/a/s/d, [l]edger to list captures, [q]uit to leave.")
        await handler.run(_read_lines(console), _show)
        await session.drain_notifications()
        console.print(render_ledger(session.ledger))

    try:
        asyncio.run(_run())
    except (KeyboardInterrupt, EOFError):
        console.print(render_ledger(session.ledger))


if __name__ == "__main__":
    app()
