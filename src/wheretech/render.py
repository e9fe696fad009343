"""Terminal rendering of the map, encounter modal and capture ledger."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wheretech.grid import Grid
from wheretech.ledger import CaptureLedger
from wheretech.models import Creature, Position, TerrainLabel

_CELL_GLYPHS: dict[TerrainLabel, tuple[str, str]] = {
    TerrainLabel.SEA: ("~", "bold white on blue"),
    TerrainLabel.GRASS: ('"', "bold white on green"),
    TerrainLabel.LAND: (".", "white on dark_orange3"),
}
_PLAYER_GLYPH = ("@", "bold white on red")


def render_grid(grid: Grid, player: Position | None = None) -> Text:
    text = Text()
    for y, row in enumerate(grid.rows()):
        for x, label in enumerate(row):
            if player is not None and (player.x, player.y) == (x, y):
                glyph, style = _PLAYER_GLYPH
            else:
                glyph, style = _CELL_GLYPHS[label]
            text.append(f"{glyph} ", style=style)
        if y < grid.height - 1:
            text.append("\n")
    return text


def render_counts(grid: Grid) -> Table:
    table = Table(title=f"Map {grid.width}x{grid.height}")
    table.add_column("Terrain")
    table.add_column("Cells", justify="right")
    for label, count in grid.counts().items():
        table.add_row(label.value, str(count))
    return table


def render_encounter(creature: Creature) -> Panel:
    body = Group(
        Text(creature.name, style="bold"),
        Text(creature.image_ref or "(no image)", style="dim"),
        Text("[c]apture or [f]lee?"),
    )
    return Panel(body, title="A wild creature appeared!", expand=False)


def render_ledger(ledger: CaptureLedger) -> Panel:
    return Panel(ledger.summary(), title="Captured", expand=False)
