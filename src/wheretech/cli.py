"""CLI-side handler that turns typed lines into session operations."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable

from wheretech.errors import EncounterNotPendingError
from wheretech.models import EncounterChoice, EncounterState
from wheretech.movement import Direction
from wheretech.session import GameSession

_CHOICE_ALIASES: dict[str, EncounterChoice] = {
    "c": EncounterChoice.CAPTURE,
    "capture": EncounterChoice.CAPTURE,
    "f": EncounterChoice.FLEE,
    "flee": EncounterChoice.FLEE,
}
_LEDGER_COMMANDS = {"l", "ledger", "captured"}
QUIT_COMMANDS = frozenset({"q", "quit", "exit"})


class CliGameHandler:
    """Line-oriented facade over the async game session."""

    def __init__(self, session: GameSession) -> None:
        self._session = session

    @property
    def session(self) -> GameSession:
        return self._session

    async def handle(self, line: str) -> str:
        """Apply one line of player input and return the message to show."""
        command = line.strip().lower()
        if command in _LEDGER_COMMANDS:
            return self._session.ledger_summary()

        if command in _CHOICE_ALIASES:
            return await self._resolve(_CHOICE_ALIASES[command])

        direction = Direction.parse(command)
        if direction is None:
            return f"Unknown input: {line.strip()!r}"

        result = await self._session.move(direction)
        if result.ignored:
            return "Resolve the encounter first: [c]apture or [f]lee."
        if result.encounter_state == EncounterState.PRESENTING and result.creature is not None:
            return f"A wild {result.creature.name} appeared!"
        if not result.moved:
            return "You can't go that way."
        return f"Moved to ({result.position.x}, {result.position.y}) on {result.terrain.value}."

    async def run(self, lines: AsyncIterator[str], on_message: Callable[[str], None]) -> None:
        """Handle lines as they arrive until a quit command or end of input.

        Each line is dispatched as its own task, so keys typed while a catalog
        lookup is in flight reach the session immediately and are dropped there
        rather than waiting in the input buffer.
        """
        pending: set[asyncio.Task[None]] = set()

        async def _dispatch(line: str) -> None:
            on_message(await self.handle(line))

        async for line in lines:
            if line.strip().lower() in QUIT_COMMANDS:
                break
            task = asyncio.create_task(_dispatch(line), name="cli-input")
            pending.add(task)
            task.add_done_callback(pending.discard)

        if pending:
            await asyncio.gather(*list(pending))

    async def _resolve(self, choice: EncounterChoice) -> str:
        pending = self._session.pending_creature
        try:
            creature = await self._session.resolve_encounter(choice)
        except EncounterNotPendingError:
            return "There is nothing to capture here."
        if creature is None:
            return f"You fled from {pending.name}." if pending else "You fled."
        return f"Threw a ball at {creature.name}..."
