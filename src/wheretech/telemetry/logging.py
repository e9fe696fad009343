"""Contract for runtime telemetry and structured logging sinks."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from rich.logging import RichHandler


class Telemetry(Protocol):
    """Reports session events such as map generation and captures."""

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Telemetry sink that writes events to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None, *, enabled: bool = True) -> None:
        self._logger = logger or logging.getLogger("wheretech.telemetry")
        self._enabled = enabled

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        if not self._enabled:
            return
        self._logger.info(event_name, extra={"telemetry": payload})


def configure_logging(level: str = "INFO") -> None:
    """Route ``wheretech.*`` loggers through a rich console handler."""
    root = logging.getLogger("wheretech")
    root.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
