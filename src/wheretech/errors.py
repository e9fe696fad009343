"""Exception hierarchy shared across the game core and its adapters."""


class WhereTechError(Exception):
    """Base class for game errors."""


class OutOfBoundsError(WhereTechError, IndexError):
    """Raised when a coordinate does not resolve to a grid cell."""


class CatalogUnavailableError(WhereTechError, RuntimeError):
    """Raised when the creature catalog cannot return a usable record."""


class EncounterNotPendingError(WhereTechError, RuntimeError):
    """Raised when an encounter choice arrives with no creature presented."""


class GameNotStartedError(WhereTechError, RuntimeError):
    """Raised when input arrives before a map has been generated."""
