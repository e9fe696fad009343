"""HTTP catalog adapter for PokeAPI-compatible endpoints.

The adapter is synchronous; the encounter trigger runs it in a worker thread so
the game loop keeps handling (and dropping) input while a lookup is in flight.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from wheretech.adapters.catalog import CatalogClient
from wheretech.errors import CatalogUnavailableError
from wheretech.models import Creature

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/pokemon"


@dataclass(slots=True)
class PokeApiCatalogClient(CatalogClient):
    """Fetches ``{base_url}/{id}`` and reads ``name`` and ``sprites.front_default``."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = 5.0
    session: requests.Session = field(default_factory=requests.Session)

    def fetch(self, creature_id: int) -> Creature:
        url = f"{self.base_url.rstrip('/')}/{creature_id}"
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise CatalogUnavailableError(f"Catalog request for creature {creature_id} failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogUnavailableError(f"Catalog returned invalid JSON for creature {creature_id}") from exc

        return self._parse(payload, creature_id)

    @staticmethod
    def _parse(payload: Any, creature_id: int) -> Creature:
        if not isinstance(payload, dict):
            raise CatalogUnavailableError(f"Catalog payload for creature {creature_id} is not an object")

        name = payload.get("name")
        sprites = payload.get("sprites")
        image_ref = sprites.get("front_default") if isinstance(sprites, dict) else None
        if not isinstance(name, str) or not name:
            raise CatalogUnavailableError(f"Catalog payload for creature {creature_id} has no name")
        if not isinstance(image_ref, str):
            raise CatalogUnavailableError(f"Catalog payload for creature {creature_id} has no sprite")

        return Creature(name=name, image_ref=image_ref, creature_id=creature_id)
