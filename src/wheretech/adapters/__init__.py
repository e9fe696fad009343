"""Creature catalog adapters (e.g., PokeAPI over HTTP)."""

from .catalog import CatalogClient, StaticCatalogClient
from .pokeapi import DEFAULT_BASE_URL, PokeApiCatalogClient

__all__ = [
    "CatalogClient",
    "DEFAULT_BASE_URL",
    "PokeApiCatalogClient",
    "StaticCatalogClient",
]
