"""
poke_client.py
- Thin typed client for the PokeAPI (https://pokeapi.co/api/v2)
- One GET per call through requests, run on a worker thread so callers can
  fan out with asyncio.gather
- Raises FetchError on any non-2xx status; no retries, no caching
"""

import asyncio
from typing import Any, Optional, Union

import requests

from .models import Ability, Generation, PaginatedResponse, Pokemon, PokemonType, Species


DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"

Key = Union[int, str]

# resource path segment -> label used in error messages
RESOURCE_LABELS = {
    "pokemon": "Pokémon",
    "type": "Pokémon type",
    "pokemon-species": "Pokémon species",
    "ability": "ability",
    "generation": "generation",
}

LIST_LABELS = {
    "pokemon": "Pokémon list",
    "type": "Pokémon types",
    "pokemon-species": "Pokémon species list",
    "ability": "abilities",
    "generation": "Pokémon generations",
}


class FetchError(Exception):
    """Non-success HTTP status returned by the API."""

    def __init__(self, message: str, url: str, status_code: int, reason: str):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class PokeClient:
    """Typed accessors over the PokeAPI REST endpoints."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "PokeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # -- url builders -----------------------------------------------------

    def resource_url(self, kind: str, key: Optional[Key] = None) -> str:
        if key is None:
            return f"{self.base_url}/{kind}"
        return f"{self.base_url}/{kind}/{key}"

    def list_url(self, kind: str, offset: int = 0, limit: int = 20) -> str:
        return f"{self.base_url}/{kind}?offset={offset}&limit={limit}"

    # -- transport --------------------------------------------------------

    def _get_json(self, url: str, failure: str) -> Any:
        resp = self.session.request("GET", url, timeout=self.timeout)
        if not resp.ok:
            raise FetchError(f"{failure}: {resp.reason}", url, resp.status_code, resp.reason)
        return resp.json()

    async def _fetch(self, url: str, failure: str) -> Any:
        return await asyncio.to_thread(self._get_json, url, failure)

    async def get(self, url: str) -> Any:
        """Generic GET of an absolute URL, returning the decoded JSON body."""
        return await self._fetch(url, f"Failed to fetch {url}")

    async def fetch_entity(self, kind: str, key: Key) -> Any:
        """GET /{kind}/{key} where key is a numeric id or a name."""
        label = RESOURCE_LABELS.get(kind, kind)
        return await self._fetch(self.resource_url(kind, key),
                                 f"Failed to fetch {label} with ID {key}")

    async def fetch_list(self, kind: str, offset: int = 0, limit: int = 20) -> PaginatedResponse:
        """GET one page of /{kind} with offset/limit query parameters."""
        label = LIST_LABELS.get(kind, f"{kind} list")
        return await self._fetch(self.list_url(kind, offset, limit), f"Failed to fetch {label}")

    # -- named accessors --------------------------------------------------

    async def get_pokemon(self, key: Key) -> Pokemon:
        return await self.fetch_entity("pokemon", key)

    async def get_type(self, key: Key) -> PokemonType:
        return await self.fetch_entity("type", key)

    async def get_species(self, key: Key) -> Species:
        return await self.fetch_entity("pokemon-species", key)

    async def get_ability(self, key: Key) -> Ability:
        return await self.fetch_entity("ability", key)

    async def get_generation(self, key: Key) -> Generation:
        return await self.fetch_entity("generation", key)

    async def get_pokemons(self, offset: int = 0, limit: int = 20) -> PaginatedResponse:
        return await self.fetch_list("pokemon", offset, limit)

    async def get_types(self) -> PaginatedResponse:
        """All types; the endpoint is requested without paging parameters."""
        return await self._fetch(self.resource_url("type"), f"Failed to fetch {LIST_LABELS['type']}")

    async def get_generations(self) -> PaginatedResponse:
        """All generations; requested without paging parameters."""
        return await self._fetch(self.resource_url("generation"),
                                 f"Failed to fetch {LIST_LABELS['generation']}")

    async def get_species_list(self, offset: int = 0, limit: int = 20) -> PaginatedResponse:
        return await self.fetch_list("pokemon-species", offset, limit)

    async def get_abilities(self, offset: int = 0, limit: int = 20) -> PaginatedResponse:
        return await self.fetch_list("ability", offset, limit)
