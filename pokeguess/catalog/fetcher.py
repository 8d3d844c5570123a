"""
Subject Fetcher - Loads one creature from the catalog service.

Two retrievals per subject, in order:
1. /pokemon/{id}          names, types, sprites
2. /pokemon-species/{id}  generation, colour, genus

Either one failing (transport error, timeout, non-2xx status,
undecodable body) raises FetchError naming the retrieval.
Missing optional fields are defaulted, never raised.
"""

from __future__ import annotations
import logging
from typing import Any

import httpx

from ..config import API_BASE_URL, REQUEST_TIMEOUT
from ..engine_core.state import Subject

logger = logging.getLogger(__name__)

UNKNOWN_SPECIES = "Unknown Pokémon"
SPECIES_LANGUAGE = "en"


class FetchError(Exception):
    """A catalog retrieval failed."""

    def __init__(
        self,
        retrieval: str,
        detail: str,
        status_code: int | None = None,
    ):
        self.retrieval = retrieval
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Failed to fetch {retrieval}: {detail}")


def _name_of(entry: Any, default: str = "unknown") -> str:
    """Read entry["name"] from a named API resource, tolerating gaps."""
    if isinstance(entry, dict) and isinstance(entry.get("name"), str) and entry["name"]:
        return entry["name"]
    return default


def _entries(value: Any) -> list[dict[str, Any]]:
    """The dict entries of a list field; anything else is dropped."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _slot(entry: dict[str, Any]) -> int:
    slot = entry.get("slot")
    return slot if isinstance(slot, int) else 0


def _english_genus(species: dict[str, Any]) -> str:
    for genus in _entries(species.get("genera")):
        if _name_of(genus.get("language"), "") == SPECIES_LANGUAGE:
            text = genus.get("genus")
            return text if isinstance(text, str) and text else UNKNOWN_SPECIES
    return UNKNOWN_SPECIES


def _parse_pokemon(pokemon: dict[str, Any]) -> tuple[str, tuple[str, ...], str | None]:
    name = pokemon.get("name")
    if not isinstance(name, str) or not name:
        raise FetchError("pokemon", "response has no name")

    slots = sorted(_entries(pokemon.get("types")), key=_slot)
    types = tuple(_name_of(t.get("type")) for t in slots)

    sprites = pokemon.get("sprites")
    sprite_url = sprites.get("front_default") if isinstance(sprites, dict) else None
    if not isinstance(sprite_url, str):
        sprite_url = None
    return name, types, sprite_url


def _parse_species(species: dict[str, Any]) -> tuple[str, str, str]:
    return (
        _name_of(species.get("generation")),
        _name_of(species.get("color")),
        _english_genus(species),
    )


def parse_subject(
    subject_id: int,
    pokemon: dict[str, Any],
    species: dict[str, Any],
) -> Subject:
    """
    Normalize the two catalog documents into a Subject.

    Raises:
        FetchError: if the pokemon document has no name (nothing to guess),
                    or a document is not shaped like a catalog resource
    """
    try:
        name, types, sprite_url = _parse_pokemon(pokemon)
    except (AttributeError, TypeError, ValueError) as e:
        raise FetchError("pokemon", f"malformed document: {e}") from e

    try:
        generation, color, species_name = _parse_species(species)
    except (AttributeError, TypeError, ValueError) as e:
        raise FetchError("species", f"malformed document: {e}") from e

    return Subject(
        subject_id=subject_id,
        name=name,
        types=types,
        generation=generation,
        color=color,
        species_name=species_name,
        sprite_url=sprite_url,
        cry_url=None,
    )


class SubjectFetcher:
    """
    HTTP adapter for the catalog service.

    Usage:
        async with SubjectFetcher() as fetcher:
            subject = await fetcher.fetch_subject(25)

    A client passed in is borrowed and left open; otherwise the fetcher
    creates its own on first use and closes it in aclose().
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def __aenter__(self) -> SubjectFetcher:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_subject(self, subject_id: int) -> Subject:
        """
        Retrieve and normalize one subject.

        Raises:
            FetchError: if either retrieval fails
        """
        pokemon = await self._get_json("pokemon", f"/pokemon/{subject_id}")
        species = await self._get_json("species", f"/pokemon-species/{subject_id}")
        return parse_subject(subject_id, pokemon, species)

    async def _get_json(self, retrieval: str, path: str) -> dict[str, Any]:
        url = self.base_url + path
        logger.debug("GET %s", url)

        try:
            response = await self.client.get(url, timeout=self.timeout)
        except httpx.TimeoutException as e:
            logger.warning("%s retrieval timed out after %ss", retrieval, self.timeout)
            raise FetchError(retrieval, f"timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.warning("%s retrieval failed: %s", retrieval, e)
            raise FetchError(retrieval, str(e)) from e

        if not response.is_success:
            logger.warning("%s retrieval returned HTTP %d", retrieval, response.status_code)
            raise FetchError(
                retrieval,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(retrieval, "invalid JSON body", response.status_code) from e

        if not isinstance(data, dict):
            raise FetchError(retrieval, "unexpected JSON document", response.status_code)
        return data
