"""
Pytest fixtures for Pokeguess tests.
"""

import asyncio

import pytest

from ..catalog import FetchError
from ..engine_core.state import GamePhase, GameSession, Subject


class StubFetcher:
    """In-memory fetcher: always returns `subject`, or raises `error`."""

    def __init__(self, subject=None, error=None):
        self.subject = subject
        self.error = error
        self.requested_ids = []

    async def fetch_subject(self, subject_id):
        self.requested_ids.append(subject_id)
        if self.error:
            raise self.error
        return self.subject


class GatedFetcher:
    """Fetcher whose responses are released one at a time by the test."""

    def __init__(self):
        self.pending = []

    async def fetch_subject(self, subject_id):
        gate = asyncio.Event()
        slot = {"gate": gate, "subject": None, "error": None}
        self.pending.append(slot)
        await gate.wait()
        if slot["error"]:
            raise slot["error"]
        return slot["subject"]

    def release(self, index, subject=None, error=None):
        slot = self.pending[index]
        slot["subject"] = subject
        slot["error"] = error
        slot["gate"].set()


@pytest.fixture
def pikachu() -> Subject:
    return Subject(
        subject_id=25,
        name="pikachu",
        types=("electric",),
        generation="generation-i",
        color="yellow",
        species_name="Mouse Pokémon",
        sprite_url="https://example.test/sprites/25.png",
    )


@pytest.fixture
def ho_oh() -> Subject:
    return Subject(
        subject_id=250,
        name="ho-oh",
        types=("fire", "flying"),
        generation="generation-ii",
        color="red",
        species_name="Rainbow Pokémon",
    )


@pytest.fixture
def playing_session(pikachu: Subject) -> GameSession:
    """A session that has just loaded pikachu."""
    return GameSession(
        session_id="test_session",
        generation_token=1,
        phase=GamePhase.PLAYING,
        subject=pikachu,
    )


@pytest.fixture
def stub_fetcher(pikachu: Subject) -> StubFetcher:
    return StubFetcher(subject=pikachu)


@pytest.fixture
def failing_fetcher() -> StubFetcher:
    return StubFetcher(error=FetchError("species", "HTTP 404", status_code=404))
