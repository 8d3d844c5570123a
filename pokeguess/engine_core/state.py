"""
Game State - Subject record and session value.

Design principles:
- Subjects are immutable once fetched
- Sessions are values: transitions return a new session
- A session is replaced wholesale on replay, never reset in place
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .formatting import capitalize


class GamePhase(Enum):
    """Discrete phases of a game session."""
    LOADING = "loading"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    ERROR = "error"


@dataclass(frozen=True)
class Subject:
    """
    The creature being guessed.

    Built once by the fetcher and never mutated afterwards.
    """
    subject_id: int
    name: str  # Provider name, e.g. "ho-oh"
    types: tuple[str, ...] = field(default_factory=tuple)  # Ordered by provider slot
    generation: str = "unknown"
    color: str = "unknown"
    species_name: str = "Unknown Pokémon"
    sprite_url: str | None = None
    cry_url: str | None = None  # Audio is not wired in yet

    @property
    def display_name(self) -> str:
        return capitalize(self.name)


@dataclass(frozen=True)
class GameSession:
    """
    One play-through against a single Subject.

    The controller is the only writer. Every transition produces a new
    GameSession through _copy_with().
    """
    session_id: str
    generation_token: int  # Which start() this session belongs to

    phase: GamePhase = GamePhase.LOADING
    subject: Subject | None = None
    attempts: int = 0

    # User-visible text
    message: str = ""
    error: str = ""

    @property
    def can_guess(self) -> bool:
        """Guessing is only open while playing against a bound subject."""
        return self.phase == GamePhase.PLAYING and self.subject is not None

    def _copy_with(self, **kwargs) -> GameSession:
        """Create a copy with some fields replaced."""
        return GameSession(
            session_id=kwargs.get("session_id", self.session_id),
            generation_token=kwargs.get("generation_token", self.generation_token),
            phase=kwargs.get("phase", self.phase),
            subject=kwargs.get("subject", self.subject),
            attempts=kwargs.get("attempts", self.attempts),
            message=kwargs.get("message", self.message),
            error=kwargs.get("error", self.error),
        )
