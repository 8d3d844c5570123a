"""
Reducer - Session transitions.

All session changes go through these functions.

Design principles:
- Pure functions: (session, input) -> new session
- A session that cannot take the transition is returned unchanged
- Load results carry the generation token they were issued for;
  results for any other token are stale and ignored
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from ..config import MAX_ATTEMPTS
from .formatting import normalize_name
from .state import GamePhase, GameSession, Subject

FIRST_HINT_MESSAGE = "First hint unlocked! Who’s that Pokémon?"
LOAD_FAILED_MESSAGE = "Failed to load Pokémon. Please try again."
WRONG_GUESS_MESSAGE = "Not quite! Here’s another hint…"


class GuessOutcome(Enum):
    """What a submitted guess did to the session."""
    IGNORED = "ignored"  # Empty guess, or not playing
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a guess plus the session it produced."""
    outcome: GuessOutcome
    session: GameSession

    @property
    def accepted(self) -> bool:
        return self.outcome != GuessOutcome.IGNORED


def begin_loading(session_id: str, generation_token: int) -> GameSession:
    """Fresh session for a start or replay: no subject, no attempts, no text."""
    return GameSession(
        session_id=session_id,
        generation_token=generation_token,
        phase=GamePhase.LOADING,
    )


def is_current(session: GameSession, generation_token: int) -> bool:
    """Whether a load result for `generation_token` may still be applied."""
    return (
        session.phase == GamePhase.LOADING
        and session.generation_token == generation_token
    )


def resolve_loaded(
    session: GameSession,
    generation_token: int,
    subject: Subject,
) -> GameSession:
    """LOADING -> PLAYING once the subject has been fetched."""
    if not is_current(session, generation_token):
        return session
    return session._copy_with(
        phase=GamePhase.PLAYING,
        subject=subject,
        attempts=0,
        message=FIRST_HINT_MESSAGE,
        error="",
    )


def resolve_failed(session: GameSession, generation_token: int) -> GameSession:
    """LOADING -> ERROR. Only the generic message reaches the player."""
    if not is_current(session, generation_token):
        return session
    return session._copy_with(
        phase=GamePhase.ERROR,
        subject=None,
        attempts=0,
        error=LOAD_FAILED_MESSAGE,
    )


def _tries(count: int) -> str:
    return "try" if count == 1 else "tries"


def evaluate_guess(
    session: GameSession,
    guess: str,
    max_attempts: int = MAX_ATTEMPTS,
) -> GuessResult:
    """
    Judge a guess against the bound subject.

    Every accepted guess consumes an attempt, including the winning one.
    Empty guesses and guesses outside PLAYING consume nothing.
    """
    trimmed = guess.strip()
    if not session.can_guess or not trimmed:
        return GuessResult(GuessOutcome.IGNORED, session)

    subject = session.subject
    attempts = session.attempts + 1

    if normalize_name(trimmed) == normalize_name(subject.name):
        return GuessResult(
            GuessOutcome.WON,
            session._copy_with(
                phase=GamePhase.WON,
                attempts=attempts,
                message=(
                    f"Correct! It was {subject.display_name}. "
                    f"You won in {attempts} {_tries(attempts)}!"
                ),
            ),
        )

    if attempts >= max_attempts:
        return GuessResult(
            GuessOutcome.LOST,
            session._copy_with(
                phase=GamePhase.LOST,
                attempts=attempts,
                message=(
                    "No more hints! You lose. "
                    f"The Pokémon was {subject.display_name}."
                ),
            ),
        )

    return GuessResult(
        GuessOutcome.CONTINUE,
        session._copy_with(attempts=attempts, message=WRONG_GUESS_MESSAGE),
    )
