"""
Game Controller - Drives one player's game through its phases.

The loop:
1. start() samples an identifier and fetches the subject
2. Player submits guesses, each one unlocking another hint
3. Game ends won or lost (or errored while loading)
4. replay() throws the session away and starts again

The controller owns exactly one GameSession and is its only writer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol
import logging
import random
import uuid

from ..config import MAX_ATTEMPTS
from ..catalog import FetchError, random_subject_id
from ..engine_core.formatting import capitalize, format_generation
from ..engine_core.hints import visible_hints
from ..engine_core.reducer import (
    GuessOutcome,
    GuessResult,
    begin_loading,
    evaluate_guess,
    is_current,
    resolve_failed,
    resolve_loaded,
)
from ..engine_core.state import GamePhase, GameSession, Subject

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that can turn an identifier into a Subject."""

    async def fetch_subject(self, subject_id: int) -> Subject: ...


@dataclass
class RevealedSubject:
    """Subject details shown once the game has ended."""
    subject_id: int
    name: str
    types: list[str]
    generation: str
    color: str
    species_name: str
    sprite_url: str | None = None


@dataclass
class SessionSnapshot:
    """
    Everything the presentation layer needs to render a session.

    The subject is only revealed after a win or a loss.
    """
    session_id: str
    phase: GamePhase
    attempts: int
    max_attempts: int
    can_guess: bool
    hints: list[str] = field(default_factory=list)
    message: str = ""
    error: str = ""
    revealed: RevealedSubject | None = None

    @property
    def attempt_label(self) -> str:
        return f"Attempt {self.attempts + 1} of {self.max_attempts}"


class GameController:
    """
    Session controller.

    Usage:
        controller = GameController(fetcher)
        await controller.start()

        result = controller.submit_guess("pikachu")
        if result.outcome == GuessOutcome.CONTINUE:
            show(controller.visible_hints())

        # After won / lost / error
        await controller.replay()
    """

    def __init__(
        self,
        fetcher: Fetcher,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        session_id: str | None = None,
    ):
        self.fetcher = fetcher
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.session_id = session_id or str(uuid.uuid4())

        self._next_token = 0
        self._session = begin_loading(self.session_id, self._next_token)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def can_guess(self) -> bool:
        return self._session.can_guess

    async def start(self) -> GameSession:
        """
        Begin a brand new session and load its subject.

        Any previous session is discarded immediately. If an older start()
        is still waiting on the catalog, its result is dropped when it
        arrives.
        """
        self._next_token += 1
        token = self._next_token
        self._session = begin_loading(self.session_id, token)

        subject_id = random_subject_id(self.rng)
        logger.debug("Session %s loading subject #%d", self.session_id, subject_id)

        try:
            subject = await self.fetcher.fetch_subject(subject_id)
        except FetchError as e:
            if not is_current(self._session, token):
                logger.debug("Discarding stale fetch failure for token %d", token)
                return self._session
            logger.error(
                "Session %s failed to load subject #%d (%s): %s",
                self.session_id, subject_id, e.retrieval, e.detail,
            )
            self._session = resolve_failed(self._session, token)
            return self._session

        if not is_current(self._session, token):
            logger.debug("Discarding stale subject #%d for token %d", subject_id, token)
            return self._session

        self._session = resolve_loaded(self._session, token, subject)
        logger.info("Session %s playing", self.session_id)
        return self._session

    async def replay(self) -> GameSession:
        """Play Again: a full fresh start, not a resumption."""
        return await self.start()

    def submit_guess(self, text: str) -> GuessResult:
        """Apply a guess. A no-op unless the session is playing."""
        result = evaluate_guess(self._session, text, self.max_attempts)
        self._session = result.session

        if result.outcome in {GuessOutcome.WON, GuessOutcome.LOST}:
            logger.info(
                "Session %s %s after %d attempt(s)",
                self.session_id, result.outcome.value, result.session.attempts,
            )
        return result

    def visible_hints(self) -> list[str]:
        return visible_hints(self._session.subject, self._session.attempts, self.max_attempts)

    def snapshot(self) -> SessionSnapshot:
        """Build a render-ready view of the current session."""
        session = self._session
        revealed = None
        if session.phase in {GamePhase.WON, GamePhase.LOST} and session.subject:
            revealed = _reveal(session.subject)

        return SessionSnapshot(
            session_id=session.session_id,
            phase=session.phase,
            attempts=session.attempts,
            max_attempts=self.max_attempts,
            can_guess=session.can_guess,
            hints=self.visible_hints(),
            message=session.message,
            error=session.error,
            revealed=revealed,
        )


def _reveal(subject: Subject) -> RevealedSubject:
    return RevealedSubject(
        subject_id=subject.subject_id,
        name=subject.display_name,
        types=[capitalize(t) for t in subject.types],
        generation=format_generation(subject.generation),
        color=capitalize(subject.color),
        species_name=subject.species_name,
        sprite_url=subject.sprite_url,
    )
