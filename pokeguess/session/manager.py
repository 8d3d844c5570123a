"""
Session Manager - Tracks the games currently being played.

LIFECYCLE:
1. Player starts a game -> controller created, subject loaded
2. Player guesses until won / lost (or loading errored)
3. Player replays -> same id, brand new session behind it
4. Player leaves (or session goes stale) -> controller discarded

PERSISTENCE RULES:
- NO database
- Everything is in-memory and lost on restart
"""

from __future__ import annotations
from dataclasses import dataclass
import random
import time
import uuid

from ..config import MAX_ATTEMPTS, SESSION_IDLE_TIMEOUT
from .controller import Fetcher, GameController


@dataclass
class ManagedSession:
    """A controller plus the bookkeeping needed to expire it."""
    session_id: str
    controller: GameController
    created_at: float
    last_active: float

    def touch(self) -> None:
        self.last_active = time.time()


class SessionManager:
    """
    Manages game sessions.

    All controllers share one fetcher (and so one HTTP connection pool).
    Sessions idle for longer than idle_timeout seconds are dropped
    whenever a new one is created.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        idle_timeout: float = SESSION_IDLE_TIMEOUT,
    ):
        self.fetcher = fetcher
        self.rng = rng
        self.max_attempts = max_attempts
        self.idle_timeout = idle_timeout
        self._sessions: dict[str, ManagedSession] = {}

    def create_session(self) -> ManagedSession:
        """
        Register a new controller. The caller awaits controller.start().
        """
        self.cleanup_stale_sessions()

        session_id = str(uuid.uuid4())
        now = time.time()
        controller = GameController(
            fetcher=self.fetcher,
            rng=self.rng,
            max_attempts=self.max_attempts,
            session_id=session_id,
        )
        managed = ManagedSession(
            session_id=session_id,
            controller=controller,
            created_at=now,
            last_active=now,
        )
        self._sessions[session_id] = managed
        return managed

    def get_session(self, session_id: str) -> ManagedSession | None:
        """Get a session by ID."""
        managed = self._sessions.get(session_id)
        if managed:
            managed.touch()
        return managed

    def end_session(self, session_id: str) -> bool:
        """Forget a session. Returns False if it did not exist."""
        return self._sessions.pop(session_id, None) is not None

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: float | None = None) -> int:
        """
        Drop sessions idle for longer than max_age_seconds
        (the manager's idle_timeout by default).

        Returns the number of sessions removed.
        """
        if max_age_seconds is None:
            max_age_seconds = self.idle_timeout
        current_time = time.time()
        stale = [
            sid for sid, managed in self._sessions.items()
            if current_time - managed.last_active > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id)
        return len(stale)
