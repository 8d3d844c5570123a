"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to controller calls
2. Manages sessions
3. Formats responses for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass

from .schemas import (
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    GuessOutcome,
    GuessResponse,
    RevealedSubjectInfo,
    SessionListResponse,
    SessionPhase,
    SessionResponse,
)
from ..session import ManagedSession, SessionManager, SessionSnapshot


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService(session_manager=SessionManager(fetcher))

        session = await service.create_session()
        result = await service.submit_guess(session.session_id, "pikachu")
    """
    session_manager: SessionManager

    async def create_session(self) -> SessionResponse:
        """Create a session and load its first subject."""
        managed = self.session_manager.create_session()
        await managed.controller.start()
        return self._to_response(managed)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        managed = self.session_manager.get_session(session_id)
        if not managed:
            return _not_found(session_id)
        return self._to_response(managed)

    def submit_guess(self, session_id: str, guess: str) -> GuessResponse | ErrorResponse:
        """Apply a guess. Guesses outside PLAYING come back as 'ignored'."""
        managed = self.session_manager.get_session(session_id)
        if not managed:
            return _not_found(session_id)

        result = managed.controller.submit_guess(guess)
        return GuessResponse(
            outcome=GuessOutcome(result.outcome.value),
            accepted=result.accepted,
            session=self._to_response(managed),
        )

    async def replay(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Start over with a new subject under the same session id."""
        managed = self.session_manager.get_session(session_id)
        if not managed:
            return _not_found(session_id)
        await managed.controller.replay()
        return self._to_response(managed)

    def end_session(self, session_id: str) -> EndSessionResponse:
        success = self.session_manager.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    def list_sessions(self) -> SessionListResponse:
        sessions = self.session_manager.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _to_response(self, managed: ManagedSession) -> SessionResponse:
        """Convert a controller snapshot to SessionResponse."""
        snapshot: SessionSnapshot = managed.controller.snapshot()
        return SessionResponse(
            session_id=snapshot.session_id,
            phase=SessionPhase(snapshot.phase.value),
            attempts=snapshot.attempts,
            max_attempts=snapshot.max_attempts,
            attempt_label=snapshot.attempt_label,
            can_guess=snapshot.can_guess,
            hints=snapshot.hints,
            message=snapshot.message,
            error=snapshot.error,
            revealed=(
                RevealedSubjectInfo.model_validate(snapshot.revealed)
                if snapshot.revealed else None
            ),
        )


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )
