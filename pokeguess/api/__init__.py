"""
API Module - REST interface for game clients.

A client:
1. Starts a session
2. Renders the unlocked hints
3. Submits guesses until the game is won or lost
4. Replays

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    GuessRequest,
    # Responses
    SessionResponse,
    GuessResponse,
    SessionListResponse,
    EndSessionResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    RevealedSubjectInfo,
    SessionPhase,
    GuessOutcome,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "GuessRequest",
    # Responses
    "SessionResponse",
    "GuessResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "RevealedSubjectInfo",
    "SessionPhase",
    "GuessOutcome",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
