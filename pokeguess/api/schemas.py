"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a game client and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- VALIDATION_ERROR: Request body is malformed
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionPhase(str, Enum):
    """Session phase values."""
    LOADING = "loading"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    ERROR = "error"


class GuessOutcome(str, Enum):
    """What a guess did."""
    IGNORED = "ignored"
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class RevealedSubjectInfo(BaseModel):
    """The answer, shown once the game is over."""
    subject_id: int
    name: str
    types: list[str] = Field(default_factory=list)
    generation: str
    color: str
    species_name: str
    sprite_url: Optional[str] = None

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class GuessRequest(BaseModel):
    """Request body for submitting a guess."""
    guess: str = Field(..., description="Free-text creature name")


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """Render-ready state of a game session."""
    session_id: str
    phase: SessionPhase
    attempts: int = 0
    max_attempts: int
    attempt_label: str
    can_guess: bool = False
    hints: list[str] = Field(default_factory=list)
    message: str = ""
    error: str = ""
    revealed: Optional[RevealedSubjectInfo] = Field(
        None, description="Present only when the game was won or lost"
    )


class GuessResponse(BaseModel):
    """Response for POST /guess."""
    outcome: GuessOutcome
    accepted: bool
    session: SessionResponse


class SessionListResponse(BaseModel):
    """Response for GET /sessions."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Response for DELETE /sessions/{id}."""
    success: bool
    session_id: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class HealthResponse(BaseModel):
    """Response for GET /health."""
    status: str = "healthy"
    service: str = "pokeguess"
    version: str
