"""
FastAPI Application - REST API for game clients.

Endpoints:
    POST   /api/v1/sessions               Start a game session
    GET    /api/v1/sessions               List session IDs
    GET    /api/v1/sessions/{id}          Get session state
    DELETE /api/v1/sessions/{id}          End session
    POST   /api/v1/sessions/{id}/guess    Submit a guess
    POST   /api/v1/sessions/{id}/replay   Play again with a new creature

Game Flow:
    1. POST /sessions loads a random creature; the first hint is unlocked
    2. POST /guess until the phase is won or lost
    3. POST /replay to play again (also the way out of the error phase)

All responses are JSON with explicit Pydantic schemas.
"""

from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..catalog import SubjectFetcher
from ..config import ALLOWED_ORIGINS, POKEGUESS_ENV
from ..session import SessionManager
from .schemas import (
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    GuessRequest,
    GuessResponse,
    HealthResponse,
    SessionListResponse,
    SessionResponse,
)
from .service import APIService


def create_app(
    service: Optional[APIService] = None,
    env: str = POKEGUESS_ENV,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates one backed by the
                 live catalog if not provided)
        env: Deployment environment; "production" hides the interactive docs

    Returns:
        FastAPI application instance
    """
    fetcher = None
    if service is None:
        fetcher = SubjectFetcher()
        service = APIService(session_manager=SessionManager(fetcher))
    api_service = service
    production = env == "production"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if fetcher is not None:
            await fetcher.aclose()

    app = FastAPI(
        title="Pokeguess API",
        description="""
Who's that Pokémon? A hint-by-hint guessing game.

## Rules

- One hint is unlocked as soon as the session is playing
- Every wrong guess unlocks one more hint
- Five guesses in total; the winning guess counts too

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `VALIDATION_ERROR` | Request body is malformed |
        """,
        version=__version__,
        docs_url=None if production else "/api/docs",
        redoc_url=None if production else "/api/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse, status_code: int = 400) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorResponse(
                error="Request body is malformed",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"errors": jsonable_encoder(exc.errors())},
            ),
            status_code=422,
        )

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Start a new game session",
    )
    async def create_session() -> SessionResponse:
        """
        Start a game against a random creature.

        If the catalog cannot be reached the session comes back in the
        `error` phase; use `/replay` to try again.
        """
        return await api_service.create_session()

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session state",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the phase, unlocked hints and status text of a session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, status_code=404)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        return api_service.end_session(session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/guess",
        response_model=GuessResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Submit a guess",
    )
    async def submit_guess(
        session_id: str,
        body: GuessRequest,
    ) -> Union[GuessResponse, JSONResponse]:
        """
        Submit a guess for the current creature.

        Blank guesses, and guesses made while not playing, are `ignored`
        and cost no attempt.

        **Request Body:**
        ```json
        {"guess": "Pikachu"}
        ```
        """
        response = api_service.submit_guess(session_id, body.guess)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, status_code=404)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/replay",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Play again",
    )
    async def replay(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Discard the current game and start a new one with a new creature."""
        response = await api_service.replay(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, status_code=404)
        return response

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(version=__version__)

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Pokeguess API",
            "version": __version__,
            "docs": None if production else "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn pokeguess.api.app:app
app = create_app()
