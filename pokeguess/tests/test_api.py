"""
Tests for API layer.

Tests:
- API service methods
- REST endpoints via TestClient
- Error handling
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.schemas import ErrorCode, GuessOutcome, SessionPhase
from ..api.service import APIService
from ..config import MAX_ATTEMPTS
from ..session import SessionManager


@pytest.fixture
def service(stub_fetcher):
    """A fresh API service backed by the stub catalog."""
    return APIService(session_manager=SessionManager(stub_fetcher))


@pytest.fixture
def client(service):
    return TestClient(create_app(service=service))


@pytest.fixture
def failing_client(failing_fetcher):
    service = APIService(session_manager=SessionManager(failing_fetcher))
    return TestClient(create_app(service=service))


class TestAPIService:
    """Tests for APIService."""

    @pytest.mark.asyncio
    async def test_create_session(self, service):
        response = await service.create_session()

        assert response.session_id
        assert response.phase == SessionPhase.PLAYING
        assert response.hints == ["Type: Electric"]
        assert response.max_attempts == MAX_ATTEMPTS
        assert response.revealed is None

    @pytest.mark.asyncio
    async def test_submit_guess(self, service):
        created = await service.create_session()

        response = service.submit_guess(created.session_id, "Pikachu")

        assert response.outcome == GuessOutcome.WON
        assert response.accepted
        assert response.session.phase == SessionPhase.WON
        assert response.session.revealed.name == "Pikachu"

    def test_unknown_session(self, service):
        response = service.get_session("nonexistent-id")

        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    @pytest.mark.asyncio
    async def test_end_session(self, service):
        created = await service.create_session()

        assert service.end_session(created.session_id).success
        assert service.list_sessions().count == 0


class TestSessionEndpoints:
    """Tests for /api/v1/sessions."""

    def test_create_session(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 200
        body = response.json()
        assert body["phase"] == "playing"
        assert body["attempts"] == 0
        assert body["attempt_label"] == f"Attempt 1 of {MAX_ATTEMPTS}"
        assert body["hints"] == ["Type: Electric"]
        assert body["message"] == "First hint unlocked! Who’s that Pokémon?"

    def test_create_session_catalog_down(self, failing_client):
        response = failing_client.post("/api/v1/sessions")

        assert response.status_code == 200
        body = response.json()
        assert body["phase"] == "error"
        assert body["error"] == "Failed to load Pokémon. Please try again."
        assert body["hints"] == []
        assert not body["can_guess"]

    def test_get_session(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        response = client.get(f"/api/v1/sessions/{session_id}")

        assert response.status_code == 200
        assert response.json()["session_id"] == session_id

    def test_get_unknown_session(self, client):
        response = client.get("/api/v1/sessions/nope")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_list_and_delete(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        listing = client.get("/api/v1/sessions").json()
        assert listing["sessions"] == [session_id]
        assert listing["count"] == 1

        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json() == {"success": True, "session_id": session_id}
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404


class TestGuessEndpoint:
    """Tests for /api/v1/sessions/{id}/guess."""

    def test_wrong_guess_unlocks_hint(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        response = client.post(f"/api/v1/sessions/{session_id}/guess", json={"guess": "raichu"})

        body = response.json()
        assert body["outcome"] == "continue"
        assert body["session"]["attempts"] == 1
        assert len(body["session"]["hints"]) == 2

    def test_blank_guess_ignored(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        body = client.post(f"/api/v1/sessions/{session_id}/guess", json={"guess": "  "}).json()

        assert body["outcome"] == "ignored"
        assert not body["accepted"]
        assert body["session"]["attempts"] == 0

    def test_lose_after_max_attempts(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        for _ in range(MAX_ATTEMPTS):
            body = client.post(
                f"/api/v1/sessions/{session_id}/guess", json={"guess": "raichu"}
            ).json()

        assert body["outcome"] == "lost"
        assert body["session"]["phase"] == "lost"
        assert body["session"]["revealed"]["name"] == "Pikachu"
        assert body["session"]["message"] == "No more hints! You lose. The Pokémon was Pikachu."

    def test_missing_body_rejected(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        response = client.post(f"/api/v1/sessions/{session_id}/guess", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == ErrorCode.VALIDATION_ERROR.value
        assert body["details"]["errors"][0]["loc"] == ["body", "guess"]

    def test_long_guess_is_just_wrong(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        response = client.post(
            f"/api/v1/sessions/{session_id}/guess", json={"guess": "x" * 300}
        )

        assert response.status_code == 200
        assert response.json()["outcome"] == "continue"
        assert response.json()["session"]["attempts"] == 1

    def test_guess_unknown_session(self, client):
        response = client.post("/api/v1/sessions/nope/guess", json={"guess": "pikachu"})

        assert response.status_code == 404


class TestReplayEndpoint:
    """Tests for /api/v1/sessions/{id}/replay."""

    def test_replay_after_win(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        client.post(f"/api/v1/sessions/{session_id}/guess", json={"guess": "pikachu"})

        body = client.post(f"/api/v1/sessions/{session_id}/replay").json()

        assert body["session_id"] == session_id
        assert body["phase"] == "playing"
        assert body["attempts"] == 0
        assert body["revealed"] is None

    def test_replay_unknown_session(self, client):
        assert client.post("/api/v1/sessions/nope/replay").status_code == 404


class TestSystemEndpoints:
    """Tests for health and root."""

    def test_health(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["service"] == "pokeguess"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/api/docs"

    def test_docs_served_outside_production(self, service):
        client = TestClient(create_app(service=service, env="development"))

        assert client.get("/api/docs").status_code == 200

    def test_docs_hidden_in_production(self, service):
        client = TestClient(create_app(service=service, env="production"))

        assert client.get("/api/docs").status_code == 404
        assert client.get("/api/redoc").status_code == 404
        assert client.get("/").json()["docs"] is None

    def test_default_app_starts_and_stops_offline(self):
        with TestClient(create_app()) as client:
            assert client.get("/health").status_code == 200
