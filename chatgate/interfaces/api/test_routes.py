"""Tests for API Routes."""

from collections.abc import Generator
from unittest.mock import AsyncMock

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from chatgate.adapters import GeminiClient, OpenAIClient
from chatgate.adapters.gemini.client import GEMINI_URL
from chatgate.adapters.openai.client import OPENAI_CHAT_URL
from chatgate.config import ConfigurationError, ProviderStatusError

from .deps import get_gemini_client, get_openai_client
from .main import create_app

ROUTES = ["/chat", "/gemini"]


def make_provider(name: str, answer: str) -> AsyncMock:
    mock = AsyncMock()
    mock.name = name
    mock.ask.return_value = answer
    return mock


@pytest.fixture
def openai_provider() -> AsyncMock:
    return make_provider("OpenAI", "GPT answer")


@pytest.fixture
def gemini_provider() -> AsyncMock:
    return make_provider("Gemini", "Gemini answer")


@pytest.fixture
def app_with_overrides(openai_provider: AsyncMock, gemini_provider: AsyncMock):
    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: openai_provider
    app.dependency_overrides[get_gemini_client] = lambda: gemini_provider
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_with_overrides) -> Generator[TestClient, None, None]:
    """Create a test client with mocked providers."""
    yield TestClient(app_with_overrides)


def provider_for(route: str, openai_provider: AsyncMock, gemini_provider: AsyncMock) -> AsyncMock:
    return openai_provider if route == "/chat" else gemini_provider


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert set(data["providers"]) == {"openai", "gemini"}


@pytest.mark.parametrize("route", ROUTES)
@pytest.mark.parametrize("question", ["", "   ", "\t"])
def test_blank_question_returns_400(
    client: TestClient,
    openai_provider: AsyncMock,
    gemini_provider: AsyncMock,
    route: str,
    question: str,
) -> None:
    """Test blank questions never reach a provider."""
    response = client.post(route, json={"question": question})

    assert response.status_code == 400
    assert response.json() == {
        "answer": "",
        "success": False,
        "error": "Question is required",
    }
    assert openai_provider.ask.await_count == 0
    assert gemini_provider.ask.await_count == 0


@pytest.mark.parametrize("route", ROUTES)
def test_missing_question_field_returns_400(client: TestClient, route: str) -> None:
    response = client.post(route, json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Question is required"


@pytest.mark.parametrize("route", ROUTES)
@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"question": 5}},
        {"json": ["Hello"]},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
    ],
)
def test_invalid_body_returns_400_envelope(
    client: TestClient,
    openai_provider: AsyncMock,
    gemini_provider: AsyncMock,
    route: str,
    kwargs: dict,
) -> None:
    """Test undecodable or mistyped bodies keep the envelope shape."""
    response = client.post(route, **kwargs)

    assert response.status_code == 400
    assert response.json() == {
        "answer": "",
        "success": False,
        "error": "Invalid request body",
    }
    assert openai_provider.ask.await_count == 0
    assert gemini_provider.ask.await_count == 0


@pytest.mark.parametrize("route", ROUTES)
def test_success_envelope(
    client: TestClient,
    openai_provider: AsyncMock,
    gemini_provider: AsyncMock,
    route: str,
) -> None:
    """Test each route calls its own provider and wraps the answer."""
    provider = provider_for(route, openai_provider, gemini_provider)

    response = client.post(route, json={"question": "Hello"})

    assert response.status_code == 200
    assert response.json() == {
        "answer": provider.ask.return_value,
        "success": True,
        "error": None,
    }
    provider.ask.assert_awaited_once_with("Hello")


def test_pascal_case_request_binds(client: TestClient, openai_provider: AsyncMock) -> None:
    response = client.post("/chat", json={"Question": "Hello"})
    assert response.status_code == 200
    openai_provider.ask.assert_awaited_once_with("Hello")


@pytest.mark.parametrize("route", ROUTES)
@pytest.mark.parametrize("status", [400, 404, 429, 500, 502])
def test_provider_status_failure_returns_500(
    client: TestClient,
    openai_provider: AsyncMock,
    gemini_provider: AsyncMock,
    route: str,
    status: int,
) -> None:
    """Test upstream failures surface as 500 with the status in the message."""
    provider = provider_for(route, openai_provider, gemini_provider)
    provider.ask.side_effect = ProviderStatusError(
        f"upstream failed with status: {status}", status_code=status
    )

    response = client.post(route, json={"question": "Hello"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["answer"] == ""
    assert str(status) in data["error"]
    assert provider.ask.await_count == 1


def test_missing_key_returns_503() -> None:
    """Test an unconfigured provider answers 503 while the other keeps serving."""
    app = create_app()

    def unconfigured() -> OpenAIClient:
        raise ConfigurationError("OpenAI API key is not configured")

    app.dependency_overrides[get_openai_client] = unconfigured
    app.dependency_overrides[get_gemini_client] = lambda: make_provider("Gemini", "ok")
    client = TestClient(app)

    response = client.post("/chat", json={"question": "Hello"})
    assert response.status_code == 503
    assert response.json() == {
        "answer": "",
        "success": False,
        "error": "OpenAI API key is not configured",
    }

    response = client.post("/gemini", json={"question": "Hello"})
    assert response.status_code == 200


def test_request_id_header(client: TestClient) -> None:
    """Test that responses include request ID."""
    response = client.get("/health")
    assert "x-request-id" in response.headers


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_404_for_unknown_routes(client: TestClient) -> None:
    """Test 404 for non-existent routes."""
    response = client.get("/api/nonexistent")
    assert response.status_code == 404


# --- End-to-end through real adapters (upstream mocked) ---


def test_gpt_success_scenario() -> None:
    """Test {"question":"Hello"} -> upstream "Hi there" -> 200 envelope."""
    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: OpenAIClient(api_key="sk-test")
    client = TestClient(app)

    with respx.mock:
        respx.post(OPENAI_CHAT_URL).mock(
            return_value=httpx.Response(
                200, json={"choices": [{"message": {"content": "Hi there"}}]}
            )
        )
        response = client.post("/chat", json={"question": "Hello"})

    assert response.status_code == 200
    assert response.json() == {"answer": "Hi there", "success": True, "error": None}


def test_gpt_empty_choices_scenario() -> None:
    """Test empty choices produce the placeholder, not an error."""
    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: OpenAIClient(api_key="sk-test")
    client = TestClient(app)

    with respx.mock:
        respx.post(OPENAI_CHAT_URL).mock(return_value=httpx.Response(200, json={"choices": []}))
        response = client.post("/chat", json={"question": "Hello"})

    assert response.status_code == 200
    assert response.json()["answer"] == "No response from OpenAI"


def test_gemini_rate_limited_scenario() -> None:
    """Test upstream 429 -> 500 with the wrapped status message and raw body."""
    app = create_app()
    app.dependency_overrides[get_gemini_client] = lambda: GeminiClient(api_key="gm-test")
    client = TestClient(app)
    body = '{"error":{"code":429,"message":"Resource has been exhausted"}}'

    with respx.mock:
        respx.post(url__startswith=GEMINI_URL).mock(return_value=httpx.Response(429, text=body))
        response = client.post("/gemini", json={"question": "Hello"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["answer"] == ""
    assert data["error"] == (
        "Error calling Gemini API: "
        f"Gemini API request failed with status: 429. Error: {body}"
    )


def test_gemini_empty_candidates_scenario() -> None:
    app = create_app()
    app.dependency_overrides[get_gemini_client] = lambda: GeminiClient(api_key="gm-test")
    client = TestClient(app)

    with respx.mock:
        respx.post(url__startswith=GEMINI_URL).mock(
            return_value=httpx.Response(200, json={"candidates": []})
        )
        response = client.post("/gemini", json={"question": "Hello"})

    assert response.status_code == 200
    assert response.json() == {
        "answer": "No response from Gemini",
        "success": True,
        "error": None,
    }


def test_gemini_missing_candidates_scenario() -> None:
    """Test a body without candidates is a wrapped parse failure."""
    app = create_app()
    app.dependency_overrides[get_gemini_client] = lambda: GeminiClient(api_key="gm-test")
    client = TestClient(app)

    with respx.mock:
        respx.post(url__startswith=GEMINI_URL).mock(return_value=httpx.Response(200, json={}))
        response = client.post("/gemini", json={"question": "Hello"})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["error"].startswith("Error calling Gemini API: Invalid Gemini response")
