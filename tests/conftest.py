"""
VidhiDesk Test Configuration

Shared pytest fixtures and configuration for all tests.

Upstream APIs are never contacted: every outbound request goes through an
`httpx.MockTransport` whose handler records the request and returns a
canned response.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# Environment Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (requires upstream credentials)"
    )


CONFIG_ENV_VARS = [
    "VIDHIDESK_PROVIDER",
    "VIDHIDESK_MODEL",
    "VIDHIDESK_PROMPT_STYLE",
    "VIDHIDESK_MAX_NEW_TOKENS",
    "VIDHIDESK_TEMPERATURE",
    "VIDHIDESK_UPSTREAM_TIMEOUT",
    "VIDHIDESK_LOG_LEVEL",
    "GEMINI_API_KEY",
    "HF_API_TOKEN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every proxy setting so each test starts from defaults."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def gemini_env(clean_env):
    """Configure the Gemini provider with a test key."""
    clean_env.setenv("VIDHIDESK_PROVIDER", "gemini")
    clean_env.setenv("GEMINI_API_KEY", "test-gemini-key")
    return clean_env


@pytest.fixture
def huggingface_env(clean_env):
    """Configure the Hugging Face provider with a test token."""
    clean_env.setenv("VIDHIDESK_PROVIDER", "huggingface")
    clean_env.setenv("HF_API_TOKEN", "hf_test_token")
    return clean_env


# =============================================================================
# Fixtures: Upstream Mock
# =============================================================================

class UpstreamRecorder:
    """Records outbound requests and answers them with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def respond_with(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        text: Optional[str] = None,
    ):
        if text is not None:
            self._responder = lambda request: httpx.Response(status_code, text=text)
        else:
            self._responder = lambda request: httpx.Response(status_code, json=json_body)

    def fail_with(self, exc_factory: Callable[[httpx.Request], Exception]):
        def responder(request):
            raise exc_factory(request)
        self._responder = responder

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> Any:
        return json.loads(self.last_request.content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    """Fresh upstream recorder per test."""
    return UpstreamRecorder()


# =============================================================================
# Fixtures: API
# =============================================================================

@pytest.fixture
def api_client(upstream):
    """FastAPI test client whose outbound HTTP goes to the upstream recorder."""
    from fastapi.testclient import TestClient
    from api.main import app, get_http_client

    async def mock_http_client():
        async with upstream.client() as client:
            yield client

    app.dependency_overrides[get_http_client] = mock_http_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


# =============================================================================
# Fixtures: Test Data
# =============================================================================

@pytest.fixture
def sample_form():
    """Complete form as posted by the frontend."""
    return {
        "lawName": "Right to Information Act, 2005",
        "difficulty": "beginner",
        "tone": "conversational",
        "length": "short",
    }


@pytest.fixture
def gemini_success_body():
    """Representative generateContent response with search grounding."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [{"text": "## Right to Information Act, 2005\n\n- Citizens may request information."}],
                    "role": "model",
                },
                "finishReason": "STOP",
                "groundingMetadata": {
                    "webSearchQueries": ["Right to Information Act 2005 summary"],
                },
            }
        ],
        "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 48},
        "modelVersion": "gemini-2.5-flash-preview-09-2025",
    }


@pytest.fixture
def huggingface_success_body():
    """Representative text-generation inference response."""
    return [{"generated_text": "## Right to Information Act, 2005\n\n- Citizens may request information."}]
