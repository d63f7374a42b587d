"""
Pytest configuration and shared fixtures.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import ProviderConfig
from app.services.form_service import FormService


class FakeProvider:
    """Stands in for the model provider behind an httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self._responder = lambda request: httpx.Response(200, json={})

    def respond(self, status_code=200, json=None, text=None):
        if json is not None:
            self._responder = lambda request: httpx.Response(status_code, json=json)
        else:
            self._responder = lambda request: httpx.Response(status_code, text=text or "")

    def fail(self, exc):
        def raise_exc(request):
            raise exc

        self._responder = raise_exc

    def handler(self, request):
        self.requests.append(request)
        return self._responder(request)

    @property
    def call_count(self):
        return len(self.requests)


# =============================================================================
# Provider fixtures
# =============================================================================

@pytest.fixture
def provider_config():
    """Provide a complete provider config."""
    return ProviderConfig(
        api_key="test-key-12345",
        model="test-model",
        base_url="https://llm.test",
    )


@pytest.fixture
def upstream():
    """Provide a scriptable fake model provider."""
    return FakeProvider()


@pytest.fixture
def make_service(upstream):
    """Build FormService instances wired to the fake provider."""

    def _make(config):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
        return FormService(config, http_client=http_client)

    return _make


@pytest.fixture
def form_service(make_service, provider_config):
    return make_service(provider_config)


@pytest.fixture
def form_schema():
    """Provide a minimal form schema as the model would return it."""
    return {
        "formTitle": "X",
        "themeColor": "#fff",
        "font": "Arial",
        "fields": [],
    }


@pytest.fixture
def completion_body():
    """Wrap a content value in a chat completion envelope."""

    def _body(content):
        return {
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    return _body


# =============================================================================
# App fixtures
# =============================================================================

@pytest.fixture
def client(form_service):
    """TestClient with the form service swapped for the fake-backed one."""
    from app.api.dependencies import get_form_service
    from app.main import app

    app.dependency_overrides[get_form_service] = lambda: form_service
    yield TestClient(app)
    app.dependency_overrides.clear()
