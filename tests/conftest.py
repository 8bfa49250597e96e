import pytest
from unittest.mock import AsyncMock
from tests.helpers import TEST_OPENAI_KEY, TEST_PUBMED_KEY


@pytest.fixture(autouse=True)
def relay_config(monkeypatch):
    """Known configuration for every test."""
    from config import Config

    monkeypatch.setattr(Config, "OPENAI_API_KEY", TEST_OPENAI_KEY)
    monkeypatch.setattr(Config, "PUBMED_API_KEY", TEST_PUBMED_KEY)
    monkeypatch.setattr(Config, "OPENAI_API_URL", "https://api.openai.test/v1/chat/completions")
    monkeypatch.setattr(Config, "PUBMED_BASE_URL", "https://eutils.test/entrez/eutils")
    monkeypatch.setattr(Config, "FRONTEND_URL", "http://localhost:3000")
    monkeypatch.setattr(Config, "ALLOWED_ORIGINS", "https://reviewer.github.io")
    monkeypatch.setattr(Config, "ENVIRONMENT", "test")
    return Config


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for upstream calls."""
    client = AsyncMock()
    client.request = AsyncMock()
    return client


@pytest.fixture
def upstream_builder():
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    return UpstreamClientBuilder()


@pytest.fixture
def openai_stub():
    """Upstream stub for the chat completion provider (200 by default)."""
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    from tests.fixtures.responses import MOCK_CHAT_COMPLETION
    return UpstreamClientBuilder().with_json(200, MOCK_CHAT_COMPLETION).build()


@pytest.fixture
def pubmed_stub():
    """Upstream stub for E-utilities (200 by default)."""
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    from tests.fixtures.responses import MOCK_ESEARCH_RESPONSE
    return UpstreamClientBuilder().with_json(200, MOCK_ESEARCH_RESPONSE).build()


@pytest.fixture
def use_stubs(monkeypatch, openai_stub, pubmed_stub):
    """Route both upstreams to their stubs. Returns a setter to swap a stub."""
    from utils.http_client import HTTPClientManager

    stubs = {"openai": openai_stub, "pubmed": pubmed_stub}
    monkeypatch.setattr(HTTPClientManager, "get_openai_client", lambda: stubs["openai"])
    monkeypatch.setattr(HTTPClientManager, "get_pubmed_client", lambda: stubs["pubmed"])

    def replace(name, stub):
        stubs[name] = stub
        return stub

    return replace


@pytest.fixture
def configured_app(use_stubs):
    """Pre-configured app with both upstreams stubbed."""
    from fastapi.testclient import TestClient
    from main import create_app

    with TestClient(create_app()) as client:
        yield client
