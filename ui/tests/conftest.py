import pytest
import requests
from fastapi.testclient import TestClient

from ui.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_get(monkeypatch):
    """Route `requests.get` to canned responses keyed by URL path; records every call."""
    calls = []
    routes = {}

    def _get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        for path, response in routes.items():
            if url.endswith(path):
                if isinstance(response, Exception):
                    raise response
                return response
        raise requests.ConnectionError(f"no route for {url}")

    monkeypatch.setattr("ui.frontend.api.requests.get", _get)
    _get.calls = calls
    _get.routes = routes
    return _get


@pytest.fixture
def client():
    from ui.backend.app import app

    # Ensure FastAPI startup events run (loads app.state.store).
    with TestClient(app) as test_client:
        yield test_client
