"""Tests for the /derive, /derive/page and /plugins endpoints.

The app is exercised end to end through the FastAPI test client; settings are
rebuilt from a monkeypatched environment for every test.
"""

import pytest
from fastapi.testclient import TestClient

from pagegen.config import get_settings
from pagegen.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def reset_state():
    """Clear the slowapi in-memory counter and the cached settings before every test."""
    app.state.limiter._storage.reset()
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Shared content fixtures
# ---------------------------------------------------------------------------

_CONFIG = {"__metadata": {"modelName": "Config", "id": "cfg"}, "title": "My Site"}

_OBJECTS = [
    _CONFIG,
    {"__metadata": {"modelName": "PageLayout"}, "slug": "about", "title": "About"},
    {"__metadata": {"modelName": "Person"}, "slug": "jane", "name": "Jane"},
    {"__metadata": {"modelName": "PostLayout"}, "slug": "/blog/post-1", "title": "Post 1"},
]


def test_health_check():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Hello from pagegen", "dev": False, "environment": "master"}


class TestDeriveEndpoint:
    def test_derives_pages_and_props(self):
        resp = client.post("/derive", json={"objects": _OBJECTS})
        assert resp.status_code == 200
        data = resp.json()
        assert data["props"] == {"site": _CONFIG}
        assert data["paths"] == ["/about", "/blog/post-1"]
        assert data["objects"] == _OBJECTS
        assert data["pages"][0] == {
            "__metadata": {
                "modelName": "PageLayout",
                "urlPath": "/about",
                "pageCssClasses": ["page-about"],
            },
            "slug": "about",
            "title": "About",
        }

    def test_config_only(self):
        resp = client.post("/derive", json={"objects": [_CONFIG]})
        assert resp.status_code == 200
        assert resp.json()["pages"] == []
        assert resp.json()["props"] == {"site": _CONFIG}

    def test_no_config_gives_null_site(self):
        resp = client.post("/derive", json={"objects": _OBJECTS[1:]})
        assert resp.json()["props"] == {"site": None}

    def test_empty_body(self):
        resp = client.post("/derive", json={})
        assert resp.status_code == 200
        assert resp.json()["pages"] == []

    def test_missing_slug_returns_422(self):
        objects = [{"__metadata": {"modelName": "PostLayout"}, "title": "No slug"}]
        resp = client.post("/derive", json={"objects": objects})
        assert resp.status_code == 422
        assert "PostLayout" in resp.json()["detail"]

    def test_missing_metadata_returns_422(self):
        resp = client.post("/derive", json={"objects": [{"slug": "about"}]})
        assert resp.status_code == 422

    def test_non_string_model_name_returns_422(self):
        objects = [{"__metadata": {"modelName": {"x": 1}}, "slug": "about"}]
        resp = client.post("/derive", json={"objects": objects})
        assert resp.status_code == 422
        assert "modelName" in resp.json()["detail"]

    def test_idempotent(self):
        first = client.post("/derive", json={"objects": _OBJECTS}).json()
        second = client.post("/derive", json={"objects": _OBJECTS}).json()
        assert first == second


class TestDerivePageEndpoint:
    def test_resolves_page_props(self):
        resp = client.post("/derive/page", json={"objects": _OBJECTS, "url_path": "/blog/post-1"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["site"] == _CONFIG
        assert data["page"]["title"] == "Post 1"
        assert data["page"]["__metadata"]["urlPath"] == "/blog/post-1"

    def test_unknown_path_returns_404(self):
        resp = client.post("/derive/page", json={"objects": _OBJECTS, "url_path": "/jane"})
        assert resp.status_code == 404

    def test_url_path_required(self):
        resp = client.post("/derive/page", json={"objects": _OBJECTS})
        assert resp.status_code == 422


class TestPluginsEndpoint:
    def test_lists_redacted_plugins(self, monkeypatch):
        monkeypatch.setenv("CONTENTFUL_ACCESS_TOKEN", "secret-token")
        monkeypatch.setenv("CONTENTFUL_SPACE_ID", "space1")
        monkeypatch.setenv("NODE_ENV", "development")
        resp = client.get("/plugins")
        assert resp.status_code == 200
        data = resp.json()
        assert data["dev"] is True
        source, target = data["plugins"]
        assert source["module"] == "sourcebit-source-contentful"
        assert source["options"]["accessToken"] == "***"
        assert source["options"]["spaceId"] == "space1"
        assert source["options"]["environment"] == "master"
        assert target["module"] == "sourcebit-target-next"
        assert target["options"]["pages"] == "derive_pages"
        assert target["options"]["liveUpdate"] is True
        assert "secret-token" not in resp.text

    def test_credentials_from_dotenv(self, tmp_path):
        (tmp_path / ".env").write_text(
            "CONTENTFUL_ACCESS_TOKEN=from-file\nCONTENTFUL_SPACE_ID=file-space\n",
            encoding="utf-8",
        )
        resp = client.get("/plugins")
        assert resp.status_code == 200
        assert resp.json()["plugins"][0]["options"]["spaceId"] == "file-space"

    def test_missing_credentials_returns_503(self):
        resp = client.get("/plugins")
        assert resp.status_code == 503
        assert "CONTENTFUL_ACCESS_TOKEN" in resp.json()["detail"]
