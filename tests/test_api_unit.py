"""
Unit tests for the hover API using FastAPI TestClient (no separate server needed).
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from goexamples.core.provider import DOCUMENT_SELECTOR
from goexamples.server import deps
from goexamples.server.config import get_service_config
from goexamples.server.main import app


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"provider.go.host": "examples.test", "provider.go.port": "9000"}))
    monkeypatch.setenv("GOEXAMPLES_SETTINGS", str(path))
    get_service_config.cache_clear()
    yield path
    get_service_config.cache_clear()


@pytest.fixture
def client(settings_file):
    with TestClient(app) as c:
        yield c


def use_example_server(handler):
    provider = deps.get_host().providers[DOCUMENT_SELECTOR]
    provider.client = httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "goexamples"


def test_settings_from_file(client):
    r = client.get("/api/settings")
    assert r.status_code == 200
    data = r.json()
    assert data["host"] == "examples.test"
    assert data["port"] == "9000"
    assert data["protocol"] == "http"


class TestHover:
    def test_hover_success(self, client):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="r := io.MultiReader(a, b)")

        use_example_server(handler)

        r = client.post("/api/hover", json={"text": "io.MultiReader(a, b)", "line": 0, "character": 5})

        assert r.status_code == 200
        assert r.json() == {
            "hover": {
                "contents": {
                    "value": "```go\nr := io.MultiReader(a, b)\n```",
                    "kind": "markdown",
                }
            }
        }
        assert seen[0].url.host == "examples.test"
        assert seen[0].url.params["package"] == "io/MultiReader"

    def test_hover_no_token(self, client):
        r = client.post("/api/hover", json={"text": "x ++ y", "line": 0, "character": 2})
        assert r.status_code == 200
        assert r.json() == {"hover": None}

    def test_hover_upstream_failure(self, client):
        use_example_server(lambda request: httpx.Response(502))

        r = client.post("/api/hover", json={"text": "Println", "line": 0, "character": 1})
        assert r.status_code == 200
        assert r.json() == {"hover": None}

    def test_hover_line_out_of_range(self, client):
        r = client.post("/api/hover", json={"text": "one line", "line": 3, "character": 0})
        assert r.status_code == 422

    def test_hover_negative_position(self, client):
        r = client.post("/api/hover", json={"text": "x", "line": -1, "character": 0})
        assert r.status_code == 422


class TestSymbols:
    def test_known_symbol(self, client):
        r = client.get("/api/symbols/MultiReader")
        assert r.status_code == 200
        assert r.json() == {
            "symbol": "MultiReader",
            "qualified_name": "io.MultiReader",
            "package": "io/MultiReader",
        }

    def test_unknown_symbol(self, client):
        r = client.get("/api/symbols/Frobnicate")
        assert r.status_code == 404


class TestDocumentPath:
    def test_go_path_is_served(self, client):
        use_example_server(lambda request: httpx.Response(200, text="func Copy()"))

        r = client.post("/api/hover", json={
            "text": "io.Copy(dst, src)", "line": 0, "character": 4, "path": "cmd/main.go",
        })
        assert r.json()["hover"]["contents"]["value"] == "```go\nfunc Copy()\n```"

    def test_other_path_has_no_hover(self, client):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="func Copy()")

        use_example_server(handler)

        r = client.post("/api/hover", json={
            "text": "io.Copy(dst, src)", "line": 0, "character": 4, "path": "notes.md",
        })
        assert r.status_code == 200
        assert r.json() == {"hover": None}
        assert seen == []


def test_host_cleared_on_shutdown(settings_file):
    with TestClient(app):
        assert deps.get_host() is not None

    with pytest.raises(RuntimeError):
        deps.get_host()
