# tests/test_provider.py
"""Tests for the hover provider and two-phase activation."""

import asyncio

import httpx
import pytest

from goexamples.core.index import SymbolIndex
from goexamples.core.provider import (
    DOCUMENT_SELECTOR,
    Extension,
    Host,
    HoverProvider,
    matches_document,
)
from goexamples.core.settings import Settings
from goexamples.core.token import Position


class FakeHost(Host):
    def __init__(self, config=None):
        self.config = config or {}
        self.config_reads = 0
        self.registered = {}

    def get_configuration(self):
        self.config_reads += 1
        return self.config

    def register_hover_provider(self, selector, provider):
        self.registered[selector] = provider


@pytest.fixture
def index():
    return SymbolIndex({"MultiReader": "io.MultiReader"})


@pytest.fixture
def requests():
    return []


@pytest.fixture
def client(requests):
    def handler(request):
        requests.append(request)
        return httpx.Response(200, text=f"// example for {request.url.path}")
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_hover_known_symbol(index, client, requests):
    provider = HoverProvider(Settings(), index, client)

    hover = asyncio.run(provider.provide_hover("r := io.MultiReader(a, b)", Position(0, 10)))

    assert hover.contents.value == "```go\n// example for /go/MultiReader\n```"
    assert requests[0].url.params["package"] == "io/MultiReader"


def test_hover_unknown_symbol_still_requests(index, client, requests):
    provider = HoverProvider(Settings(), index, client)

    hover = asyncio.run(provider.provide_hover("frobnicate(x)", Position(0, 3)))

    assert hover is not None
    assert requests[0].url.path == "/go/frobnicate"
    assert requests[0].url.params["package"] == ""


def test_hover_no_token_skips_request(index, client, requests):
    provider = HoverProvider(Settings(), index, client)

    hover = asyncio.run(provider.provide_hover("x ++ y", Position(0, 2)))

    assert hover is None
    assert requests == []


def test_hover_server_error(index):
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
    provider = HoverProvider(Settings(), index, client)

    assert asyncio.run(provider.provide_hover("MultiReader", Position(0, 0))) is None


def test_matches_document():
    assert matches_document("main.go")
    assert matches_document("cmd/server/main.go")
    assert not matches_document("main.py")


class TestActivation:
    def test_activate_reads_no_configuration(self, index):
        host = FakeHost()
        ext = Extension(host, index)

        ext.activate()

        assert host.config_reads == 0
        assert host.registered == {}

    def test_after_activate_registers_provider(self, index):
        host = FakeHost({"provider.go.host": "examples.test", "provider.go.port": "9000"})
        ext = Extension(host, index)

        ext.activate()
        provider = ext.after_activate()

        assert host.registered[DOCUMENT_SELECTOR] is provider
        assert provider.settings.base_url == "http://examples.test:9000"
        assert provider.index is index

    def test_after_activate_before_activate(self, index):
        with pytest.raises(RuntimeError):
            Extension(FakeHost(), index).after_activate()

    def test_start_runs_both_phases(self, index):
        host = FakeHost()
        ext = Extension(host, index)

        provider = asyncio.run(ext.start())

        assert host.config_reads == 1
        assert host.registered[DOCUMENT_SELECTOR] is provider
        assert provider.settings == Settings()

    def test_activate_loads_bundled_index(self):
        ext = Extension(FakeHost())
        ext.activate()

        assert "MultiReader" in ext.index


def test_hover_malformed_port(index, client, requests):
    provider = HoverProvider(Settings(port="88a4"), index, client)

    assert asyncio.run(provider.provide_hover("MultiReader", Position(0, 0))) is None
    assert requests == []
