# src/goexamples/core/provider.py
"""
Hover provider and activation.

The core depends on a Host for configuration and registration; hosts
(the HTTP service, the CLI, an editor bridge) implement it.

Activation runs in two phases because configuration is not readable
while the host is still starting up:

    activate()        fast: load the index, remember the host
    after_activate()  read configuration, register the hover provider
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from fnmatch import fnmatch
from typing import Mapping

import httpx

from goexamples.core.fetch import Hover, fetch_example
from goexamples.core.index import SymbolIndex, default_index, resolve_package
from goexamples.core.settings import Settings
from goexamples.core.token import Position, extract_token


logger = logging.getLogger(__name__)

DOCUMENT_SELECTOR = "*.go"


def matches_document(path: str, selector: str = DOCUMENT_SELECTOR) -> bool:
    return fnmatch(path, selector)


class HoverProvider:
    def __init__(
        self,
        settings: Settings,
        index: SymbolIndex | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings
        self.index = index if index is not None else default_index()
        self.client = client

    async def provide_hover(self, text: str, pos: Position) -> Hover | None:
        symbol = extract_token(text, pos)
        if symbol is None:
            return None

        package = resolve_package(symbol, self.index)
        return await fetch_example(self.settings, symbol, package, client=self.client)


class Host(ABC):
    """What the core needs from whoever is hosting it."""

    @abstractmethod
    def get_configuration(self) -> Mapping[str, str]:
        pass

    @abstractmethod
    def register_hover_provider(self, selector: str, provider: HoverProvider) -> None:
        pass


class Extension:
    def __init__(
        self,
        host: Host,
        index: SymbolIndex | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.host = host
        self.index = index
        self.client = client
        self.provider: HoverProvider | None = None
        self._activated = False

    def activate(self) -> None:
        """Phase 1. Must not read configuration."""
        if self.index is None:
            self.index = default_index()
        self._activated = True
        logger.debug("Activated with %d indexed symbols", len(self.index))

    def after_activate(self) -> HoverProvider:
        """Phase 2. Read configuration and register the provider."""
        if not self._activated:
            raise RuntimeError("after_activate() called before activate()")

        settings = Settings.from_mapping(self.host.get_configuration())
        self.provider = HoverProvider(settings, self.index, self.client)
        self.host.register_hover_provider(DOCUMENT_SELECTOR, self.provider)
        logger.debug("Registered hover provider for %s against %s", DOCUMENT_SELECTOR, settings.base_url)
        return self.provider

    async def start(self) -> HoverProvider:
        """Run both phases, yielding to the event loop once in between."""
        self.activate()
        await asyncio.sleep(0)
        return self.after_activate()
