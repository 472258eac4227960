"""
Shared dependencies for routes.
"""

from typing import Mapping

from goexamples.core.index import SymbolIndex, default_index
from goexamples.core.provider import Host, HoverProvider, matches_document
from goexamples.core.settings import load_settings_file
from goexamples.server.config import get_service_config


class ServiceHost(Host):
    """Hosts the core inside the API service. Config comes from a JSON file."""

    def __init__(self, settings_path: str | None = None):
        self.settings_path = settings_path if settings_path is not None else get_service_config().settings
        self.providers: dict[str, HoverProvider] = {}

    def get_configuration(self) -> Mapping[str, str]:
        return load_settings_file(self.settings_path)

    def register_hover_provider(self, selector: str, provider: HoverProvider) -> None:
        self.providers[selector] = provider

    def provider_for(self, path: str | None) -> HoverProvider | None:
        """Provider registered for path's selector; any provider when path is None."""
        for selector, provider in self.providers.items():
            if path is None or matches_document(path, selector):
                return provider
        return None


_host: ServiceHost | None = None


def set_host(host: ServiceHost | None) -> None:
    global _host
    _host = host


def get_host() -> ServiceHost:
    if _host is None:
        raise RuntimeError("Service host not started")
    return _host


def get_provider(path: str | None = None) -> HoverProvider | None:
    return get_host().provider_for(path)


def get_index() -> SymbolIndex:
    return default_index()
