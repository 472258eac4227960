# src/goexamples/core/settings.py
"""
Example server settings.

Read from a flat mapping of dotted keys, the way editor user settings
arrive:

    {"provider.go.host": "examples.internal", "provider.go.port": "9000"}

Unset or empty values fall back to the defaults below.
"""

import json
from pathlib import Path
from typing import Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROTOCOL_KEY = "provider.go.protocol"
HOST_KEY = "provider.go.host"
PORT_KEY = "provider.go.port"
TIMEOUT_KEY = "provider.go.timeout"

DEFAULT_PROTOCOL = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "8844"
DEFAULT_TIMEOUT = 10.0  # seconds

DEFAULTS = {
    "protocol": DEFAULT_PROTOCOL,
    "host": DEFAULT_HOST,
    "port": DEFAULT_PORT,
    "timeout": DEFAULT_TIMEOUT,
}


class Settings(BaseSettings):
    """Example server address, keyed by the provider.go.* user settings."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    protocol: str = Field(DEFAULT_PROTOCOL, alias=PROTOCOL_KEY)
    host: str = Field(DEFAULT_HOST, alias=HOST_KEY)
    port: str = Field(DEFAULT_PORT, alias=PORT_KEY)
    timeout: float = Field(DEFAULT_TIMEOUT, alias=TIMEOUT_KEY)

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        # Only the host's configuration mapping counts, never the process environment
        return (init_settings,)

    @field_validator("protocol", "host", "port", mode="before")
    @classmethod
    def text_or_default(cls, value, info):
        if value is None or value == "":
            return DEFAULTS[info.field_name]
        return str(value)

    @field_validator("timeout", mode="before")
    @classmethod
    def timeout_or_default(cls, value):
        if value is None or value == "":
            return DEFAULT_TIMEOUT
        return value

    @classmethod
    def from_mapping(cls, config: Mapping[str, object]) -> "Settings":
        return cls.model_validate(dict(config))

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    def to_dict(self) -> dict:
        return self.model_dump()


def load_settings_file(path: str | Path | None) -> dict:
    """Read a JSON settings file. A missing path or file gives {}."""
    if not path:
        return {}

    path = Path(path)
    if not path.exists():
        return {}

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    return data
