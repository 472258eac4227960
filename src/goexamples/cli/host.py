"""
Host for running the hover provider from the command line.
"""

from pathlib import Path
from typing import Mapping

from goexamples.core.provider import Extension, Host, HoverProvider
from goexamples.core.settings import (
    HOST_KEY,
    PORT_KEY,
    PROTOCOL_KEY,
    TIMEOUT_KEY,
    Settings,
    load_settings_file,
)
from goexamples.core.token import Position


class CliHost(Host):
    """Settings file overlaid with command-line flags."""

    def __init__(self, args):
        self.args = args
        self.provider: HoverProvider | None = None

    def get_configuration(self) -> Mapping[str, str]:
        config = load_settings_file(getattr(self.args, "settings", None))
        overrides = {
            PROTOCOL_KEY: getattr(self.args, "protocol", None),
            HOST_KEY: getattr(self.args, "host", None),
            PORT_KEY: getattr(self.args, "port", None),
            TIMEOUT_KEY: getattr(self.args, "timeout", None),
        }
        config.update({k: v for k, v in overrides.items() if v is not None})
        return config

    def register_hover_provider(self, selector: str, provider: HoverProvider) -> None:
        self.provider = provider


def settings_from_args(args) -> Settings:
    return Settings.from_mapping(CliHost(args).get_configuration())


async def start_provider(args) -> HoverProvider:
    host = CliHost(args)
    return await Extension(host).start()


def read_document(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def position_from_args(args) -> Position:
    return Position(args.line, args.character)


def add_position_arguments(parser) -> None:
    parser.add_argument("file", help="Go source file")
    parser.add_argument("line", type=int, help="Line (zero-indexed)")
    parser.add_argument("character", type=int, help="Character (zero-indexed)")
