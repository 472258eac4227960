# src/goexamples/core/index.py
"""
Static symbol index.

Maps Go symbols to dotted qualified names:
"MultiReader" → "io.MultiReader"

Loaded once from go_index.json and shared read-only.
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping


INDEX_PATH = Path(__file__).parent / "go_index.json"


class IndexFormatError(ValueError):
    """The index file is not a JSON object of string → string."""


@dataclass(frozen=True)
class SymbolIndex:
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Copy so callers can't mutate the index through their dict
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.entries

    def __getitem__(self, symbol: str) -> str:
        return self.entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, symbol: str) -> str | None:
        """Qualified name for symbol, or None. Exact, case-sensitive match."""
        return self.entries.get(symbol)

    @classmethod
    def from_json(cls, text: str) -> "SymbolIndex":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise IndexFormatError(f"Invalid index JSON: {e}") from e

        if not isinstance(data, dict):
            raise IndexFormatError("Index must be a JSON object")

        for symbol, qualified in data.items():
            if not isinstance(qualified, str):
                raise IndexFormatError(f"Qualified name for {symbol!r} must be a string")

        return cls(data)


def load_index(path: str | Path | None = None) -> SymbolIndex:
    """Load an index from path, or the bundled go_index.json."""
    path = Path(path) if path is not None else INDEX_PATH
    return SymbolIndex.from_json(path.read_text(encoding="utf-8"))


@lru_cache
def default_index() -> SymbolIndex:
    return load_index()


def resolve_package(symbol: str | None, index: SymbolIndex) -> str:
    """
    Package path for symbol: the qualified name with "." → "/".

    Returns "" when symbol is None or not in the index.
    """
    if not symbol:
        return ""

    qualified = index.lookup(symbol)
    if qualified is None:
        return ""

    return qualified.replace(".", "/")
