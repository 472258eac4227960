# src/goexamples/core/token.py
"""
Token extraction.

Finds the identifier under a cursor by looking for a run of word
characters (ASCII letters, digits, underscore) on either side of it.
Purely lexical: no Go parsing.
"""

import re
from dataclasses import dataclass


LEFT_WORD = re.compile(r"\w+$", re.ASCII)
RIGHT_WORD = re.compile(r"^\w+", re.ASCII)


@dataclass(frozen=True)
class Position:
    line: int  # zero-indexed
    character: int  # zero-indexed offset within the line


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def _matches(text: str, pos: Position) -> tuple[str, re.Match | None, re.Match | None]:
    line = split_lines(text)[pos.line]
    left = LEFT_WORD.search(line[:pos.character])
    right = RIGHT_WORD.search(line[pos.character:])
    return line, left, right


def extract_token(text: str, pos: Position) -> str | None:
    """Return the word spanning pos, or None if the cursor is not on a word."""
    _, left, right = _matches(text, pos)

    if not left and not right:
        return None

    return (left.group() if left else "") + (right.group() if right else "")


def token_span(text: str, pos: Position) -> tuple[int, int] | None:
    """Character range [start, end) of the token under pos on its line."""
    line, left, right = _matches(text, pos)

    if not left and not right:
        return None

    # Slicing past the end of the line behaves like end-of-line
    cursor = min(pos.character, len(line))
    start = cursor - len(left.group()) if left else cursor
    end = cursor + len(right.group()) if right else cursor
    return start, end
