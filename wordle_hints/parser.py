"""
parser.py

Turn hint tokens into constraints.

Token grammar (case-insensitive):
  - Green:  [letter]g[slot]              e.g. 'hg3'
  - Yellow: [letter]y[excluded slots][-]  e.g. 'ly15', 'fy15-'
            each trailing '-' adds one more required occurrence

A line holds any number of tokens separated by spaces and/or commas.
"""

from __future__ import annotations

import re
from typing import List

from wordle_hints.constraints import (
    DUPLICATE_MARKER,
    GREEN,
    SLOTS,
    WORD_LENGTH,
    YELLOW,
    Constraint,
    GreenConstraint,
    YellowConstraint,
)
from wordle_hints.errors import (
    InvalidGreenPattern,
    InvalidYellowSlot,
    MalformedToken,
    MalformedYellowPattern,
    UnrecognizedKind,
)

_SEPARATORS = re.compile(r"[\s,]+")


def split_line(line: str) -> List[str]:
    """Split a raw input line into tokens, dropping empties."""
    if not isinstance(line, str):
        raise TypeError("line must be a string")
    return [t for t in _SEPARATORS.split(line) if t]


def _parse_green(token: str) -> GreenConstraint:
    letter = token[0]
    if len(token) != 3 or not ("0" <= token[2] <= "9") or int(token[2]) not in SLOTS:
        raise InvalidGreenPattern(f"Invalid pattern for green letter {letter}: {token}")
    return GreenConstraint(letter, int(token[2]))


def _parse_yellow(token: str) -> YellowConstraint:
    letter = token[0]
    body = token[2:]
    stripped = body.rstrip(DUPLICATE_MARKER)
    count = 1 + len(body) - len(stripped)

    excluded: List[int] = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            raise MalformedYellowPattern(f"Invalid pattern for yellow letter {letter}: {token}")
        slot = int(ch)
        if slot not in SLOTS:
            raise InvalidYellowSlot(f"{slot} is not a valid wordle space (1-{WORD_LENGTH} only).")
        if slot not in excluded:
            excluded.append(slot)
    return YellowConstraint(letter, frozenset(excluded), count)


def parse_token(token: str) -> Constraint:
    """
    Parse a single token into a GreenConstraint or YellowConstraint.

    Raises
    ------
    MalformedToken, UnrecognizedKind, InvalidGreenPattern,
    InvalidYellowSlot, MalformedYellowPattern
    """
    if not isinstance(token, str):
        raise TypeError("token must be a string")
    token = token.lower()
    if len(token) < 3 or not (token[0].isascii() and token[0].isalpha()):
        raise MalformedToken(f"Pattern {token!r} is malformed.")

    kind = token[1]
    if kind == GREEN:
        return _parse_green(token)
    if kind == YELLOW:
        return _parse_yellow(token)
    raise UnrecognizedKind(f"Pattern {token} is invalid: unknown kind {kind!r} (use g or y).")


def parse_line(line: str) -> List[Constraint]:
    """Parse every token on a line, in order. The first bad token aborts the line."""
    return [parse_token(t) for t in split_line(line)]
