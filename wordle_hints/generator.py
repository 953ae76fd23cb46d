"""
generator.py

Expand hint constraints into every consistent 5-slot pattern.

Greens are locked into a base pattern first. Each yellow occurrence then
replaces the working set with one child per (free allowed slot, pattern)
pair. The final set is deduplicated in generation order.
"""

from __future__ import annotations

from typing import Iterable, List

from wordle_hints.constraints import (
    PLACEHOLDER,
    WORD_LENGTH,
    Constraint,
    GreenConstraint,
    YellowConstraint,
)
from wordle_hints.errors import ConflictingGreenConstraint
from wordle_hints.parser import parse_line

BLANK = PLACEHOLDER * WORD_LENGTH


def _place(pattern: str, slot: int, letter: str) -> str:
    i = slot - 1
    return pattern[:i] + letter + pattern[i + 1:]


def _split(constraints: Iterable[Constraint]) -> tuple[list[GreenConstraint], list[YellowConstraint]]:
    green: list[GreenConstraint] = []
    yellow: list[YellowConstraint] = []
    for c in constraints:
        match c:
            case GreenConstraint():
                green.append(c)
            case YellowConstraint():
                yellow.append(c)
            case _:
                raise TypeError(f"not a constraint: {c!r}")
    return green, yellow


def base_pattern(green: Iterable[GreenConstraint]) -> str:
    """Write every green letter into a blank pattern."""
    pattern = BLANK
    for g in green:
        held = pattern[g.slot - 1]
        if held != PLACEHOLDER:
            raise ConflictingGreenConstraint(g.letter, g.slot, held)
        pattern = _place(pattern, g.slot, g.letter)
    return pattern


def expand(solutions: List[str], yellow: YellowConstraint) -> List[str]:
    """One yellow occurrence: place the letter in every free allowed slot of every pattern."""
    out: List[str] = []
    for slot in yellow.allowed_slots():
        for pattern in solutions:
            if pattern[slot - 1] != PLACEHOLDER:
                continue
            out.append(_place(pattern, slot, yellow.letter))
    return out


def generate_patterns(constraints: Iterable[Constraint]) -> List[str]:
    """
    Return every pattern consistent with `constraints`.

    - No constraints -> ['_____']
    - Unsatisfiable constraints -> []

    Raises ConflictingGreenConstraint if two greens claim the same slot.
    """
    constraints = list(constraints)
    green, yellow = _split(constraints)
    base = base_pattern(green)
    if not constraints:
        return [base]

    solutions = [base]
    for y in yellow:
        for _ in range(y.count):
            solutions = expand(solutions, y)

    # dict keeps first-seen order
    return list(dict.fromkeys(solutions))


def solve_line(line: str) -> List[str]:
    """Parse a raw input line and generate its patterns."""
    return generate_patterns(parse_line(line))
