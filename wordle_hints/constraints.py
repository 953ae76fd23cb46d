"""
constraints.py

Typed hint constraints for a five-letter word.

A constraint is one of two kinds:
- GreenConstraint: the letter sits at exactly one slot
- YellowConstraint: the letter appears `count` times, never at `excluded_slots`

Slots are 1-based (1..5) everywhere in this module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Union

from wordle_hints.errors import InvalidGreenPattern, InvalidYellowSlot

WORD_LENGTH = 5
SLOTS = range(1, WORD_LENGTH + 1)
PLACEHOLDER = "_"
DUPLICATE_MARKER = "-"
GREEN = "g"
YELLOW = "y"


def _check_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1:
        raise TypeError("letter must be a single character string")
    if not (letter.isascii() and letter.isalpha()):
        raise ValueError(f"letter must be alphabetic: {letter!r}")
    return letter.upper()


def is_valid_slot(slot: int) -> bool:
    return isinstance(slot, int) and not isinstance(slot, bool) and slot in SLOTS


@dataclass(frozen=True)
class GreenConstraint:
    letter: str
    slot: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _check_letter(self.letter))
        if not is_valid_slot(self.slot):
            raise InvalidGreenPattern(
                f"{self.slot} is not a valid wordle space (1-{WORD_LENGTH} only)"
            )

    @property
    def token(self) -> str:
        """Canonical input token, e.g. `hg3`."""
        return f"{self.letter.lower()}{GREEN}{self.slot}"


@dataclass(frozen=True)
class YellowConstraint:
    letter: str
    excluded_slots: FrozenSet[int] = field(default_factory=frozenset)
    count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _check_letter(self.letter))
        # accept any iterable of slots, store a deduplicated frozenset
        excluded = frozenset(self.excluded_slots)
        for slot in excluded:
            if not is_valid_slot(slot):
                raise InvalidYellowSlot(
                    f"{slot} is not a valid wordle space (1-{WORD_LENGTH} only)"
                )
        object.__setattr__(self, "excluded_slots", excluded)
        if not isinstance(self.count, int) or isinstance(self.count, bool) or self.count < 1:
            raise ValueError("count must be a positive integer")

    def allowed_slots(self) -> list[int]:
        """Slots this letter may occupy, ascending."""
        return [s for s in SLOTS if s not in self.excluded_slots]

    @property
    def token(self) -> str:
        """Canonical input token, e.g. `fy15-`."""
        digits = "".join(str(s) for s in sorted(self.excluded_slots))
        return f"{self.letter.lower()}{YELLOW}{digits}" + DUPLICATE_MARKER * (self.count - 1)


Constraint = Union[GreenConstraint, YellowConstraint]