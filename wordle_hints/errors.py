"""
errors.py

Exceptions raised while parsing hint tokens and generating patterns.
Everything derives from ValueError so callers can catch bad input the same way
they would any other validation failure.
"""


class HintError(ValueError):
    """Base class for invalid hint input."""


class MalformedToken(HintError):
    pass


class UnrecognizedKind(HintError):
    pass


class InvalidGreenPattern(HintError):
    pass


class InvalidYellowSlot(HintError):
    pass


class MalformedYellowPattern(HintError):
    pass


class ConflictingGreenConstraint(HintError):
    def __init__(self, letter: str, slot: int, existing: str) -> None:
        super().__init__(
            f"cannot place green {letter} in slot {slot}: already holds green {existing}"
        )
        self.letter = letter
        self.slot = slot
        self.existing = existing
