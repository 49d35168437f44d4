"""Exceptions raised by the opponent and the game flow around it."""


class OpponentError(Exception):
    """Base class for every error raised by this package."""


class InvalidDifficulty(OpponentError, ValueError):
    """Raised when a difficulty tier is not one of easy, medium or hard."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown difficulty: {value!r}")


class NoLegalMoves(OpponentError):
    """Raised when the opponent is asked to move in a finished game."""


class IllegalMove(OpponentError, ValueError):
    """Raised when a human move is not legal in the current position."""


class InvalidPosition(OpponentError, ValueError):
    """Raised when a FEN string cannot be parsed into a board."""
