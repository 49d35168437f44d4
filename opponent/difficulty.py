"""Difficulty tiers understood by the move selector."""

from __future__ import annotations

import enum

from opponent.errors import InvalidDifficulty


class Difficulty(str, enum.Enum):
    """
    Which selection policy the opponent runs.

    The values are the lowercase names used by the HTTP API, the UCI
    Difficulty option, and the CHESS_OPPONENT_DIFFICULTY setting.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """
        Convert user input into a Difficulty.

        Strings are matched case-insensitively after trimming whitespace.
        There is no fallback tier: anything unrecognised is an error.

        Args:
            value: A Difficulty member or its string name.

        Returns:
            The matching Difficulty member.

        Raises:
            InvalidDifficulty: If value does not name a tier.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDifficulty(value)

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
