from __future__ import annotations

import pytest

from opponent.config import load_settings
from opponent.difficulty import Difficulty
from opponent.errors import InvalidDifficulty


def test_defaults():
    settings = load_settings({})
    assert settings.default_difficulty is Difficulty.EASY
    assert settings.log_level == "INFO"


def test_reads_environment():
    settings = load_settings({
        "CHESS_OPPONENT_DIFFICULTY": " Hard ",
        "CHESS_OPPONENT_LOG_LEVEL": "debug",
    })
    assert settings.default_difficulty is Difficulty.HARD
    assert settings.log_level == "DEBUG"


def test_bad_difficulty_fails_fast():
    with pytest.raises(InvalidDifficulty):
        load_settings({"CHESS_OPPONENT_DIFFICULTY": "impossible"})


def test_settings_are_frozen():
    settings = load_settings({})
    with pytest.raises(AttributeError):
        settings.log_level = "DEBUG"
