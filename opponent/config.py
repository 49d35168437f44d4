"""
Environment configuration for the chess opponent.

- Reads settings from environment variables; every key has a default.
- Exposes SETTINGS, a frozen Settings instance built at import time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from opponent.constants import DEFAULT_DIFFICULTY
from opponent.difficulty import Difficulty


def _get(
    env: Mapping[str, str],
    name: str,
    default: Any,
    cast: Callable[[Any], Any] | None = None,
) -> Any:
    val = env.get(name)
    if val is None:
        return default
    return cast(val) if cast else val


@dataclass(frozen=True)
class Settings:
    # Tier used when a request or UCI session does not pick one
    default_difficulty: Difficulty

    # Logging level name for the web app (e.g. "INFO", "DEBUG")
    log_level: str


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from env (os.environ by default).

    Raises InvalidDifficulty if CHESS_OPPONENT_DIFFICULTY names no tier.
    """
    env = os.environ if env is None else env
    return Settings(
        default_difficulty=_get(
            env, "CHESS_OPPONENT_DIFFICULTY", Difficulty(DEFAULT_DIFFICULTY), cast=Difficulty.parse
        ),
        log_level=_get(env, "CHESS_OPPONENT_LOG_LEVEL", "INFO", cast=lambda v: v.strip().upper()),
    )


SETTINGS = load_settings()
