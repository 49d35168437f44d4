"""
Chess opponent package.

This package implements a difficulty-tiered computer opponent on top of
python-chess. python-chess owns the rules (move generation, legality,
check and draw detection); this package only decides which legal move to
play.

Modules:
    constants   — Piece values and opponent defaults
    difficulty  — The easy / medium / hard tiers
    errors      — Exception hierarchy shared by all surfaces
    config      — Environment-driven settings
    evaluate    — Static material evaluation
    selector    — Move selection policies, one per difficulty tier
    game        — Human move application, game status, opponent reply
"""

from opponent.difficulty import Difficulty
from opponent.errors import (
    IllegalMove,
    InvalidDifficulty,
    InvalidPosition,
    NoLegalMoves,
    OpponentError,
)
from opponent.evaluate import evaluate, evaluate_for
from opponent.selector import rank_moves, select_move

__all__ = [
    "Difficulty",
    "IllegalMove",
    "InvalidDifficulty",
    "InvalidPosition",
    "NoLegalMoves",
    "OpponentError",
    "evaluate",
    "evaluate_for",
    "rank_moves",
    "select_move",
]
