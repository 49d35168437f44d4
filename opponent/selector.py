"""
Move selection: one policy per difficulty tier.

This module defines the stable entry point used by the game flow, the web
API, and the UCI front end:

    select_move(board, difficulty, rng=None) -> chess.Move | None

Policies:

1. easy: a uniformly random legal move.

2. medium: a uniformly random capture when at least one capture is legal,
   otherwise the easy policy. Captures include en passant, as reported by
   board.is_capture().

3. hard: a one-ply greedy search. Every legal move is played on a private
   copy of the board and the resulting material balance is scored from the
   mover's side. The highest score wins; on a tie the move generated first
   wins, so hard is deterministic for a given position.

The caller's board is never modified. Exploration works on copies made with
board.copy(stack=False), so there is no push/pop pairing to get wrong and
the caller's move stack is left alone.

Randomness comes from an injectable source with a randrange(n) method.
random.Random instances qualify; tests pass a seeded one. When no source is
given the module-level generator from the random module is used.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Protocol, Sequence

import chess

from opponent.difficulty import Difficulty
from opponent.evaluate import evaluate_for

_log = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw a uniform index in [0, n)."""

    def randrange(self, n: int) -> int: ...


def _pick(moves: Sequence[chess.Move], rng: RandomSource) -> chess.Move:
    return moves[rng.randrange(len(moves))]


def rank_moves(board: chess.Board) -> list[tuple[chess.Move, int]]:
    """
    Score every legal move by the material balance it leads to.

    Each move is applied to a fresh copy of the board (without the move
    stack, which the evaluation does not need), so the input board is
    untouched. Scores are from the perspective of the side to move in
    board, i.e. higher is better for the player about to move.

    Args:
        board: The current position. Not modified.

    Returns:
        (move, score) pairs in python-chess move generation order.
    """
    mover = board.turn
    ranked: list[tuple[chess.Move, int]] = []
    for move in board.legal_moves:
        child = board.copy(stack=False)
        child.push(move)
        ranked.append((move, evaluate_for(child, mover)))
    return ranked


def _select_easy(board: chess.Board, rng: RandomSource) -> chess.Move | None:
    moves = list(board.legal_moves)
    if not moves:
        return None
    return _pick(moves, rng)


def _select_medium(board: chess.Board, rng: RandomSource) -> chess.Move | None:
    moves = list(board.legal_moves)
    if not moves:
        return None
    captures = [move for move in moves if board.is_capture(move)]
    if captures:
        return _pick(captures, rng)
    return _pick(moves, rng)


def _select_hard(board: chess.Board, rng: RandomSource) -> chess.Move | None:
    best_move = None
    best_score = None
    for move, score in rank_moves(board):
        # Strictly greater: the first move reaching the best score is kept.
        if best_score is None or score > best_score:
            best_move = move
            best_score = score
    return best_move


_POLICIES: dict[Difficulty, Callable[[chess.Board, RandomSource], chess.Move | None]] = {
    Difficulty.EASY: _select_easy,
    Difficulty.MEDIUM: _select_medium,
    Difficulty.HARD: _select_hard,
}


def select_move(
    board: chess.Board,
    difficulty: Difficulty | str,
    rng: RandomSource | None = None,
) -> chess.Move | None:
    """
    Choose the opponent's move for the current position.

    Args:
        board:      The current position. Not modified.
        difficulty: A Difficulty member or its name ("easy", "medium",
                    "hard"). Parsed before any move is generated.
        rng:        Random source for the easy and medium tiers. Defaults
                    to the random module's shared generator.

    Returns:
        A move from board.legal_moves, or None if there are no legal moves.
        Callers are expected to check for a finished game first.

    Raises:
        InvalidDifficulty: If difficulty does not name a tier.
    """
    tier = Difficulty.parse(difficulty)
    policy = _POLICIES[tier]
    move = policy(board, rng if rng is not None else random)
    _log.debug("difficulty=%s move=%s fen=%s", tier.value, move, board.fen())
    return move
