"""
Game flow: the turn sequence a front end drives.

A front end (browser board, GUI, test) owns the position. When the human
drops a piece it calls apply_human_move(); if the game is still running it
then calls opponent_reply() to let the computer answer. game_status()
reports check, checkmate and draws so the front end can tell the player.

Legality, check and draw detection all come from python-chess. This module
only translates between square names and chess.Move, and raises the
package's own errors when something is wrong.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import chess

from opponent.constants import DEFAULT_PROMOTION
from opponent.difficulty import Difficulty
from opponent.errors import IllegalMove, InvalidPosition, NoLegalMoves
from opponent.selector import RandomSource, select_move

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStatus:
    """
    Snapshot of whether and how the game has ended.

    Attributes:
        check:     The side to move is in check.
        checkmate: The side to move is checkmated.
        stalemate: The side to move has no legal moves and is not in check.
        draw:      The game is drawn (stalemate, insufficient material,
                   fivefold repetition or the 75-move rule).
        game_over: No further moves will be played.
        result:    "1-0", "0-1", "1/2-1/2", or "*" while in progress.
    """

    check: bool
    checkmate: bool
    stalemate: bool
    draw: bool
    game_over: bool
    result: str

    def as_dict(self) -> dict[str, bool | str]:
        return asdict(self)


def game_status(board: chess.Board) -> GameStatus:
    """Report the state of board as seen by the side to move."""
    outcome = board.outcome()
    return GameStatus(
        check=board.is_check(),
        checkmate=board.is_checkmate(),
        stalemate=board.is_stalemate(),
        draw=outcome is not None and outcome.winner is None,
        game_over=outcome is not None,
        result=outcome.result() if outcome is not None else "*",
    )


def parse_board(fen: str) -> chess.Board:
    """
    Build a board from a FEN string.

    Raises:
        InvalidPosition: If python-chess rejects the FEN.
    """
    try:
        return chess.Board(fen)
    except ValueError as exc:
        raise InvalidPosition(f"Invalid FEN: {exc}") from exc


def apply_human_move(
    board: chess.Board,
    from_square: str,
    to_square: str,
    promotion: chess.PieceType | None = DEFAULT_PROMOTION,
) -> chess.Move:
    """
    Play a human move given as a pair of square names.

    The promotion piece is only attached when a pawn actually reaches the
    last rank, so callers can always pass the default.

    Args:
        board:       The position to move in. Modified: the move is pushed.
        from_square: Origin square name, e.g. "e2".
        to_square:   Destination square name, e.g. "e4".
        promotion:   Piece type a promoting pawn becomes (queen by default).

    Returns:
        The move that was pushed.

    Raises:
        IllegalMove: If a square name is invalid or the move is not legal.
    """
    try:
        origin = chess.parse_square(from_square)
        target = chess.parse_square(to_square)
    except ValueError as exc:
        raise IllegalMove(f"Invalid square in move {from_square}{to_square}") from exc

    piece = board.piece_at(origin)
    promotes = (
        piece is not None
        and piece.piece_type == chess.PAWN
        and chess.square_rank(target) in (0, 7)
    )
    move = chess.Move(origin, target, promotion=promotion if promotes else None)

    if move not in board.legal_moves:
        raise IllegalMove(f"Illegal move: {move.uci()}")

    board.push(move)
    return move


def opponent_reply(
    board: chess.Board,
    difficulty: Difficulty | str,
    rng: RandomSource | None = None,
) -> chess.Move:
    """
    Let the computer answer in the current position.

    Args:
        board:      The position to move in. Modified: the reply is pushed.
        difficulty: Tier passed through to select_move().
        rng:        Optional random source for the easy and medium tiers.

    Returns:
        The move that was pushed.

    Raises:
        InvalidDifficulty: If difficulty does not name a tier.
        NoLegalMoves:      If the game is already over.
    """
    tier = Difficulty.parse(difficulty)
    if board.is_game_over():
        raise NoLegalMoves(f"Game is already over: {board.result()}")

    move = select_move(board, tier, rng)
    if move is None:
        raise NoLegalMoves("No legal moves in this position")

    _log.info("Opponent (%s) plays %s", tier.value, board.san(move))
    board.push(move)
    return move
