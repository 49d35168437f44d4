"""
Material evaluation: the score the hard opponent maximises.

The evaluation is deliberately plain. Each piece is worth its standard
value (pawn 1, knight 3, bishop 3, rook 5, queen 9); White's pieces count
positive and Black's count negative. There are no piece-square tables,
mobility, or king-safety terms, so two positions with the same material
always score the same.

Unlike a negamax evaluation, evaluate() does not depend on whose turn it
is: the score is always from White's point of view. evaluate_for() flips
it for callers that want one side's perspective.
"""

import chess

from opponent.constants import PIECE_VALUES


def evaluate(board: chess.Board) -> int:
    """
    Material balance of the position, positive when White is ahead.

    Args:
        board: The position to score. Not modified.

    Returns:
        Sum of White's piece values minus the sum of Black's. Kings count 0,
        so the starting position (and any symmetric position) scores 0.

    Example:
        >>> import chess
        >>> evaluate(chess.Board())
        0
    """
    score = 0
    for piece in board.piece_map().values():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == chess.WHITE else -value
    return score


def evaluate_for(board: chess.Board, color: chess.Color) -> int:
    """Material balance from color's side: evaluate() for White, negated for Black."""
    score = evaluate(board)
    return score if color == chess.WHITE else -score
