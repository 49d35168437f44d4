"""
Opponent constants: piece values and gameplay defaults.

Piece values use whole pawn units (1 pawn = 1), not centipawns. The
opponent only ever compares material totals, so the coarser scale is
enough and keeps scores readable in logs and API responses.
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (pawn units)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 1
KNIGHT_VALUE: int = 3
BISHOP_VALUE: int = 3
ROOK_VALUE: int = 5
QUEEN_VALUE: int = 9
KING_VALUE: int = 0  # The king is never captured, so it carries no material

PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------
# UCI GUIs expect centipawns in "info score cp"; material scores are
# multiplied by this before being reported.
CENTIPAWNS_PER_PAWN: int = 100

# ---------------------------------------------------------------------------
# Gameplay defaults
# ---------------------------------------------------------------------------

DEFAULT_DIFFICULTY: str = "easy"

# Human moves dropped onto the last rank promote to a queen unless the
# front end asks for something else.
DEFAULT_PROMOTION: int = chess.QUEEN
