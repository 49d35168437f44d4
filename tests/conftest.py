from __future__ import annotations

import random

import chess
import pytest

# White pawn on e4 can take a black queen on d5; every other move leaves
# the queen on the board.
PAWN_TAKES_QUEEN_FEN = "4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 1"

# Position after 1.f3 e5 2.g4; Black mates with Qh4.
FOOLS_MATE_SETUP_FEN = "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq g3 0 2"

# Black to move, not in check, no legal moves.
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"


class FixedIndex:
    """Random source that always draws the same index (clamped to range)."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.calls: list[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        return min(self.index, n - 1)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def start_board() -> chess.Board:
    return chess.Board()


@pytest.fixture
def fools_mate_board() -> chess.Board:
    board = chess.Board()
    for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
        board.push_uci(uci)
    return board
