"""
FastAPI web application for the chess opponent.

Endpoints:
    POST /api/move          — opponent reply for a FEN position
    POST /api/play          — apply a human move, then the opponent reply
    GET  /api/difficulties  — available tiers and the configured default

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  which suits CPU-bound work like move selection.
- Stateless per request: the client sends the full FEN each time; no server-
  side board state is maintained between requests.
- Rendering is the client's job. The API only reports moves, the new FEN,
  and the game status (check, checkmate, draw) for the client to display.
"""

from __future__ import annotations

import logging

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from opponent.config import SETTINGS
from opponent.difficulty import Difficulty
from opponent.errors import IllegalMove, InvalidPosition, NoLegalMoves
from opponent.evaluate import evaluate_for
from opponent.game import apply_human_move, game_status, opponent_reply, parse_board

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=SETTINGS.log_level)
_log = logging.getLogger(__name__)

app = FastAPI(title="Chess Opponent", version="1.0.0")

_PROMOTION_PIECES = {"q": chess.QUEEN, "r": chess.ROOK, "b": chess.BISHOP, "n": chess.KNIGHT}


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Ask the opponent to move in a position.

    Fields:
        fen: Full FEN string of the current position; the opponent plays
             the side to move.
        difficulty: "easy", "medium" or "hard". Defaults to the configured
                    tier (CHESS_OPPONENT_DIFFICULTY).
    """

    fen: str
    difficulty: Difficulty = SETTINGS.default_difficulty

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, v: object) -> Difficulty:
        """Accept tier names in any case; reject anything else."""
        return Difficulty.parse(v)


class PlayRequest(MoveRequest):
    """
    A human move followed by the opponent's reply.

    Fields:
        from_square: Origin square of the human move, e.g. "e2".
        to_square: Destination square, e.g. "e4".
        promotion: Piece a promoting pawn becomes: "q", "r", "b" or "n".
    """

    from_square: str
    to_square: str
    promotion: str = "q"

    @field_validator("promotion")
    @classmethod
    def check_promotion(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _PROMOTION_PIECES:
            raise ValueError(f"promotion must be one of {sorted(_PROMOTION_PIECES)}")
        return v


class StatusModel(BaseModel):
    check: bool
    checkmate: bool
    stalemate: bool
    draw: bool
    game_over: bool
    result: str


class MoveResponse(BaseModel):
    """
    Opponent reply.

    Fields:
        move: Reply in UCI notation (e.g. "e7e5", "a2a1q").
        san: Reply in SAN (e.g. "e5").
        fen: Board FEN after the reply.
        score: Material balance after the reply, from the opponent's side.
        difficulty: Tier that chose the move.
        status: Game status after the reply.
    """

    move: str
    san: str
    fen: str
    score: int
    difficulty: Difficulty
    status: StatusModel


class PlayResponse(BaseModel):
    """
    Result of a human move and the reply to it.

    reply is null when the human move ended the game.
    score is the material balance from the human's side.
    """

    human_move: str
    reply: str | None
    fen: str
    score: int
    status: StatusModel


class DifficultiesResponse(BaseModel):
    difficulties: list[str]
    default: Difficulty


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _board_or_400(fen: str) -> chess.Board:
    try:
        return parse_board(fen)
    except InvalidPosition as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _reply_or_400(board: chess.Board, difficulty: Difficulty, fen: str) -> chess.Move:
    try:
        return opponent_reply(board, difficulty)
    except NoLegalMoves as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        _log.exception("Move selection failed for FEN=%s", fen)
        raise HTTPException(status_code=500, detail=f"Opponent error: {exc}") from exc


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Let the opponent move in the given position.

    Raises:
        HTTPException 400: Malformed FEN or game already over.
        HTTPException 422: Unknown difficulty.
    """
    board = _board_or_400(request.fen)
    mover = board.turn
    san_board = board.copy(stack=False)

    move = _reply_or_400(board, request.difficulty, request.fen)
    score = evaluate_for(board, mover)

    _log.info(
        "Move=%s difficulty=%s score=%d fen=%s",
        move.uci(),
        request.difficulty.value,
        score,
        request.fen[:40],
    )

    return MoveResponse(
        move=move.uci(),
        san=san_board.san(move),
        fen=board.fen(),
        score=score,
        difficulty=request.difficulty,
        status=StatusModel(**game_status(board).as_dict()),
    )


@app.post("/api/play", response_model=PlayResponse)
def api_play(request: PlayRequest) -> PlayResponse:
    """
    Apply the human's move and, unless that ends the game, the reply.

    Raises:
        HTTPException 400: Malformed FEN, illegal move, or game already over.
        HTTPException 422: Unknown difficulty or promotion piece.
    """
    board = _board_or_400(request.fen)
    if board.is_game_over():
        raise HTTPException(status_code=400, detail=f"Game is already over: {board.result()}")
    human = board.turn

    try:
        human_move = apply_human_move(
            board,
            request.from_square,
            request.to_square,
            promotion=_PROMOTION_PIECES[request.promotion],
        )
    except IllegalMove as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    reply = None
    if not board.is_game_over():
        reply = _reply_or_400(board, request.difficulty, request.fen)

    return PlayResponse(
        human_move=human_move.uci(),
        reply=reply.uci() if reply is not None else None,
        fen=board.fen(),
        score=evaluate_for(board, human),
        status=StatusModel(**game_status(board).as_dict()),
    )


@app.get("/api/difficulties", response_model=DifficultiesResponse)
def api_difficulties() -> DifficultiesResponse:
    """List the tiers a client may request."""
    return DifficultiesResponse(
        difficulties=Difficulty.names(),
        default=SETTINGS.default_difficulty,
    )
