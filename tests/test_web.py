from __future__ import annotations

import chess
import pytest
from fastapi.testclient import TestClient

from web.app import app

from tests.conftest import FOOLS_MATE_SETUP_FEN, PAWN_TAKES_QUEEN_FEN


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_difficulties(client):
    response = client.get("/api/difficulties")
    assert response.status_code == 200
    payload = response.json()
    assert payload["difficulties"] == ["easy", "medium", "hard"]
    assert payload["default"] in payload["difficulties"]


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_move_is_legal(client, difficulty):
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "difficulty": difficulty})
    assert response.status_code == 200
    payload = response.json()

    board = chess.Board()
    move = chess.Move.from_uci(payload["move"])
    assert move in board.legal_moves
    assert payload["san"] == board.san(move)
    board.push(move)
    assert payload["fen"] == board.fen()
    assert payload["difficulty"] == difficulty
    assert payload["status"]["result"] == "*"


def test_hard_move_takes_queen(client):
    response = client.post("/api/move", json={"fen": PAWN_TAKES_QUEEN_FEN, "difficulty": "HARD"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["move"] == "e4d5"
    assert payload["san"] == "exd5"
    assert payload["score"] == 1
    assert payload["difficulty"] == "hard"


def test_move_default_difficulty(client):
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN})
    assert response.status_code == 200


def test_unknown_difficulty_is_422(client):
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "difficulty": "expert"})
    assert response.status_code == 422


def test_bad_fen_is_400(client):
    response = client.post("/api/move", json={"fen": "garbage", "difficulty": "easy"})
    assert response.status_code == 400


def test_game_over_is_400(client):
    board = chess.Board(FOOLS_MATE_SETUP_FEN)
    board.push_uci("d8h4")
    response = client.post("/api/move", json={"fen": board.fen(), "difficulty": "easy"})
    assert response.status_code == 400
    assert "over" in response.json()["detail"]


def test_play_applies_human_move_and_reply(client):
    response = client.post("/api/play", json={
        "fen": chess.STARTING_FEN,
        "from_square": "e2",
        "to_square": "e4",
        "difficulty": "hard",
    })
    assert response.status_code == 200
    payload = response.json()
    assert payload["human_move"] == "e2e4"

    board = chess.Board()
    board.push_uci("e2e4")
    reply = chess.Move.from_uci(payload["reply"])
    assert reply in board.legal_moves
    board.push(reply)
    assert payload["fen"] == board.fen()
    assert payload["score"] == 0


def test_play_mating_move_gets_no_reply(client):
    response = client.post("/api/play", json={
        "fen": FOOLS_MATE_SETUP_FEN,
        "from_square": "d8",
        "to_square": "h4",
    })
    assert response.status_code == 200
    payload = response.json()
    assert payload["reply"] is None
    assert payload["status"]["checkmate"] is True
    assert payload["status"]["result"] == "0-1"


def test_play_illegal_move_is_400(client):
    response = client.post("/api/play", json={
        "fen": chess.STARTING_FEN,
        "from_square": "e2",
        "to_square": "e5",
    })
    assert response.status_code == 400


def test_play_promotion(client):
    response = client.post("/api/play", json={
        "fen": "8/P3k3/8/8/8/8/8/4K3 w - - 0 1",
        "from_square": "a7",
        "to_square": "a8",
        "promotion": "N",
        "difficulty": "easy",
    })
    assert response.status_code == 200
    assert response.json()["human_move"] == "a7a8n"


def test_play_bad_promotion_is_422(client):
    response = client.post("/api/play", json={
        "fen": chess.STARTING_FEN,
        "from_square": "e2",
        "to_square": "e4",
        "promotion": "k",
    })
    assert response.status_code == 422
