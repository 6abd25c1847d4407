import logging

import chess
import pytest
from fastapi.testclient import TestClient

from web.app import MAX_DEPTH, MoveRequest, app

client = TestClient(app)

MATE_IN_ONE_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4"
WHITE_MATED_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


def test_move_returns_engine_move_and_new_fen():
    response = client.post("/api/move", json={"fen": MATE_IN_ONE_FEN, "depth": 1})
    assert response.status_code == 200

    body = response.json()
    assert body["move"] == "h5f7"
    assert body["score"] == -20000
    assert body["depth"] == 1
    assert body["leaves"] > 0
    assert chess.Board(body["fen"]).is_checkmate()


def test_move_from_start_position():
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "depth": 0})
    assert response.status_code == 200
    body = response.json()
    assert chess.Move.from_uci(body["move"]) in chess.Board().legal_moves
    assert body["leaves"] == 20


@pytest.mark.parametrize("depth, expected", [(-3, 0), (99, MAX_DEPTH)])
def test_move_request_clamps_depth(depth, expected):
    assert MoveRequest(fen=chess.STARTING_FEN, depth=depth).depth == expected


def test_move_rejects_bad_fen():
    response = client.post("/api/move", json={"fen": "garbage"})
    assert response.status_code == 400
    assert "Invalid FEN" in response.json()["detail"]


def test_move_rejects_finished_game():
    response = client.post("/api/move", json={"fen": WHITE_MATED_FEN})
    assert response.status_code == 400
    assert "checkmate" in response.json()["detail"]


def test_evaluate_endpoint():
    response = client.post("/api/evaluate", json={"fen": chess.STARTING_FEN})
    assert response.status_code == 200
    assert response.json() == {"score": -7810, "status": "ongoing"}

    response = client.post("/api/evaluate", json={"fen": WHITE_MATED_FEN})
    assert response.json() == {"score": 20000, "status": "checkmate"}


def test_evaluate_rejects_bad_fen():
    response = client.post("/api/evaluate", json={"fen": "8/8/8/8/8/8/8/8 w - - 0 1"})
    assert response.status_code == 400


def test_move_logs_one_info_line(caplog):
    with caplog.at_level(logging.INFO, logger="web.app"):
        client.post("/api/move", json={"fen": MATE_IN_ONE_FEN, "depth": 1})
        client.post("/api/move", json={"fen": WHITE_MATED_FEN})

    records = [r for r in caplog.records if r.name == "web.app"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert "move=h5f7" in records[0].getMessage()


def test_move_score_is_an_int():
    body = client.post("/api/move", json={"fen": chess.STARTING_FEN, "depth": 0}).json()
    assert isinstance(body["score"], int)
