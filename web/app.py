"""
FastAPI web application for the Scacchi engine.

Exposes two REST endpoints:
    POST /api/move      FEN + depth in, engine move and resulting FEN out
    POST /api/evaluate  FEN in, static evaluation out

Each request carries everything needed: the server keeps no game between
calls, so a client replays a game by posting the FEN after every move.
Searches run to completion inside the request, which is why the depth field
is clamped to MAX_DEPTH instead of trusting the client; the handlers are
plain functions and FastAPI runs them on its worker threads.

Run with: uvicorn web.app:app
"""

import logging

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from scacchi.evaluate import evaluate
from scacchi.rules import BoardStatus, apply_move, board_from_fen, status
from scacchi.search import analyse

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

MAX_DEPTH = 5

app = FastAPI(title="Scacchi", version="1.0.0")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """Position to move from and how deep to look (clamped to 0..MAX_DEPTH)."""

    fen: str
    depth: int = 3

    @field_validator("depth")
    @classmethod
    def clamp_depth(cls, v: int) -> int:
        return max(0, min(v, MAX_DEPTH))


class MoveResponse(BaseModel):
    """
    The chosen move together with the search figures behind it.

    score uses the evaluator orientation (positive favours Black), so a
    client showing it to a human may want to flip the sign for White.
    fen is the position after the move, ready to post back for the reply.
    """

    move: str
    fen: str
    score: int
    depth: int
    leaves: int


class EvaluateRequest(BaseModel):
    fen: str


class EvaluateResponse(BaseModel):
    score: int
    status: str


def _parse_fen(fen: str) -> chess.Board:
    try:
        return board_from_fen(fen)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {exc}") from exc


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Search the posted position and play the selected move on a copy of it.

    Unparseable or illegal positions and games that are already decided are
    the client's fault (400). A live position always has a move, so a
    missing one is reported as a server error.
    """
    board = _parse_fen(request.fen)

    board_status = status(board)
    if board_status is not BoardStatus.ONGOING:
        raise HTTPException(
            status_code=400,
            detail=f"Game is already over: {board_status.value}",
        )

    result = analyse(board, request.depth)
    if result.move is None:
        raise HTTPException(status_code=500, detail="no move found for a live position")

    _log.info(
        "served move=%s score=%s depth=%d leaves=%d fen=%s",
        result.move.uci(),
        result.score,
        result.depth,
        result.leaves,
        request.fen[:40],
    )

    return MoveResponse(
        move=result.move.uci(),
        fen=apply_move(board, result.move).fen(),
        score=result.score,
        depth=result.depth,
        leaves=result.leaves,
    )


@app.post("/api/evaluate", response_model=EvaluateResponse)
def api_evaluate(request: EvaluateRequest) -> EvaluateResponse:
    """Static evaluation of a position, without searching."""
    board = _parse_fen(request.fen)
    return EvaluateResponse(score=evaluate(board), status=status(board).value)
