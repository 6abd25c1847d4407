"""
Static evaluation: material plus piece-square bonuses.

The search needs a number for every leaf it cannot look past. This module
provides it as a pure function of the position.

Sign convention: larger scores are better for Black, smaller (more negative)
scores are better for White. The root driver in search.py maximizes when
Black is to move and minimizes when White is to move.

Note that every piece, whatever its colour, contributes
-(material + square bonus). The score therefore tracks how much material is
left on the board rather than who owns it; the engine's playing style follows
from that and the tests pin it.
"""

import chess

from scacchi.constants import (
    CHECKMATE_SCORE,
    PIECE_SQUARES,
    PIECE_VALUES,
    STALEMATE_SCORE,
)
from scacchi.rules import BoardStatus, side_to_move, status


def piece_score(piece: chess.Piece, square: chess.Square) -> int:
    """
    Contribution of a single piece standing on square.

    White pieces read the piece-square table at the square itself; Black
    pieces read it at the mirrored square 63 - square, so that a Black pawn
    on e7 scores like a White pawn on d2.
    """
    idx = square if piece.color == chess.WHITE else 63 - square
    return -(PIECE_VALUES[piece.piece_type] + PIECE_SQUARES[piece.piece_type][idx])


def evaluate(board: chess.Board) -> int:
    """
    Score a position without searching.

    Args:
        board: The position to score. Not modified.

    Returns:
        +CHECKMATE_SCORE if White is checkmated, -CHECKMATE_SCORE if Black is
        checkmated, STALEMATE_SCORE for a stalemate, and otherwise the sum of
        piece_score() over every piece on the board.

    Example:
        >>> import chess
        >>> evaluate(chess.Board())
        -7810
    """
    board_status = status(board)

    if board_status is BoardStatus.CHECKMATE:
        # The side to move is the side that has been mated.
        if side_to_move(board) == chess.WHITE:
            return CHECKMATE_SCORE
        return -CHECKMATE_SCORE

    if board_status is BoardStatus.STALEMATE:
        return STALEMATE_SCORE

    return sum(piece_score(piece, sq) for sq, piece in board.piece_map().items())
