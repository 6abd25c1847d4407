"""
Thin adapter over python-chess, the rules engine behind the search.

The search core only needs a handful of capabilities from the rules engine:
legal move enumeration, non-mutating move application, the game status and
the side to move. Keeping them here means evaluate.py and search.py never
touch the python-chess mutation API (push/pop) directly.

Game status is derived purely from legal-move existence and check, not from
board.is_game_over(): insufficient material, the 75-move rule and repetition
are draws for a referee, but they do not stop the search.
"""

from enum import Enum

import chess


class BoardStatus(Enum):
    """Outcome of a position as far as the search is concerned."""

    ONGOING = "ongoing"
    STALEMATE = "stalemate"
    CHECKMATE = "checkmate"


def status(board: chess.Board) -> BoardStatus:
    """
    Classify a position as ongoing, stalemate or checkmate.

    A position with at least one legal move is always ONGOING. Without legal
    moves it is CHECKMATE when the side to move is in check and STALEMATE
    otherwise.
    """
    if any(board.generate_legal_moves()):
        return BoardStatus.ONGOING
    if board.is_check():
        return BoardStatus.CHECKMATE
    return BoardStatus.STALEMATE


def side_to_move(board: chess.Board) -> chess.Color:
    return board.turn


def legal_moves(board: chess.Board) -> list[chess.Move]:
    """Legal moves in python-chess generation order (deterministic)."""
    return list(board.legal_moves)


def apply_move(board: chess.Board, move: chess.Move) -> chess.Board:
    """
    Return the position reached by playing move on board.

    The input board is left untouched. The move stack is not copied: the
    search never looks back at history, and a short stack keeps the copy
    cheap.
    """
    child = board.copy(stack=False)
    child.push(move)
    return child


def board_from_fen(fen: str) -> chess.Board:
    """
    Build a board from a FEN string.

    Raises:
        ValueError: The FEN is malformed, or it describes a position that
            cannot arise in a legal game (missing kings, side not to move in
            check, pawns on the back rank, ...).
    """
    board = chess.Board(fen)
    if not board.is_valid():
        raise ValueError(f"illegal position in fen: {fen!r} ({board.status()!r})")
    return board


def parse_user_move(board: chess.Board, text: str) -> chess.Move:
    """
    Parse a move typed by a human in standard algebraic notation.

    Raises:
        ValueError: The text is not a legal, unambiguous SAN move in this
            position. python-chess raises IllegalMoveError, InvalidMoveError
            or AmbiguousMoveError, all of which are ValueError subclasses.
    """
    return board.parse_san(text.strip())
