"""
Command-line front end for the Scacchi engine.

Modes (see `scacchi --help`):
    default        print the best move for --fen at --depth and exit
    --interactive  engine vs human; the engine moves first, the human types
                   SAN moves on stdin
    --selfplay     engine plays both sides until checkmate or stalemate
    --bench        run the fixed benchmark and exit

Output rule: stdout carries the board and the results, which is what a person
at the terminal reads. Diagnostics go through logging to stderr.
"""

import argparse
import logging
import sys
from typing import Iterable, Sequence

import chess

from scacchi.bench import run_benchmark
from scacchi.constants import DEFAULT_DEPTH, STARTING_FEN
from scacchi.rules import BoardStatus, board_from_fen, parse_user_move, status
from scacchi.search import find_best_move

_log = logging.getLogger(__name__)

PROGRAM_NAME = "Scacchi"
PROGRAM_DESC = "A Chess Engine built in Python"

SEPARATOR = "-" * 20

_GLYPHS: dict[tuple[chess.Color, chess.PieceType], str] = {
    (chess.BLACK, chess.KING):   "♚",
    (chess.BLACK, chess.QUEEN):  "♛",
    (chess.BLACK, chess.ROOK):   "♜",
    (chess.BLACK, chess.BISHOP): "♝",
    (chess.BLACK, chess.KNIGHT): "♞",
    (chess.BLACK, chess.PAWN):   "♟",
    (chess.WHITE, chess.KING):   "♔",
    (chess.WHITE, chess.QUEEN):  "♕",
    (chess.WHITE, chess.ROOK):   "♖",
    (chess.WHITE, chess.BISHOP): "♗",
    (chess.WHITE, chess.KNIGHT): "♘",
    (chess.WHITE, chess.PAWN):   "♙",
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"depth must be an integer, got {value!r}") from None
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {depth}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME.lower(), description=PROGRAM_DESC)
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Run in interactive mode"
    )
    parser.add_argument(
        "-s", "--selfplay", action="store_true", help="Run in self play mode"
    )
    parser.add_argument("-b", "--bench", action="store_true", help="Run benchmark")
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth,
        default=DEFAULT_DEPTH,
        metavar="DEPTH",
        help=f"Set the depth of tree search - default {DEFAULT_DEPTH}",
    )
    parser.add_argument(
        "-f",
        "--fen",
        default=STARTING_FEN,
        metavar="FEN",
        help="The state of the game as a FEN",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log search details to stderr"
    )
    return parser


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def render_board(board: chess.Board) -> str:
    """
    Render board with Unicode glyphs, one line per rank.

    Rank 1 is printed first, so White sits at the top of the diagram. Empty
    squares are shown as '.'.
    """
    lines = []
    for rank, label in enumerate(chess.RANK_NAMES):
        cells = []
        for file in range(8):
            piece = board.piece_at(chess.square(file, rank))
            cells.append(_GLYPHS[(piece.color, piece.piece_type)] if piece else ".")
        lines.append(f"{label} " + "".join(f"{c} " for c in cells))
    lines.append("  a b c d e f g h")
    return "\n".join(lines)


def show_board(board: chess.Board) -> None:
    print(render_board(board))


# ---------------------------------------------------------------------------
# Turns and game loops
# ---------------------------------------------------------------------------


def exec_ai_turn(board: chess.Board, depth: int) -> chess.Board:
    """
    Let the engine play one move and show the result.

    Returns the new position. If the engine has no move the original board is
    returned unchanged.
    """
    move = find_best_move(board, depth)
    if move is None:
        print("Error!! No move found")
    else:
        _log.info("engine plays %s", board.san(move))
        board = board.copy()
        board.push(move)
    print(SEPARATOR)
    show_board(board)
    return board


def exec_user_turn(board: chess.Board, lines: Iterable[str]) -> chess.Board | None:
    """
    Read SAN moves from lines until one is legal, and play it.

    Returns the new position, or None if the input runs out first.
    """
    for line in lines:
        try:
            move = parse_user_move(board, line)
        except ValueError:
            print("Invalid Move")
            print(SEPARATOR)
            show_board(board)
            continue
        board = board.copy()
        board.push(move)
        return board
    return None


def interactive_loop(
    board: chess.Board, depth: int, lines: Iterable[str] | None = None
) -> chess.Board:
    """
    Alternate engine and human turns until the game ends.

    The engine moves first. The loop also ends quietly when the human's input
    is exhausted.
    """
    lines = iter(lines if lines is not None else sys.stdin)
    ai_turn = True
    while True:
        board_status = status(board)
        if board_status is BoardStatus.STALEMATE:
            print("Stalemate...")
            return board
        if board_status is BoardStatus.CHECKMATE:
            print("Checkmate!!")
            return board

        if ai_turn:
            board = exec_ai_turn(board, depth)
        else:
            print("Your turn...")
            next_board = exec_user_turn(board, lines)
            if next_board is None:
                _log.info("input closed, leaving the game")
                return board
            board = next_board
        ai_turn = not ai_turn


def self_play_loop(board: chess.Board, depth: int) -> chess.Board:
    """Let the engine play both sides until checkmate or stalemate."""
    while status(board) is BoardStatus.ONGOING:
        board = exec_ai_turn(board, depth)
    return board


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Scacchi !!")
    print(f"Depth: {args.depth}")

    if args.bench:
        run_benchmark()
        return 0

    try:
        board = board_from_fen(args.fen)
    except ValueError as exc:
        _log.debug("rejected fen %r: %s", args.fen, exc)
        print("Bad FEN")
        return 1

    if args.selfplay:
        self_play_loop(board, args.depth)
        print("Good Game!")
        return 0

    if not args.interactive:
        move = find_best_move(board, args.depth)
        if move is None:
            print("Error!! No move found!")
        else:
            print(f"Best Move: {move.uci()}")
        return 0

    interactive_loop(board, args.depth)
    return 0


if __name__ == "__main__":
    sys.exit(main())
