"""
Search entry point: minimax with alpha-beta pruning over a fixed depth.

This module defines the public interface the command line, the benchmark and
the web app depend on: find_best_move() and analyse(). Both run to completion
at the requested depth; there is no clock and no cancellation.

Scores follow the evaluator's convention (larger is better for Black), so
the recursion alternates explicitly between a maximizing and a minimizing
branch instead of negating scores the negamax way.

Root driver behaviour worth knowing about:

1. Each root move is searched with the root's own maximizing flag
   (True when Black is to move) and with the full requested depth, i.e. the
   flag is not flipped for the child's side to move and the root ply does
   not consume depth.

2. Every root move gets a fresh (-inf, +inf) window. Pruning happens only
   inside each root move's subtree, never across root siblings.

Both are long-standing behaviours of this engine; tests/test_search.py pins
them.
"""

import logging
import operator
from dataclasses import dataclass

import chess

from scacchi.evaluate import evaluate
from scacchi.rules import (
    BoardStatus,
    apply_move,
    legal_moves,
    side_to_move,
    status,
)

_log = logging.getLogger(__name__)

INFINITY = float("inf")


@dataclass
class SearchStats:
    """
    Per-invocation accumulator threaded through the recursion.

    One instance lives for exactly one call to analyse(). It is written at
    every leaf and never read by the search itself, so it has no influence on
    which branches get pruned.

    Attributes:
        leaves: Number of positions scored by the evaluator so far.
    """

    leaves: int = 0


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move:   Selected move, or None if the root position has no legal moves.
        score:  Search value of the selected move, or None with no move.
        depth:  Depth the root moves were searched with.
        leaves: Positions scored by the evaluator during the search.
    """

    move: chess.Move | None
    score: int | None
    depth: int
    leaves: int


def alpha_beta(
    board: chess.Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    stats: SearchStats,
) -> float:
    """
    Minimax value of board with alpha-beta pruning (fail-hard).

    Args:
        board:      Position to search. Not modified; every child is a fresh
                    board built by apply_move().
        depth:      Remaining depth in plies. The node is a leaf at 0.
        maximizing: True to pick the largest child value (good for Black),
                    False to pick the smallest (good for White). Flipped on
                    every recursive call.
        alpha:      Value the maximizer can already guarantee elsewhere.
        beta:       Value the minimizer can already guarantee elsewhere.
        stats:      Leaf accumulator for this search invocation.

    Returns:
        The evaluator's score at a leaf, otherwise the best child value found
        before a cutoff. Leaves are nodes at depth 0 and positions where the
        game is over, whatever the remaining depth.

    The value is identical to what a plain minimax over the same tree would
    return; pruning only skips moves that cannot change it.
    """
    if depth == 0 or status(board) is not BoardStatus.ONGOING:
        stats.leaves += 1
        return evaluate(board)

    if maximizing:
        best = -INFINITY
        for move in legal_moves(board):
            value = alpha_beta(apply_move(board, move), depth - 1, False, alpha, beta, stats)
            best = max(best, value)
            alpha = max(alpha, best)
            if beta <= alpha:
                break
        return best

    best = INFINITY
    for move in legal_moves(board):
        value = alpha_beta(apply_move(board, move), depth - 1, True, alpha, beta, stats)
        best = min(best, value)
        beta = min(beta, best)
        if beta <= alpha:
            break
    return best


def analyse(board: chess.Board, depth: int) -> SearchResult:
    """
    Search every root move and report the best one with its statistics.

    Black to move selects the strictly largest value, White to move the
    strictly smallest; on ties the move generated first wins.

    Args:
        board: Root position. Not modified.
        depth: Depth each root move's subtree is searched with. 0 scores the
               positions right after each root move.

    Returns:
        SearchResult. move is None when the root has no legal moves
        (checkmate or stalemate); that is the normal end of a game, not an
        error.

    Raises:
        ValueError: depth is negative.
    """
    if depth < 0:
        raise ValueError(f"search depth must be >= 0, got {depth}")

    black_to_move = side_to_move(board) == chess.BLACK
    stats = SearchStats()

    # Strict comparison: on ties the earlier root move is kept.
    is_better = operator.gt if black_to_move else operator.lt
    best_value = -INFINITY if black_to_move else INFINITY

    best_move = None
    for move in legal_moves(board):
        value = alpha_beta(
            apply_move(board, move),
            depth,
            black_to_move,
            -INFINITY,
            INFINITY,
            stats,
        )
        if is_better(value, best_value):
            best_value = value
            best_move = move

    # best_value only stays infinite when there was no move to try.
    score = best_value if best_move is not None else None
    _log.debug(
        "search depth=%d move=%s score=%s leaves=%d",
        depth,
        best_move.uci() if best_move is not None else "(none)",
        score,
        stats.leaves,
    )
    return SearchResult(move=best_move, score=score, depth=depth, leaves=stats.leaves)


def find_best_move(board: chess.Board, depth: int) -> chess.Move | None:
    """
    Return the engine's move for board, or None if the game is over.

    This is the sole entry point the front ends need; analyse() exposes the
    score and leaf count as well.
    """
    return analyse(board, depth).move
