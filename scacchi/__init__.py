"""
Scacchi chess engine package.

A deliberately small engine: fixed-depth minimax with alpha-beta pruning over
a material plus piece-square evaluation. python-chess provides the rules.

Modules:
    constants — Piece values, piece-square tables, scores and defaults
    rules     — Adapter over python-chess (status, move application, parsing)
    evaluate  — Static position evaluation
    search    — Alpha-beta recursion and the root move selection
    bench     — Fixed-position timing harness
"""

from scacchi.evaluate import evaluate
from scacchi.search import SearchResult, analyse, find_best_move

__all__ = ["SearchResult", "analyse", "evaluate", "find_best_move"]
