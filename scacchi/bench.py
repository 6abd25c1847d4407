#!/usr/bin/env python3
"""
Benchmark: time find-best-move searches over fixed positions and depths.

Run before and after touching the search or the evaluator to see what it did
to speed and tree size. For each position the clock starts once and each
depth is searched in turn, so the reported duration is cumulative across the
depths of that position. The leaf count is the number of positions the
evaluator scored at that depth alone.

Usage: python3 -m scacchi.bench   (or: scacchi --bench)
"""

import logging
import sys
import time
from typing import Iterable, TextIO

from scacchi.rules import board_from_fen
from scacchi.search import analyse

_log = logging.getLogger(__name__)

# Fixed forever, so numbers stay comparable between versions.
CASES: tuple[tuple[str, str], ...] = (
    ("start",        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"),
    ("mid-open",     "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"),
    ("complex-mid",  "r2q1rk1/ppp2ppp/2np1n2/2b1p1B1/2B1P1b1/2NP1N2/PPP2PPP/R2Q1RK1 w - - 0 8"),
    ("pawn-ending",  "6k1/ppp2ppp/8/3p4/3P4/8/PPP2PPP/6K1 w - - 0 1"),
    ("rook-pawns",   "8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 1"),
    ("pawn-race",    "8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 1"),
)

DEPTHS: tuple[int, ...] = (1, 2, 3)


def run_benchmark(
    cases: Iterable[tuple[str, str]] = CASES,
    depths: Iterable[int] = DEPTHS,
    out: TextIO | None = None,
) -> list[dict]:
    """
    Search every case at every depth and print one tab-separated row each.

    Args:
        cases:  (name, fen) pairs. A case whose FEN does not parse is logged
                and skipped.
        depths: Search depths, run in order for each case.
        out:    Stream for the table. Defaults to stdout.

    Returns:
        The printed rows as dicts with keys name, depth, duration_ms, leaves,
        move.
    """
    out = out or sys.stdout
    depths = tuple(depths)
    rows = []

    print("name\tdepth\tduration\tleaves", file=out)
    for name, fen in cases:
        try:
            board = board_from_fen(fen)
        except ValueError as exc:
            _log.warning("bench: skipping %s: %s", name, exc)
            continue

        start = time.monotonic()
        for depth in depths:
            result = analyse(board, depth)
            duration_ms = int((time.monotonic() - start) * 1000)
            print(f"{name}\t{depth}\t{duration_ms}\t{result.leaves}", file=out)
            rows.append(
                {
                    "name": name,
                    "depth": depth,
                    "duration_ms": duration_ms,
                    "leaves": result.leaves,
                    "move": result.move,
                }
            )

    return rows


def main() -> None:
    """Run the fixed benchmark and print the table to stdout."""
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    run_benchmark()


if __name__ == "__main__":
    main()
