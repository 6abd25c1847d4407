"""
Engine constants: piece values, piece-square tables, and search defaults.

Every number the evaluator and the front ends rely on is defined here so that
tuning never means hunting for magic numbers across modules.

Piece values follow the centipawn convention (1 pawn = 100 cp). The king
carries no material value: it is never captured, so only its square bonus
contributes to the evaluation.

Piece-square tables are indexed by python-chess square numbers (a1 = 0,
b1 = 1, ... h8 = 63) from White's point of view, so each table below is
written with rank 1 on the first line. Black pieces are looked up through the
mirrored index 63 - square.
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (centipawns)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 100
KNIGHT_VALUE: int = 320
BISHOP_VALUE: int = 330
ROOK_VALUE: int = 500
QUEEN_VALUE: int = 900
KING_VALUE: int = 0

PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Piece-square tables (rank 1 first, a1 = index 0)
# ---------------------------------------------------------------------------
# Pawns are pushed towards the centre and the promotion rank, and kept in
# front of a castled king.

PAWN_SQUARES: tuple[int, ...] = (
      0,   0,   0,   0,   0,   0,   0,   0,
      5,  10,  10, -20, -20,  10,  10,   5,
      5,  -5, -10,   0,   0, -10,  -5,   5,
      0,   0,   0,  20,  20,   0,   0,   0,
      5,   5,  10,  25,  25,  10,   5,   5,
     10,  10,  20,  30,  30,  20,  10,  10,
     50,  50,  50,  50,  50,  50,  50,  50,
      0,   0,   0,   0,   0,   0,   0,   0,
)

# Knights on the rim are dim.
KNIGHT_SQUARES: tuple[int, ...] = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20,   0,   5,   5,   0, -20, -40,
    -30,   5,  10,  15,  15,  10,   5, -30,
    -30,   0,  15,  20,  20,  15,   0, -30,
    -30,   5,  15,  20,  20,  15,   5, -30,
    -30,   0,  10,  15,  15,  10,   0, -30,
    -40, -20,   0,   0,   0,   0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)

BISHOP_SQUARES: tuple[int, ...] = (
    -20, -10, -10, -10, -10, -10, -10, -20,
    -10,   5,   0,   0,   0,   0,   5, -10,
    -10,  10,  10,  10,  10,  10,  10, -10,
    -10,   0,  10,  10,  10,  10,   0, -10,
    -10,   5,   5,  10,  10,   5,   5, -10,
    -10,   0,   5,  10,  10,   5,   0, -10,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -20, -10, -10, -10, -10, -10, -10, -20,
)

# Rooks like the seventh rank and the central files of the first rank.
ROOK_SQUARES: tuple[int, ...] = (
      0,   0,   0,   5,   5,   0,   0,   0,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
      5,  10,  10,  10,  10,  10,  10,   5,
      0,   0,   0,   0,   0,   0,   0,   0,
)

QUEEN_SQUARES: tuple[int, ...] = (
    -20, -10, -10,  -5,  -5, -10, -10, -20,
    -10,   0,   5,   0,   0,   0,   0, -10,
    -10,   5,   5,   5,   5,   5,   0, -10,
      0,   0,   5,   5,   5,   5,   0,  -5,
     -5,   0,   5,   5,   5,   5,   0,  -5,
    -10,   0,   5,   5,   5,   5,   0, -10,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -20, -10, -10,  -5,  -5, -10, -10, -20,
)

# Middlegame king: stay behind the pawn shield, ideally castled.
KING_SQUARES: tuple[int, ...] = (
     20,  30,  10,   0,   0,  10,  30,  20,
     20,  20,   0,   0,   0,   0,  20,  20,
    -10, -20, -20, -20, -20, -20, -20, -10,
    -20, -30, -30, -40, -40, -30, -30, -20,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
)

PIECE_SQUARES: dict[int, tuple[int, ...]] = {
    chess.PAWN:   PAWN_SQUARES,
    chess.KNIGHT: KNIGHT_SQUARES,
    chess.BISHOP: BISHOP_SQUARES,
    chess.ROOK:   ROOK_SQUARES,
    chess.QUEEN:  QUEEN_SQUARES,
    chess.KING:   KING_SQUARES,
}

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------
# Scores are oriented so that larger is better for Black. A checkmate is
# reported from the point of view of the mated side: +CHECKMATE_SCORE when
# White is mated, -CHECKMATE_SCORE when Black is mated.

CHECKMATE_SCORE: int = 20_000
STALEMATE_SCORE: int = 0

# ---------------------------------------------------------------------------
# Search defaults
# ---------------------------------------------------------------------------

DEFAULT_DEPTH: int = 4
STARTING_FEN: str = chess.STARTING_FEN
