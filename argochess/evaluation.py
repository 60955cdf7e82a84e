"""Static evaluation: material, non-pawn material and game phase."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Union

from argochess.pieces import (
    BB,
    BK,
    BN,
    BP,
    BQ,
    BR,
    EMPTY,
    KING,
    PAWN,
    WB,
    WK,
    WN,
    WP,
    WQ,
    WR,
    Color,
    piece_color,
)

_log = logging.getLogger(__name__)

# Piece base values in centipawns.
PAWN_VALUE = 100
KNIGHT_VALUE = 320
BISHOP_VALUE = 330
ROOK_VALUE = 500
QUEEN_VALUE = 900
KING_VALUE = 20_000

# Special position scores.
DRAW_SCORE = 0
MATE_SCORE = 1_000_000
INFINITE_SCORE = 9_999_999

# Phase weights for game stage detection.
PAWN_PHASE = 0
KNIGHT_PHASE = 1
BISHOP_PHASE = 1
ROOK_PHASE = 2
QUEEN_PHASE = 4
TOTAL_PHASE = 16

# Evaluation weights.
DEFAULT_MATERIAL_WEIGHT = 1.0
DEFAULT_MOBILITY_WEIGHT = 0.1
DEFAULT_PAWN_STRUCTURE_WEIGHT = 0.3
DEFAULT_POSITIONAL_WEIGHT = 0.5

# Common penalties and bonuses.
BISHOP_PAIR_BONUS = 50
ROOK_OPEN_FILE_BONUS = 25
ROOK_SEMI_OPEN_BONUS = 10
DOUBLE_PAWN_PENALTY = -10
ISOLATED_PAWN_PENALTY = -20
PASSED_PAWN_BONUS = 20

# (middlegame, endgame) bonuses used for the phase calculation.
PAWN_BONUS = (124, 206)
KNIGHT_BONUS = (781, 854)
BISHOP_BONUS = (825, 915)
ROOK_BONUS = (1276, 1380)
QUEEN_BONUS = (2538, 2682)

MIDGAME_LIMIT = 15258
ENDGAME_LIMIT = 3915
ENDGAME_MATERIAL_THRESHOLD = 1300

_PIECE_VALUES = {
    WP: PAWN_VALUE, BP: PAWN_VALUE,
    WN: KNIGHT_VALUE, BN: KNIGHT_VALUE,
    WB: BISHOP_VALUE, BB: BISHOP_VALUE,
    WR: ROOK_VALUE, BR: ROOK_VALUE,
    WQ: QUEEN_VALUE, BQ: QUEEN_VALUE,
    WK: KING_VALUE, BK: KING_VALUE,
}

_NON_PAWN_BONUS = {
    WN: KNIGHT_BONUS[1], BN: KNIGHT_BONUS[1],
    WB: BISHOP_BONUS[1], BB: BISHOP_BONUS[1],
    WR: ROOK_BONUS[1], BR: ROOK_BONUS[1],
    WQ: QUEEN_BONUS[1], BQ: QUEEN_BONUS[1],
}

Pieces = Union[Mapping[int, int], Sequence[int]]


def _occupied(pieces: Pieces) -> Iterator[int]:
    values = pieces.values() if isinstance(pieces, Mapping) else pieces
    return (piece for piece in values if piece != EMPTY)


def piece_value(piece: int) -> int:
    """Return the base value of a piece, 0 for EMPTY or an unknown index."""
    return _PIECE_VALUES.get(piece, 0)


def material_score(pieces: Pieces) -> int:
    """Return White's material minus Black's, kings excluded."""
    score = 0
    for piece in _occupied(pieces):
        if piece in (WK, BK):
            continue
        value = piece_value(piece)
        score += value if piece_color(piece) is Color.WHITE else -value
    return score


def non_pawn_material(pieces: Pieces, color: Color) -> int:
    """Return the endgame-weighted material of knights, bishops, rooks and queens."""
    return sum(
        _NON_PAWN_BONUS[piece]
        for piece in _occupied(pieces)
        if piece in _NON_PAWN_BONUS and piece_color(piece) is color
    )


def phase(pieces: Pieces) -> int:
    """Return the game phase on a 0 (endgame) to 128 (middlegame) scale."""
    npm = non_pawn_material(pieces, Color.WHITE) + non_pawn_material(pieces, Color.BLACK)
    npm = max(ENDGAME_LIMIT, min(npm, MIDGAME_LIMIT))
    return ((npm - ENDGAME_LIMIT) * 128) // (MIDGAME_LIMIT - ENDGAME_LIMIT)


class Evaluator:
    """Static position evaluator."""

    def evaluate(self, pieces: Pieces, side: Color) -> int:
        """Return the score of a position relative to the side to move.

        Only the game phase is computed; the score itself is neutral.
        """
        current = phase(pieces)
        _log.debug("phase %d for side %s", current, Color(side).name)
        return DRAW_SCORE

    def is_endgame(self, pieces: Pieces) -> bool:
        """Return True when non-pawn, non-king material is at most 1300."""
        material = sum(
            piece_value(piece)
            for piece in _occupied(pieces)
            if piece % 6 not in (KING, PAWN)
        )
        return material <= ENDGAME_MATERIAL_THRESHOLD