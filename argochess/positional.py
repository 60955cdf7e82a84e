"""Piece-square evaluation blended between middlegame and endgame."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Union

from argochess.pieces import (
    BISHOP,
    EMPTY,
    KING,
    KNIGHT,
    PAWN,
    QUEEN,
    ROOK,
    Color,
    piece_color,
)
from argochess import tables

OPENING = 0
ENDGAME = 1

TOTAL_PHASE = 24
_PHASE_WEIGHTS = {KNIGHT: 1, BISHOP: 1, ROOK: 2, QUEEN: 4}

# Knights are scored with the king's opening table in the middlegame.
_POSITIONAL_TABLES = {
    PAWN: (tables.PAWN_OPENING, tables.PAWN_ENDGAME),
    KNIGHT: (tables.KING_OPENING, tables.KNIGHT_ENDGAME),
    BISHOP: (tables.BISHOP_OPENING, tables.BISHOP_ENDGAME),
    ROOK: (tables.ROOK_OPENING, tables.ROOK_ENDGAME),
    QUEEN: (tables.QUEEN_OPENING, tables.QUEEN_ENDGAME),
    KING: (tables.KING_OPENING, tables.KING_ENDGAME),
}

Pieces = Union[Mapping[int, int], Sequence[int]]


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _occupied(pieces: Pieces) -> Iterator[tuple[int, int]]:
    items = pieces.items() if isinstance(pieces, Mapping) else enumerate(pieces)
    for square, piece in items:
        if piece != EMPTY:
            yield square, piece


def game_phase(pieces: Pieces) -> int:
    """Return the phase on a 0..256 scale from the remaining material.

    ``pieces`` maps square to piece, or is a 64-item sequence with EMPTY
    on vacant squares.
    """
    phase = TOTAL_PHASE
    for _, piece in _occupied(pieces):
        phase -= _PHASE_WEIGHTS.get(piece % 6, 0)
    return _div(phase * 256 + TOTAL_PHASE // 2, TOTAL_PHASE)


def interpolate_score(mg_score: int, eg_score: int, phase: int) -> int:
    """Blend middlegame and endgame scores; phase 256 is pure middlegame."""
    return _div(mg_score * phase + eg_score * (256 - phase), 256)


def positional_score(pieces: Pieces, side: Color) -> int:
    """Return the piece-square score relative to the side to move."""
    mg_score = 0
    eg_score = 0
    phase = game_phase(pieces)

    for square, piece in _occupied(pieces):
        black = piece_color(piece) is Color.BLACK
        eval_square = square ^ 56 if black else square
        opening, endgame = _POSITIONAL_TABLES[piece % 6]
        mg = opening[eval_square]
        eg = endgame[eval_square]
        if black:
            mg, eg = -mg, -eg
        mg_score += mg
        eg_score += eg

    final = interpolate_score(mg_score, eg_score, phase)
    return -final if side == Color.BLACK else final