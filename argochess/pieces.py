"""Piece indices, colours and square naming.

Pieces are numbered 0..11 in the order ``PNBRQKpnbrqk``; white pieces come
first.  Squares are numbered from a8 (0) to h1 (63), rank by rank, so that
``square ^ 56`` flips a square vertically.
"""

from __future__ import annotations

from enum import IntEnum

ASCII_PIECES = "PNBRQKpnbrqk"
FEN_PIECES = "PpNnBbRrQqKk     "

WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK = range(12)
EMPTY = 12

PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(6)

FILES = "abcdefgh"
RANKS = "12345678"
NO_SQUARE = -1


class Color(IntEnum):
    """Side colour."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


def fen_to_piece(c: str) -> int:
    """Return the piece index for a piece letter, or EMPTY if unknown."""
    if len(c) != 1:
        return EMPTY
    index = ASCII_PIECES.find(c)
    return EMPTY if index < 0 else index


def piece_color(piece: int) -> Color:
    """Return the colour of a piece index."""
    return Color.WHITE if piece < 6 else Color.BLACK


def opposite_color_piece(piece: int) -> int:
    """Return the same piece type of the other colour, or EMPTY if invalid."""
    if piece == EMPTY:
        return EMPTY
    if WP <= piece <= WK:
        return piece + 6
    if BP <= piece <= BK:
        return piece - 6
    return EMPTY


def square_name(square: int) -> str:
    """Return the coordinate name of a square, ``"-"`` for no square."""
    if square == NO_SQUARE:
        return "-"
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")
    rank_from_top, file = divmod(square, 8)
    return FILES[file] + RANKS[7 - rank_from_top]


def parse_square(name: str) -> int:
    """Return the square index for a coordinate such as ``"e4"``."""
    if name == "-":
        return NO_SQUARE
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"invalid square: {name!r}")
    file = FILES.index(name[0])
    rank = RANKS.index(name[1])
    return (7 - rank) * 8 + file