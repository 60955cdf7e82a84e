"""Chess moves packed into a single integer.

Bit layout::

    0x3f      source square
    0xfc0     target square
    0xf000    moved piece
    0xf0000   promoted piece
    0x100000  capture flag
    0x200000  double push flag
    0x400000  en passant flag
    0x800000  castling flag
"""

from __future__ import annotations

from argochess.pieces import (
    ASCII_PIECES,
    BB,
    BN,
    BQ,
    BR,
    WB,
    WN,
    WQ,
    WR,
    opposite_color_piece,
    square_name,
)

SOURCE_MASK = 0x3F
TARGET_MASK = 0xFC0
PIECE_MASK = 0xF000
PROMOTED_MASK = 0xF0000
CAPTURE_MASK = 0x100000
DOUBLE_PUSH_MASK = 0x200000
ENPASSANT_MASK = 0x400000
CASTLING_MASK = 0x800000

SOURCE_SHIFT = 0
TARGET_SHIFT = 6
PIECE_SHIFT = 12
PROMOTED_SHIFT = 16
CAPTURE_SHIFT = 20
DOUBLE_PUSH_SHIFT = 21
ENPASSANT_SHIFT = 22
CASTLING_SHIFT = 23

_PROMOTION_LETTERS = {
    WQ: "q", BQ: "q",
    WR: "r", BR: "r",
    WB: "b", BB: "b",
    WN: "n", BN: "n",
}


class Move(int):
    """An encoded move; behaves as a plain integer."""

    def source(self) -> int:
        return (self & SOURCE_MASK) >> SOURCE_SHIFT

    def target(self) -> int:
        return (self & TARGET_MASK) >> TARGET_SHIFT

    def piece(self) -> int:
        return (self & PIECE_MASK) >> PIECE_SHIFT

    def promoted(self) -> int:
        return (self & PROMOTED_MASK) >> PROMOTED_SHIFT

    def capture(self) -> int:
        return (self & CAPTURE_MASK) >> CAPTURE_SHIFT

    def double_push(self) -> int:
        return (self & DOUBLE_PUSH_MASK) >> DOUBLE_PUSH_SHIFT

    def enpassant(self) -> int:
        return (self & ENPASSANT_MASK) >> ENPASSANT_SHIFT

    def castling(self) -> int:
        return (self & CASTLING_MASK) >> CASTLING_SHIFT

    def mirror(self) -> "Move":
        """Return the move flipped vertically with piece colours swapped."""
        return encode_move(
            self.source() ^ 56,
            self.target() ^ 56,
            opposite_color_piece(self.piece()),
            opposite_color_piece(self.promoted()),
            self.capture(),
            self.double_push(),
            self.enpassant(),
            self.castling(),
        )

    def describe(self) -> str:
        """Return a detailed one-line description of the move and its flags."""
        promoted = self.promoted()
        promotion = f"{ASCII_PIECES[promoted].lower()} " if promoted else "  "
        return (
            f"{square_name(self.source())}{square_name(self.target())}"
            f"{promotion}"
            f"   {ASCII_PIECES[self.piece()]} "
            f"       {self.capture()} "
            f"        {self.double_push()} "
            f"        {self.enpassant()} "
            f"         {self.castling()}"
        )

    def __str__(self) -> str:
        if self == 0:
            return "0000"
        promotion = _PROMOTION_LETTERS.get(self.promoted(), "") if self.promoted() else ""
        return f"{square_name(self.source())}{square_name(self.target())}{promotion}"

    def __repr__(self) -> str:
        return f"Move({str(self)})"


NO_MOVE = Move(0)


def encode_move(
    source: int,
    target: int,
    piece: int,
    promoted: int,
    capture: int,
    double_push: int,
    enpassant: int,
    castling: int,
) -> Move:
    """Pack move components into a Move."""
    return Move(
        source
        | (target << TARGET_SHIFT)
        | (piece << PIECE_SHIFT)
        | (promoted << PROMOTED_SHIFT)
        | (capture << CAPTURE_SHIFT)
        | (double_push << DOUBLE_PUSH_SHIFT)
        | (enpassant << ENPASSANT_SHIFT)
        | (castling << CASTLING_SHIFT)
    )