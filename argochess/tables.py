"""Piece-square tables for the middlegame and the endgame.

Each table has 64 entries laid out from a8 (index 0) to h1 (index 63) and is
written from White's point of view; Black squares are mirrored with
``square ^ 56`` before lookup.
"""

from __future__ import annotations

from argochess.pieces import BISHOP, KING, KNIGHT, PAWN, QUEEN, ROOK


def _parse(text: str) -> tuple[int, ...]:
    """Turn eight whitespace-separated ranks of numbers into a 64-entry table."""
    values = tuple(int(token) for token in text.split())
    if len(values) != 64:
        raise ValueError(f"a piece-square table needs 64 entries, got {len(values)}")
    return values


PAWN_OPENING = _parse(
    """
      0    0    0    0    0    0    0    0
     45   52   42   43   28   34   19    9
    -14   -3    7   14   35   50   15   -6
    -27   -6   -8   13   16    4   -3  -25
    -32  -28   -7    5    7   -1  -15  -30
    -29  -25  -12  -12   -1   -5    6  -17
    -34  -23  -27  -18  -14   10   13  -22
      0    0    0    0    0    0    0    0
    """
)

PAWN_ENDGAME = _parse(
    """
      0    0    0    0    0    0    0    0
     77   74   63   53   59   60   72   77
     17   11   11   11   11   -6   14    8
     -3  -14  -18  -31  -29  -25  -20  -18
    -12  -14  -24  -31  -29  -28  -27  -28
    -22  -20  -25  -20  -21  -24  -34  -34
    -16  -22  -11  -19  -13  -23  -32  -34
      0    0    0    0    0    0    0    0
    """
)

KNIGHT_OPENING = _parse(
    """
    -43  -11   -8   -5    1  -20   -4  -22
    -31  -22   19    7    5   13   -8  -11
    -21   21    8   16   36   33   19    6
     -6    2    0   23    8   27    4   14
     -3   10   12    8   16   10   19    1
    -19   -4    3    7   22   12   15  -11
    -21  -20   -9    8    9   11   -5    0
    -19  -13  -20  -14   -2    3  -11   -8
    """
)

KNIGHT_ENDGAME = _parse(
    """
    -36  -16   -7  -14   -4  -20  -20  -29
    -17    2   -7   14    2   -7   -9  -19
    -13   -7   14   12    4    6    0  -13
     -5    8   24   18   22   15   11   -4
     -3    4   20   30   22   25   15   -2
     -7    1    3   19   10   -2   -4   -4
    -10   -2   -1    0    6   -8   -3  -13
    -12  -28   -8    1   -5  -12  -27  -12
    """
)

BISHOP_OPENING = _parse(
    """
    -13    0  -17   -8   -7   -5   -2   -3
    -21    0  -16  -10    4    1   -6  -41
    -23    6   10    8    8   26    0  -10
    -15   -4    2   22    9   10   -1  -16
      0   10   -2   15   17   -7   -1   13
     -2   16   13    0    5   16   14    0
      8   11   12    3   11   23   27    3
    -26    3   -3   -1   10   -5   -7  -15
    """
)

BISHOP_ENDGAME = _parse(
    """
     -9   -5   -9   -5   -2   -4   -5   -8
      0    2    8   -7    1    0   -2   -8
      8    0    0    1    0    1    5    6
      0    7    7    8    3    5    2    6
     -1    0   12    8    0    6    0   -5
      0    0    3    6    8   -1    0   -1
     -6  -12   -7    0    0   -8   -9  -13
    -11    0   -6    0   -3   -4   -5   -9
    """
)

ROOK_OPENING = _parse(
    """
      3    1    0    7    7   -1    0    0
     -6   -9    7    7    7    5   -4   -1
    -12   11    0   17   -2   12   23   -1
    -17   -9    4    0    3   15   -1   -2
    -24  -16  -16   -4   -1  -14    2  -20
    -30  -15   -6   -3    0    2    2  -15
    -25   -6   -6    5    8    6    8  -46
     -3    1    6   15   17   14  -13   -2
    """
)

ROOK_ENDGAME = _parse(
    """
      8    9   11   13   13   12   13    9
      3    5    1    0   -1    0    6    2
      9    5    7    2    2    1    0    0
      3    3    6    0    0    0    0    4
      5    4    9    0   -3   -2   -6   -2
      0    0   -6   -5   -9  -14   -7  -12
     -2   -5   -1   -7   -9  -11  -13   -1
     -7   -3    0   -8  -13  -12   -4  -24
    """
)

QUEEN_OPENING = _parse(
    """
    -10    0    0    0   10    9    5    7
    -19  -35   -5    2   -9    7    1   15
    -10   -7   -4   -9   15   29   24   22
    -14  -14  -15  -11   -1   -5    3   -6
     -8  -20   -8   -5   -4   -2    2   -2
    -13    5    2    1   -1    8    4    2
    -20    0   10   16   16   16   -6    6
     -3   -1    7   19    5  -10   -9  -17
    """
)

QUEEN_ENDGAME = _parse(
    """
    -12    4    8    4   10    9    3    6
    -17   -7   -1    7    3    6    1    0
     -5   -1   -4   12   14   20   12   14
     -2    2    2    9   13    7   18   22
     -9    3    1   15    5   10   12   10
     -6  -20    0  -15    0   -1   10    7
     -6  -14  -31  -27  -19  -12  -11   -4
    -12  -22  -19  -30   -8  -13   -6  -15
    """
)

KING_OPENING = _parse(
    """
     -3    0    2    0    0    0    1   -1
      1    4    0    7    4    2    3   -2
      2    4    7    4    4   14   12    0
      0    2    6    0    0    2    6   -9
     -8    5    0   -8  -10  -10   -9  -23
     -3    5    1   -8  -12  -12    8  -24
      6   13    0  -40  -23   -1   25   19
    -28   29   17  -53    2  -25   34   15
    """
)

KING_ENDGAME = _parse(
    """
    -15  -11  -11   -6   -2    3    4   -9
     -9   14   11   13   13   28   19    1
     -1   18   19   15   16   35   34    4
    -12   14   21   25   19   25   18   -5
    -23   -6   14   21   20   18    5  -16
    -21   -6    5   13   15    9   -2  -12
    -27  -10    2    9    9    1  -12  -26
    -43  -34  -20   -5  -26   -9  -35  -55
    """
)

_TABLES: dict[int, tuple[tuple[int, ...], tuple[int, ...]]] = {
    PAWN: (PAWN_OPENING, PAWN_ENDGAME),
    KNIGHT: (KNIGHT_OPENING, KNIGHT_ENDGAME),
    BISHOP: (BISHOP_OPENING, BISHOP_ENDGAME),
    ROOK: (ROOK_OPENING, ROOK_ENDGAME),
    QUEEN: (QUEEN_OPENING, QUEEN_ENDGAME),
    KING: (KING_OPENING, KING_ENDGAME),
}


def table_for(piece_type: int, endgame: bool) -> tuple[int, ...]:
    """Return the 64-entry table for a piece type in the given game stage."""
    try:
        opening, end = _TABLES[piece_type]
    except KeyError:
        raise ValueError(f"unknown piece type: {piece_type}") from None
    return end if endgame else opening