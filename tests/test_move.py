import pytest

from argochess.move import NO_MOVE, Move, encode_move
from argochess.pieces import BP, WN, WP, WQ, parse_square


def _components(move):
    return (
        move.source(),
        move.target(),
        move.piece(),
        move.promoted(),
        move.capture(),
        move.double_push(),
        move.enpassant(),
        move.castling(),
    )


@pytest.mark.parametrize(
    "fields",
    [
        (12, 20, 1, 0, 0, 1, 0, 0),
        (51, 58, 1, 5, 1, 0, 0, 0),
        (35, 42, 1, 0, 1, 0, 1, 0),
        (4, 6, 6, 0, 0, 0, 0, 1),
    ],
    ids=["simple pawn move", "capture promotion", "en passant", "kingside castling"],
)
def test_move_encoding(fields):
    move = encode_move(*fields)
    assert _components(move) == fields


def test_bit_masks_all_set():
    move = Move(0xFFFFFF)
    assert _components(move) == (0x3F, 0x3F, 0xF, 0xF, 1, 1, 1, 1)


@pytest.mark.parametrize(
    "source, target, piece, promoted, double_push, expected",
    [
        ("e2", "e4", 1, 0, 1, "e2e4"),
        ("g1", "f3", 2, 0, 0, "g1f3"),
        ("e7", "e8", 1, 5, 0, "e7e8"),
    ],
)
def test_move_string(source, target, piece, promoted, double_push, expected):
    move = encode_move(
        parse_square(source), parse_square(target), piece, promoted, 0, double_push, 0, 0
    )
    assert str(move) == expected


def test_queen_promotion_string():
    move = encode_move(parse_square("e7"), parse_square("e8"), WP, WQ, 0, 0, 0, 0)
    assert str(move) == "e7e8q"


def test_no_move():
    assert NO_MOVE == Move(0)
    assert _components(NO_MOVE) == (0, 0, 0, 0, 0, 0, 0, 0)
    assert str(NO_MOVE) == "0000"


def test_mirror_round_trip():
    move = encode_move(parse_square("g1"), parse_square("f3"), WN, 0 + WQ, 1, 0, 1, 0)
    mirrored = move.mirror()
    assert mirrored.source() == parse_square("g8")
    assert mirrored.target() == parse_square("f6")
    assert mirrored.mirror() == move


def test_mirror_swaps_piece_colour():
    move = encode_move(parse_square("e2"), parse_square("e4"), WP, 0, 0, 1, 0, 0)
    mirrored = move.mirror()
    assert mirrored.piece() == BP
    assert str(mirrored) == "e7e5"
    assert mirrored.double_push() == 1


def test_describe():
    move = encode_move(parse_square("e2"), parse_square("e4"), WP, 0, 0, 1, 0, 0)
    assert move.describe().split() == ["e2e4", "P", "0", "1", "0", "0"]