import pytest

from argochess.pieces import (
    ASCII_PIECES,
    BK,
    BP,
    EMPTY,
    NO_SQUARE,
    WK,
    WP,
    WQ,
    Color,
    fen_to_piece,
    opposite_color_piece,
    parse_square,
    piece_color,
    square_name,
)


def test_fen_to_piece_round_trip():
    for index, letter in enumerate(ASCII_PIECES):
        assert fen_to_piece(letter) == index


def test_fen_to_piece_unknown():
    assert fen_to_piece("x") == EMPTY
    assert fen_to_piece("") == EMPTY


def test_piece_color():
    assert piece_color(WP) is Color.WHITE
    assert piece_color(WK) is Color.WHITE
    assert piece_color(BP) is Color.BLACK
    assert piece_color(BK) is Color.BLACK


def test_opposite_color_piece_is_involution():
    for piece in range(12):
        other = opposite_color_piece(piece)
        assert piece_color(other) != piece_color(piece)
        assert opposite_color_piece(other) == piece


def test_opposite_color_piece_invalid():
    assert opposite_color_piece(EMPTY) == EMPTY
    assert opposite_color_piece(40) == EMPTY
    assert opposite_color_piece(WQ) == fen_to_piece("q")


def test_square_round_trip():
    for square in range(64):
        assert parse_square(square_name(square)) == square


def test_square_layout():
    assert square_name(0) == "a8"
    assert square_name(63) == "h1"
    assert square_name(NO_SQUARE) == "-"
    assert parse_square("e2") ^ 56 == parse_square("e7")


@pytest.mark.parametrize("name", ["i1", "a9", "e", "e22", ""])
def test_parse_square_invalid(name):
    with pytest.raises(ValueError):
        parse_square(name)


def test_square_name_out_of_range():
    with pytest.raises(ValueError):
        square_name(64)