import pytest

from argochess.pieces import BISHOP, KING, KNIGHT, PAWN, QUEEN, ROOK
from argochess.tables import table_for

ALL_TYPES = [PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING]


@pytest.mark.parametrize("piece_type", ALL_TYPES)
@pytest.mark.parametrize("endgame", [False, True])
def test_tables_have_64_entries(piece_type, endgame):
    assert len(table_for(piece_type, endgame)) == 64


@pytest.mark.parametrize("endgame", [False, True])
def test_pawn_tables_empty_on_back_ranks(endgame):
    table = table_for(PAWN, endgame)
    assert all(v == 0 for v in table[:8])
    assert all(v == 0 for v in table[56:])


@pytest.mark.parametrize("piece_type", ALL_TYPES)
def test_opening_and_endgame_tables_differ(piece_type):
    assert table_for(piece_type, False) != table_for(piece_type, True)


def test_distinct_piece_tables():
    openings = {table_for(t, False) for t in ALL_TYPES}
    assert len(openings) == len(ALL_TYPES)


def test_pinned_values():
    assert table_for(PAWN, False)[8] == 45
    assert table_for(KING, True)[63] == -55
    assert table_for(ROOK, False)[55] == -46


@pytest.mark.parametrize("bad", [-1, 6, 12])
def test_unknown_piece_type(bad):
    with pytest.raises(ValueError):
        table_for(bad, False)