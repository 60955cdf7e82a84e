import pytest

from argochess.move import NO_MOVE, encode_move
from argochess.transposition import (
    ENTRY_SIZE,
    MATE_SCORE,
    TranspositionTable,
    TTFlag,
    loss_in,
    win_in,
)

MOVE_A = encode_move(12, 28, 0, 0, 0, 1, 0, 0)
MOVE_B = encode_move(62, 45, 1, 0, 0, 0, 0, 0)


@pytest.fixture
def table():
    return TranspositionTable(1)


def test_win_and_loss_are_symmetric():
    assert win_in(0) == MATE_SCORE
    for height in range(10):
        assert win_in(height) == -loss_in(height)
        assert win_in(height + 1) < win_in(height)


def test_size_fits_memory_budget(table):
    budget = 1024 * 1024
    assert table.size * ENTRY_SIZE <= budget < (table.size + 1) * ENTRY_SIZE


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        TranspositionTable(0)


def test_store_and_probe(table):
    table.store(12345, 77, 4, TTFlag.BETA, MOVE_A)
    entry = table.probe(12345)
    assert entry is not None
    assert (entry.key, entry.score, entry.depth, entry.flag, entry.best_move) == (
        12345, 77, 4, TTFlag.BETA, MOVE_A,
    )


def test_probe_miss(table):
    assert table.probe(999) is None


def test_collision_returns_none(table):
    table.store(5, 10, 3, TTFlag.EXACT, MOVE_A)
    assert table.probe(5 + table.size) is None


def test_shallower_store_does_not_replace(table):
    table.store(42, 10, 5, TTFlag.EXACT, MOVE_A)
    table.store(42, 20, 2, TTFlag.ALPHA, MOVE_B)
    entry = table.probe(42)
    assert entry.score == 10
    assert entry.best_move == MOVE_A


def test_deeper_store_replaces(table):
    table.store(42, 10, 2, TTFlag.EXACT, MOVE_A)
    table.store(42, 20, 5, TTFlag.ALPHA, MOVE_B)
    entry = table.probe(42)
    assert entry.score == 20
    assert entry.flag == TTFlag.ALPHA


def test_new_search_allows_replacement(table):
    table.store(42, 10, 6, TTFlag.EXACT, MOVE_A)
    table.new_search()
    table.store(42, 30, 1, TTFlag.BETA, MOVE_B)
    entry = table.probe(42)
    assert entry.score == 30
    assert entry.age == table.age


def test_clear_removes_entries(table):
    table.store(42, 10, 6, TTFlag.EXACT, MOVE_A)
    table.clear()
    assert table.probe(42) is None


def test_empty_best_move_default(table):
    table.store(7, 0, 1, TTFlag.EXACT, NO_MOVE)
    assert table.probe(7).best_move == NO_MOVE