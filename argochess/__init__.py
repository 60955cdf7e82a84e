"""Chess engine building blocks: move encoding, transposition table, evaluation, time management and UCI helpers."""

__version__ = "0.5.1"