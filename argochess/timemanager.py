"""Time allocation and stop conditions for a running search."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from argochess.move import NO_MOVE, Move
from argochess.transposition import loss_in, win_in

MAX_DIFFICULTY = 2.0
MIN_BRANCH_FACTOR = 0.75
MAX_BRANCH_FACTOR = 1.5

DEFAULT_MOVES_TO_GO = 40
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
MOVE_OVERHEAD_NS = 300 * _NS_PER_MS
MIN_TIME_LIMIT_NS = 1 * _NS_PER_MS


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Limits:
    """Search limits as given by a ``go`` command; times are in milliseconds."""

    ponder: bool = False
    infinite: bool = False
    white_time: int = 0
    black_time: int = 0
    white_increment: int = 0
    black_increment: int = 0
    move_time: int = 0
    moves_to_go: int = 0
    depth: int = 0
    nodes: int = 0
    mate: int = 0


@dataclass
class MainLine:
    """Best line found by one iteration of the search."""

    moves: list[Move] = field(default_factory=list)
    score: int = 0
    depth: int = 0
    nodes: int = 0


class TimeManager:
    """Decides how long a search may run and signals when it must stop.

    ``start`` is a ``time.monotonic()`` timestamp in seconds.
    """

    def __init__(self, start: float, limits: Limits, white_to_move: bool) -> None:
        self.start = start
        self.limits = limits
        self.side = bool(white_to_move)
        self.difficulty = 1.0
        self.last_score = 0
        self.last_best_move: Move = NO_MOVE
        self._cancelled = threading.Event()
        self.deadline: float | None = None

        if limits.move_time > 0 or limits.white_time > 0 or limits.black_time > 0:
            if limits.move_time > 0:
                maximum = limits.move_time / 1000
            else:
                maximum = self.calculate_time_limit(MAX_DIFFICULTY, MAX_BRANCH_FACTOR)
            self.deadline = start + maximum

    def is_done(self) -> bool:
        """Return True once the time is up or the search was cancelled."""
        if self._cancelled.is_set():
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            self._cancelled.set()
            return True
        return False

    def on_nodes_changed(self, nodes: int) -> None:
        """Stop the search once the node limit is reached."""
        if self.limits.nodes > 0 and nodes >= self.limits.nodes:
            self._cancelled.set()

    def on_iteration_complete(self, line: MainLine) -> None:
        """Decide after an iteration whether the search should go on."""
        limits = self.limits
        if limits.infinite:
            return

        if limits.depth != 0 and line.depth >= limits.depth:
            self._cancelled.set()
            return

        if line.score >= win_in(line.depth - 5) or line.score <= loss_in(line.depth - 5):
            self._cancelled.set()
            return

        if limits.white_time > 0 or limits.black_time > 0:
            best = line.moves[0]
            if line.depth >= 5:
                score_drop = self.last_score - line.score
                if score_drop > 50:
                    self.difficulty = min(self.difficulty * 1.3, MAX_DIFFICULTY)
                elif best != self.last_best_move:
                    self.difficulty = min(self.difficulty * 1.2, 1.5)
                else:
                    self.difficulty = max(0.8, self.difficulty * 0.8)

            self.last_score = line.score
            self.last_best_move = Move(best)

            optimum = self.calculate_time_limit(self.difficulty, MIN_BRANCH_FACTOR)
            if time.monotonic() - self.start >= optimum:
                self._cancelled.set()

    def close(self) -> None:
        """Stop the search."""
        self._cancelled.set()

    def calculate_time_limit(self, difficulty: float, branch_factor: float) -> float:
        """Return the time in seconds to spend on this move."""
        limits = self.limits
        if self.side:
            main = limits.white_time * _NS_PER_MS
            inc = limits.white_increment * _NS_PER_MS
        else:
            main = limits.black_time * _NS_PER_MS
            inc = limits.black_increment * _NS_PER_MS

        main -= MOVE_OVERHEAD_NS
        if main < MIN_TIME_LIMIT_NS:
            main = MIN_TIME_LIMIT_NS

        moves = limits.moves_to_go
        if moves == 0 or moves > DEFAULT_MOVES_TO_GO:
            moves = DEFAULT_MOVES_TO_GO

        total = float(main) + float(moves - 1) * float(inc)
        limit = int(
            difficulty * branch_factor * total
            / (difficulty * MAX_BRANCH_FACTOR + float(moves - 1))
        )

        if main < 30 * _NS_PER_S:
            scale = 0.3
        elif main < 60 * _NS_PER_S:
            scale = 0.5
        else:
            scale = 1.0
        limit = int(float(limit) * scale)

        if moves > 30:
            limit = _trunc_div(limit * 2, 3)

        limit = min(limit, main)
        limit = max(limit, MIN_TIME_LIMIT_NS)
        return limit / _NS_PER_S

    def __str__(self) -> str:
        limits = self.limits
        side = "White" if self.side else "Black"
        return (
            "timeManager:\n"
            f"  start:        {self.start}\n"
            "  limits:\n"
            f"    Ponder:         {str(limits.ponder).lower()}\n"
            f"    Infinite:       {str(limits.infinite).lower()}\n"
            f"    WhiteTime:      {limits.white_time}\n"
            f"    BlackTime:      {limits.black_time}\n"
            f"    WhiteIncrement: {limits.white_increment}\n"
            f"    BlackIncrement: {limits.black_increment}\n"
            f"    MoveTime:       {limits.move_time}\n"
            f"    MovesToGo:      {limits.moves_to_go}\n"
            f"    Depth:          {limits.depth}\n"
            f"    Nodes:          {limits.nodes}\n"
            f"    Mate:           {limits.mate}\n"
            f"  side:         {side}\n"
            f"  difficulty:   {self.difficulty:.2f}\n"
            f"  lastScore:    {self.last_score}\n"
            f"  lastBestMove: {self.last_best_move}\n"
            "  done:         true\n"
            "  cancel:       true\n"
        )