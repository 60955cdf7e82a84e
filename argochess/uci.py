"""UCI option handling, ``go`` argument parsing and ``info`` line formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Sequence

from argochess.move import Move
from argochess.timemanager import Limits

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INTEGER = re.compile(r"[+-]?[0-9]+")

_INT_FIELDS = {
    "wtime": "white_time",
    "btime": "black_time",
    "winc": "white_increment",
    "binc": "black_increment",
    "movestogo": "moves_to_go",
    "depth": "depth",
    "nodes": "nodes",
    "mate": "mate",
    "movetime": "move_time",
}
_FLAG_FIELDS = {
    "ponder": "ponder",
    "infinite": "infinite",
}


def _parse_bool(s: str) -> bool:
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value: {s!r}")


def _atoi(s: str) -> int:
    """Parse a decimal integer; anything malformed counts as 0."""
    return int(s) if _INTEGER.fullmatch(s) else 0


@dataclass
class BoolOption:
    """A ``check`` option settable through ``setoption``."""

    name: str
    value: bool = False

    def uci_name(self) -> str:
        return self.name

    def uci_string(self) -> str:
        """Return the line announcing this option in reply to ``uci``."""
        default = "true" if self.value else "false"
        return f"option name {self.name} type check default {default}"

    def set(self, s: str) -> None:
        """Set the value from a boolean word; raise ValueError if malformed."""
        self.value = _parse_bool(s)


@dataclass
class UciScore:
    """A score either in centipawns or as moves to mate."""

    centipawns: int = 0
    mate: int = 0


@dataclass
class SearchInfo:
    """Progress or result of a search."""

    score: UciScore = field(default_factory=UciScore)
    depth: int = 0
    nodes: int = 0
    time: timedelta = field(default_factory=timedelta)
    main_line: list[Move] = field(default_factory=list)


def parse_limits(args: Sequence[str]) -> Limits:
    """Build search limits from the arguments of a ``go`` command.

    Malformed numbers count as 0; a keyword missing its value raises ValueError.
    """
    limits = Limits()
    for i, token in enumerate(args):
        if token in _FLAG_FIELDS:
            setattr(limits, _FLAG_FIELDS[token], True)
        elif token in _INT_FIELDS:
            if i + 1 >= len(args):
                raise ValueError(f"missing value for {token!r}")
            setattr(limits, _INT_FIELDS[token], _atoi(args[i + 1]))
    return limits


def search_info_to_uci(info: SearchInfo) -> str:
    """Format search information as a UCI ``info`` line."""
    parts = [f"info depth {info.depth}"]
    if info.score.mate != 0:
        parts.append(f" score mate {info.score.mate}")
    else:
        parts.append(f" score cp {info.score.centipawns}")

    time_ms = info.time // timedelta(milliseconds=1)
    nps = info.nodes * 1000 // (time_ms + 1)
    parts.append(f" nodes {info.nodes} time {time_ms} nps {nps}")

    if info.main_line:
        parts.append(" pv")
        parts.extend(f" {move}" for move in info.main_line)
    return "".join(parts)


def find_index(items: Sequence[Any], value: Any) -> int:
    """Return the position of the first item equal to value, or -1."""
    return next((i for i, item in enumerate(items) if item == value), -1)