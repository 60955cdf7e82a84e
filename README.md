# argochess

Core pieces of a chess engine, kept free of any board implementation.

## Modules

- `argochess.pieces`: piece indices `0..11` in the order `PNBRQKpnbrqk` (`EMPTY` is 12), the `Color` enum, and the helpers `fen_to_piece`, `piece_color`, `opposite_color_piece`, `square_name` and `parse_square`. Squares run from a8 (0) to h1 (63), rank by rank, so `square ^ 56` flips a square vertically.
- `argochess.move`: compact integer move encoding. `encode_move(...)` returns a `Move`, which is an `int` subclass. Its methods `source()`, `target()`, `piece()`, `promoted()`, `capture()`, `double_push()`, `enpassant()` and `castling()` return the fields. `mirror()` flips the move vertically and swaps the piece colours. `describe()` returns a detailed one-line description. `str(move)` gives UCI text such as `e2e4`, or `0000` for `NO_MOVE`.
- `argochess.transposition`: the `TranspositionTable` class. It is a fixed-size table sized in megabytes, with `store`, `probe`, `new_search` and `clear`. `probe` returns a `TTEntry` or `None`, and entries carry a `TTFlag` (`EXACT`, `ALPHA`, `BETA`). The module also has the mate-distance helpers `win_in` and `loss_in`.
- `argochess.tables`: middlegame and endgame piece-square tables, each 64 entries from White's point of view. `table_for(piece_type, endgame)` returns one of them.
- `argochess.positional`: a tapered piece-square score. `game_phase(pieces)` gives a value on a 0..256 scale, `interpolate_score(mg, eg, phase)` blends two scores, and `positional_score(pieces, side)` returns the score relative to the side to move. In the middlegame, knights are scored with the king's opening table.
- `argochess.evaluation`: material values and game-phase measures:
  - `piece_value`
  - `material_score` (White minus Black, kings excluded)
  - `non_pawn_material`
  - `phase` (0 to 128)
  - `Evaluator`, whose `is_endgame` method tests for non-pawn, non-king material of at most 1300. Its `evaluate` method computes the phase, logs it at debug level, and returns 0.
- `argochess.timemanager`: `Limits` (UCI clock limits in milliseconds), `MainLine`, and `TimeManager`.
  - `TimeManager` takes a `time.monotonic()` start time. It works out a deadline from `move_time`, or from the clock through `calculate_time_limit`, which returns seconds.
  - `is_done()` reports when the deadline has passed or the search was stopped.
  - The search can be stopped through `on_nodes_changed`, `on_iteration_complete` and `close`.
- `argochess.uci`: UCI protocol helpers:
  - `BoolOption`, a `check` option with `uci_name`, `uci_string` and `set`. `set` raises `ValueError` on a malformed boolean.
  - `UciScore` and `SearchInfo`.
  - `parse_limits(args)`, which turns `go` arguments into `Limits`. Malformed numbers count as 0, and a keyword missing its value raises `ValueError`.
  - `search_info_to_uci(info)`, which formats an `info` line.
  - `find_index(items, value)`.

Positions are passed to the evaluation functions as either of these:

- a mapping from square index to piece index;
- a 64-item sequence with `EMPTY` on vacant squares.

Any board representation can therefore be plugged in.

## Example

```python
from datetime import timedelta

from argochess.move import encode_move
from argochess.pieces import WP, parse_square
from argochess.uci import SearchInfo, UciScore, parse_limits, search_info_to_uci

mv = encode_move(parse_square("e2"), parse_square("e4"), WP, 0, 0, 1, 0, 0)
print(mv)                # e2e4
print(mv.double_push())  # 1

limits = parse_limits("wtime 60000 btime 60000 movestogo 20".split())
print(limits.white_time, limits.moves_to_go)  # 60000 20

info = SearchInfo(score=UciScore(centipawns=35), depth=4, nodes=1200,
                  time=timedelta(milliseconds=99), main_line=[mv])
print(search_info_to_uci(info))
# info depth 4 score cp 35 nodes 1200 time 99 nps 12000 pv e2e4
```

## What this package does not do

The package has none of the following:

- a board representation;
- move generation or legality checking;
- FEN parsing;
- a search;
- a command that reads UCI commands from standard input.

It supplies the parts such an engine is built around, and leaves the board and the search loop to the caller.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```