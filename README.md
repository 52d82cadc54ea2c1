# bitchess

A chess position library built on 64-bit bitboards.

## What is in it

- `bitchess.types`: the `Side` enum (`WHITE`, `BLACK`, with `other()`) and the
  `Piece` enum (`PAWN` … `KING`, plus `NONE`).
- `bitchess.square`: `Square`, an immutable square numbered 0 (a1) to 63 (h8),
  with `from_name("e4")`, `file`, `rank`, `light`, `dark`, `flip()` and the
  steps `north()`, `south()`, `east()`, `west()`. Stepping off the board raises
  `ValueError`. Constants `A1` … `H8` and the tuple `SQUARES` are provided.
- `bitchess.bitboard`: `Bitboard`, an immutable set of squares. It supports
  `in`, iteration (lowest square first), `len`, `~`, `&`, `|`, `^` with
  bitboards or squares, shifts, `count()`, `north()`/`south()`/`east()`/`west()`,
  `adjacent()`, `lsb()` and `hsb()`. `str()` draws the board as rows of `0`
  and `1`, rank 8 first. `squares_between(sq1, sq2)` gives the squares strictly
  between two aligned squares. File, rank and colour masks such as `FILE_A`,
  `RANK_8`, `LIGHT_SQUARES` and `EDGE` are included.
- `bitchess.move`: `MoveType` and `Move`, a frozen dataclass checked on
  creation (an inconsistent move raises `ValueError`). `int(move)` packs it
  into an integer; `str(move)` gives coordinate notation such as `e2e4` or
  `a7a8q`. `is_capturing()` and `is_promoting()` classify it.
- `bitchess.movegen`: attack sets `knight_moves`, `king_moves`, and, given the
  occupied squares, `bishop_moves`, `rook_moves` and `queen_moves` (each ray
  stops at and includes the first blocker).
- `bitchess.zobrist`: the keys `turn_key()`, `castling_key(index)`,
  `piece_key(piece, side, square)` and `ep_key(square)`.
- `bitchess.board`: `Board`, loaded from FEN (or `"startpos"`). It exposes the
  properties `turn`, `ep`, `hash`, `halfmoves` and `fullmoves`, and the methods
  `occupancy`, `pieces`, `occupied`, `empty`, `king_position`, `can_castle`,
  `piece_on`, `calculate_hash`, `passed_pawns`, `squares_attacked`, `pinned`
  and `fiftymoves`. `str()` draws the board followed by castling rights, the
  en passant square and the side to move.
- `bitchess.position`: `Position`, a `Board` that keeps a `history` of
  `HistoryEntry` records and offers `makemove`, `undomove`, `makenull`,
  `undonull`, `predict_hash` and `threefold`. `makemove` raises `ValueError` if
  the moving piece is not on its origin square; undoing with an empty history
  raises `IndexError`.

## Example

```python
from bitchess.board import Board
from bitchess.move import Move, MoveType
from bitchess.movegen import knight_moves
from bitchess.position import Position
from bitchess.square import Square
from bitchess.types import Piece

board = Board("startpos")
print(board)
assert board.piece_on(Square.from_name("e1")) is Piece.KING
assert len(knight_moves(Square.from_name("g1"))) == 3

pos = Position("startpos")
e2e4 = Move(MoveType.DOUBLE, Square.from_name("e2"), Square.from_name("e4"), Piece.PAWN)
expected = pos.predict_hash(e2e4)
pos.makemove(e2e4)
assert pos.hash == expected
print(pos.ep)                                    # e3
pos.undomove()
assert pos.hash == board.hash
```

## What it does not do

The package does not generate legal moves for a position: moves are built by
the caller as `Move` values and `makemove` trusts that they are legal. It
therefore has no move parsing from text, no check, checkmate or stalemate
detection, no perft counting and no FEN output. There is no command-line
program.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```