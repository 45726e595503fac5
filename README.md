# protochess

Building blocks for chess on boards of any shape up to 16x16: positions with
make/unmake and Zobrist hashing, FEN reading, custom piece types described by
movement patterns, and bitboard masks and sliding attacks.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Concepts

- Squares live on an internal 16x16 board. `protochess.types.to_index(x, y)`
  gives `y * 16 + x`; `from_index` goes back. `(0, 0)` is the lower-left corner.
- A bitboard is a plain Python `int` whose bit `i` stands for square `i`.
  `protochess.types.iter_bits` yields the set squares, lowest first.
- `PieceType` is either classical (`PieceType.KING`, `QUEEN`, `ROOK`,
  `BISHOP`, `KNIGHT`, `PAWN`) or custom, identified by its character.
  `PieceType.from_char` maps `k q r b n p` (any case) to the classical types and
  anything else to a custom type.
- `Move(src, dst, target, move_type, promotion)` is a frozen dataclass;
  `target` is the captured square for captures and the rook square for castling.
  `Move.null()` is the passing move.

## Positions

```python
from protochess.position import Position
from protochess.types import Move, to_index

pos = Position.default()          # classical starting position
key = pos.zobrist

pos.make_move(Move(to_index(4, 1), to_index(4, 3)))   # e2-e4
print(pos.whos_turn)              # 1
print(pos.properties.ep_square == to_index(4, 2))     # True
pos.unmake_move()
print(pos.zobrist == key)         # True

print(pos)                        # text diagram with the Zobrist key
print(pos.pieces_as_tuples()[:2]) # (owner, x, y, char) tuples
```

`Position.from_fen` reads the piece placement, side to move and castling
fields of a FEN string onto an 8x8 board; the en passant and move counter
fields are ignored. `protochess.fen.parse_fen` returns the same information as
a `FenLayout` without building a position.

`make_move` plays whatever move it is given: it handles captures, castling
(moving the rook), promotions, the en passant square and castling rights, and
keeps the Zobrist key up to date. It does not check that the move is legal.
`unmake_move` undoes the most recent move and raises `ValueError` when there is
nothing to undo.

Other members: `piece_at(index)` returns `(player_num, Piece)` or `None`,
`xy_in_bounds(x, y)`, `tiles_as_tuples()` (each square as `(x, y, 'b' | 'w' | 'x')`),
`add_piece`, `remove_piece`, `move_piece`, `set_bounds`.

## Custom boards and pieces

```python
from protochess.movement_pattern import MovementPatternExternal
from protochess.position import Position
from protochess.types import Dimensions, PieceType, to_index

wazir = MovementPatternExternal(
    attack_jump_deltas=[(0, 1), (1, 0), (0, -1), (-1, 0)],
    translate_jump_deltas=[(0, 1), (1, 0), (0, -1), (-1, 0)],
)

bounds = 0
for x in range(10):
    for y in range(10):
        bounds |= 1 << to_index(x, y)

pos = Position.custom(
    Dimensions(10, 10),
    bounds,
    {"a": wazir},
    [
        (0, to_index(4, 0), PieceType.KING),
        (1, to_index(4, 9), PieceType.KING),
        (0, to_index(3, 3), PieceType.from_char("a")),
    ],
)
print(pos.char_movement_patterns().keys())   # dict_keys(['a'])
```

A `MovementPatternExternal` separates capturing (`attack_*`) from
non-capturing (`translate_*`) moves: eight sliding directions, single jump
deltas, and sliding delta runs (each run a list of deltas followed in order).
Promotion squares are given as `(x, y)` pairs with `promo_vals` naming the
pieces to promote to. `external_mp_to_internal` and `internal_mp_to_external`
convert to and from `MovementPattern`, which keeps promotion squares as a
bitboard.

## Lower-level pieces

- `protochess.masks.MaskHandler`: rays in eight directions, diagonals, ranks,
  files, left/right column masks and board shifts.
- `protochess.sliders.SliderTables`: `rank_attack`, `file_attack`,
  `diagonal_attack`, `antidiagonal_attack` and `sliding_moves` for a chosen
  set of directions; the first blocker in each direction is included.
- `protochess.bitboard_moves.bitboard_moves`: turns a bitboard of destinations
  into `Move`s, marking captures against an enemy bitboard and expanding
  promotion squares into one move per promotion value.
- `protochess.zobrist`: `ZobristTable` with deterministic keys, and
  `shared_table()`, the table positions use.
- `protochess.castle_rights.CastleRights` and
  `protochess.properties.PositionProperties`: per-position state kept for undo.

## What this package does not do

There is no move generator: the package does not list the moves of a position,
tell legal moves from illegal ones, detect check or checkmate, or count moves
(perft). There is no evaluation or search, so it cannot pick or play a move,
and there is no command-line program. Attacks for knights, kings and pawns are
not provided; only sliding attacks are.