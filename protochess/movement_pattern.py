"""How custom pieces move and capture."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields

from .types import from_index, iter_bits, to_index

Delta = tuple[int, int]


@dataclass
class _MovementRules:
    promo_vals: list[str] | None = None

    # Ways the piece can capture (but not move without capturing)
    attack_sliding_deltas: list[list[Delta]] = field(default_factory=list)
    attack_jump_deltas: list[Delta] = field(default_factory=list)
    attack_north: bool = False
    attack_south: bool = False
    attack_east: bool = False
    attack_west: bool = False
    attack_northeast: bool = False
    attack_northwest: bool = False
    attack_southeast: bool = False
    attack_southwest: bool = False

    # Ways the piece can move (but not capture)
    translate_jump_deltas: list[Delta] = field(default_factory=list)
    translate_sliding_deltas: list[list[Delta]] = field(default_factory=list)
    translate_north: bool = False
    translate_south: bool = False
    translate_east: bool = False
    translate_west: bool = False
    translate_northeast: bool = False
    translate_northwest: bool = False
    translate_southeast: bool = False
    translate_southwest: bool = False


@dataclass
class MovementPatternExternal(_MovementRules):
    """Movement pattern with promotion squares given as (x, y) pairs."""

    promotion_squares: list[tuple[int, int]] | None = None


@dataclass
class MovementPattern(_MovementRules):
    """Movement pattern with promotion squares as a bitboard.

    Each sliding field holds a list of runs; a run is a list of deltas.
    """

    promotion_squares: int | None = None

    def promotion_at(self, index: int) -> bool:
        if self.promotion_squares is None:
            return False
        return bool(self.promotion_squares >> index & 1)


def _shared_fields(pattern: _MovementRules) -> dict:
    return {f.name: copy.deepcopy(getattr(pattern, f.name)) for f in fields(_MovementRules)}


def external_mp_to_internal(mpe: MovementPatternExternal) -> MovementPattern:
    promotion_squares = None
    if mpe.promotion_squares is not None:
        promotion_squares = 0
        for x, y in mpe.promotion_squares:
            promotion_squares |= 1 << to_index(x, y)
    return MovementPattern(promotion_squares=promotion_squares, **_shared_fields(mpe))


def internal_mp_to_external(mp: MovementPattern) -> MovementPatternExternal:
    squares = None
    if mp.promotion_squares is not None:
        squares = [from_index(i) for i in iter_bits(mp.promotion_squares)] or None
    return MovementPatternExternal(promotion_squares=squares, **_shared_fields(mp))