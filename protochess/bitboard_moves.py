"""Turn a bitboard of destinations into moves."""

from __future__ import annotations

from typing import Iterator, Sequence

from .types import Move, MoveType, iter_bits


def bitboard_moves(
    enemies: int,
    moves: int,
    source_index: int,
    promotion_squares: int | None = None,
    promo_vals: Sequence[str] | None = None,
) -> Iterator[Move]:
    """Yield one move per destination bit, lowest first.

    On a promotion square one move is yielded per promotion value, last value first.
    """
    for dst in iter_bits(moves):
        promo_here = promotion_squares is not None and bool(promotion_squares >> dst & 1)
        capture_here = bool(enemies >> dst & 1)
        target = dst if capture_here else 0
        if promo_here:
            if not promo_vals:
                raise ValueError(f"promotion square {dst} reached without promotion values")
            move_type = MoveType.PROMOTION_CAPTURE if capture_here else MoveType.PROMOTION
            for promo in reversed(promo_vals):
                yield Move(source_index, dst, target, move_type, promo)
        else:
            move_type = MoveType.CAPTURE if capture_here else MoveType.QUIET
            yield Move(source_index, dst, target, move_type)