"""Attacks of sliding pieces along ranks, files and diagonals."""

from __future__ import annotations

from collections.abc import Callable

from .masks import MaskHandler
from .types import FULL_BOARD


def _lowest(bits: int) -> int:
    return (bits & -bits).bit_length() - 1


def _highest(bits: int) -> int:
    return bits.bit_length() - 1


class SliderTables:
    """Sliding attacks on the 16x16 board.

    Occupied squares block a slide; the first blocker in each direction is
    included in the attack. The piece's own square is never part of it.
    """

    def __init__(self, masks: MaskHandler | None = None) -> None:
        self.masks = masks if masks is not None else MaskHandler()

    def _ray_attack(
        self, rays: Callable[[int], int], ascending: bool, loc_index: int, occ: int
    ) -> int:
        ray = rays(loc_index)
        blockers = ray & occ & FULL_BOARD
        if not blockers:
            return ray
        blocker = _lowest(blockers) if ascending else _highest(blockers)
        return ray & ~rays(blocker)

    def _north(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.north, True, loc_index, occ)

    def _south(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.south, False, loc_index, occ)

    def _east(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.east, True, loc_index, occ)

    def _west(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.west, False, loc_index, occ)

    def _northeast(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.northeast, True, loc_index, occ)

    def _northwest(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.northwest, True, loc_index, occ)

    def _southeast(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.southeast, False, loc_index, occ)

    def _southwest(self, loc_index: int, occ: int) -> int:
        return self._ray_attack(self.masks.southwest, False, loc_index, occ)

    def rank_attack(self, loc_index: int, occ: int) -> int:
        return self._east(loc_index, occ) | self._west(loc_index, occ)

    def file_attack(self, loc_index: int, occ: int) -> int:
        return self._north(loc_index, occ) | self._south(loc_index, occ)

    def diagonal_attack(self, loc_index: int, occ: int) -> int:
        return self._northeast(loc_index, occ) | self._southwest(loc_index, occ)

    def antidiagonal_attack(self, loc_index: int, occ: int) -> int:
        return self._northwest(loc_index, occ) | self._southeast(loc_index, occ)

    def sliding_moves(
        self,
        loc_index: int,
        occ: int,
        north: bool,
        east: bool,
        south: bool,
        west: bool,
        northeast: bool,
        northwest: bool,
        southeast: bool,
        southwest: bool,
    ) -> int:
        """Union of the slides in every enabled direction."""
        directions = (
            (north, self._north),
            (east, self._east),
            (south, self._south),
            (west, self._west),
            (northeast, self._northeast),
            (northwest, self._northwest),
            (southeast, self._southeast),
            (southwest, self._southwest),
        )
        attacks = 0
        for enabled, slide in directions:
            if enabled:
                attacks |= slide(loc_index, occ)
        return attacks