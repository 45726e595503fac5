"""Precomputed bitboard masks for a 16x16 board."""

from __future__ import annotations

from .types import BOARD_SIZE, FULL_BOARD, NUM_SQUARES, from_index, to_index


def _ray(x: int, y: int, dx: int, dy: int) -> int:
    """Bitboard of squares from (x, y) in direction (dx, dy), excluding the start."""
    bb = 0
    x, y = x + dx, y + dy
    while 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
        bb |= 1 << to_index(x, y)
        x, y = x + dx, y + dy
    return bb


def _column(x: int) -> int:
    bb = 0
    for y in range(BOARD_SIZE):
        bb |= 1 << to_index(x, y)
    return bb


def _row(y: int) -> int:
    bb = 0
    for x in range(BOARD_SIZE):
        bb |= 1 << to_index(x, y)
    return bb


class MaskHandler:
    """Direction rays, ranks, files and column masks, plus board shifts."""

    def __init__(self) -> None:
        squares = [from_index(i) for i in range(NUM_SQUARES)]
        self._north = [_ray(x, y, 0, 1) for x, y in squares]
        self._south = [_ray(x, y, 0, -1) for x, y in squares]
        self._east = [_ray(x, y, 1, 0) for x, y in squares]
        self._west = [_ray(x, y, -1, 0) for x, y in squares]
        self._northeast = [_ray(x, y, 1, 1) for x, y in squares]
        self._northwest = [_ray(x, y, -1, 1) for x, y in squares]
        self._southeast = [_ray(x, y, 1, -1) for x, y in squares]
        self._southwest = [_ray(x, y, -1, -1) for x, y in squares]
        self._diagonals = [ne ^ sw for ne, sw in zip(self._northeast, self._southwest)]
        self._antidiagonals = [nw ^ se for nw, se in zip(self._northwest, self._southeast)]

        self._files = [_column(i) for i in range(BOARD_SIZE)]
        self._ranks = [_row(i) for i in range(BOARD_SIZE)]

        # left_masks[i] covers columns 0..i; right_masks[i] covers columns 15-i..15.
        self._left_masks: list[int] = []
        self._right_masks: list[int] = []
        left = right = 0
        for i in range(BOARD_SIZE):
            left |= self._files[i]
            right |= self._files[BOARD_SIZE - 1 - i]
            self._left_masks.append(left)
            self._right_masks.append(right)

        self._main_diagonal = 1 ^ self._northeast[0]

    @property
    def main_diagonal(self) -> int:
        """The a1-to-p16 diagonal."""
        return self._main_diagonal

    def right_mask(self, num_cols: int) -> int:
        """The rightmost num_cols columns."""
        if num_cols == 0:
            return 0
        return self._right_masks[num_cols - 1]

    def left_mask(self, num_cols: int) -> int:
        """The leftmost num_cols columns."""
        if num_cols == 0:
            return 0
        return self._left_masks[num_cols - 1]

    def diagonal(self, index: int) -> int:
        return self._diagonals[index]

    def antidiagonal(self, index: int) -> int:
        return self._antidiagonals[index]

    def north(self, index: int) -> int:
        return self._north[index]

    def south(self, index: int) -> int:
        return self._south[index]

    def east(self, index: int) -> int:
        return self._east[index]

    def west(self, index: int) -> int:
        return self._west[index]

    def northeast(self, index: int) -> int:
        return self._northeast[index]

    def northwest(self, index: int) -> int:
        return self._northwest[index]

    def southeast(self, index: int) -> int:
        return self._southeast[index]

    def southwest(self, index: int) -> int:
        return self._southwest[index]

    def file(self, n: int) -> int:
        return self._files[n]

    def rank(self, n: int) -> int:
        return self._ranks[n]

    def shift_north(self, amt: int, bitboard: int) -> int:
        return (bitboard << (amt * BOARD_SIZE)) & FULL_BOARD

    def shift_south(self, amt: int, bitboard: int) -> int:
        return (bitboard & FULL_BOARD) >> (amt * BOARD_SIZE)

    def shift_east(self, amt: int, bitboard: int) -> int:
        return (bitboard << amt) & FULL_BOARD & ~self.left_mask(amt)

    def shift_west(self, amt: int, bitboard: int) -> int:
        return ((bitboard & FULL_BOARD) >> amt) & ~self.right_mask(amt) & FULL_BOARD