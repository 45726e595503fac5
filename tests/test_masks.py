import pytest

from protochess.masks import MaskHandler
from protochess.types import FULL_BOARD, from_index, iter_bits, to_index


@pytest.fixture(scope="module")
def masks():
    return MaskHandler()


def test_rank_zero_is_low_sixteen_bits(masks):
    assert masks.rank(0) == 0xFFFF


def test_file_and_rank_contain_their_squares(masks):
    for n in (0, 5, 15):
        assert {from_index(i)[0] for i in iter_bits(masks.file(n))} == {n}
        assert {from_index(i)[1] for i in iter_bits(masks.rank(n))} == {n}
        assert bin(masks.file(n)).count("1") == 16
        assert bin(masks.rank(n)).count("1") == 16


@pytest.mark.parametrize("x,y", [(0, 0), (3, 4), (15, 15), (7, 0)])
def test_ray_lengths(masks, x, y):
    index = to_index(x, y)
    assert bin(masks.north(index)).count("1") == 15 - y
    assert bin(masks.south(index)).count("1") == y
    assert bin(masks.east(index)).count("1") == 15 - x
    assert bin(masks.west(index)).count("1") == x


def test_north_of_corner_is_file_minus_corner(masks):
    assert masks.north(to_index(0, 0)) == masks.file(0) ^ 1


def test_diagonals_combine_rays(masks):
    index = to_index(5, 9)
    assert masks.diagonal(index) == masks.northeast(index) | masks.southwest(index)
    assert masks.antidiagonal(index) == masks.northwest(index) | masks.southeast(index)
    assert not masks.diagonal(index) >> index & 1


def test_main_diagonal(masks):
    assert set(iter_bits(masks.main_diagonal)) == {to_index(i, i) for i in range(16)}


def test_column_masks(masks):
    assert masks.left_mask(0) == 0
    assert masks.right_mask(0) == 0
    assert masks.left_mask(1) == masks.file(0)
    assert masks.right_mask(1) == masks.file(15)
    assert masks.left_mask(16) == FULL_BOARD
    assert masks.right_mask(16) == FULL_BOARD


def test_shift_north_and_south_round_trip(masks):
    bb = masks.rank(3) | (1 << to_index(2, 7))
    assert masks.shift_south(2, masks.shift_north(2, bb)) == bb
    assert masks.shift_north(1, masks.rank(15)) == 0
    assert masks.shift_south(1, masks.rank(0)) == 0


def test_shift_east_and_west_do_not_wrap(masks):
    assert masks.shift_east(1, masks.file(15)) == 0
    assert masks.shift_west(1, masks.file(0)) == 0
    assert masks.shift_east(1, masks.file(4)) == masks.file(5)
    assert masks.shift_west(3, masks.file(4)) == masks.file(1)


def test_shift_east_west_round_trip_interior(masks):
    bb = (1 << to_index(3, 3)) | (1 << to_index(8, 12))
    assert masks.shift_west(2, masks.shift_east(2, bb)) == bb