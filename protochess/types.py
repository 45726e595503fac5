"""Board geometry, piece kinds and moves shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Iterator

BOARD_SIZE = 16
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE
FULL_BOARD = (1 << NUM_SQUARES) - 1

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8

STARTING_POS = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w KQkq - 0 1"

_CLASSICAL_CHARS = "kqrbnp"


@dataclass(frozen=True)
class Dimensions:
    """Width and height of the playable area."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT


def to_index(x: int, y: int) -> int:
    """Square index of (x, y) on the 16x16 board."""
    return y * BOARD_SIZE + x


def from_index(index: int) -> tuple[int, int]:
    """(x, y) of a square index on the 16x16 board."""
    y, x = divmod(index, BOARD_SIZE)
    return x, y


def to_rank_file(x: int, y: int) -> str:
    """Rank-file notation of a square, e.g. (0, 1) -> 'A2'."""
    return f"{chr(x + 65)}{y + 1}"


def iter_bits(bitboard: int) -> Iterator[int]:
    """Yield the indices of set bits, lowest first."""
    while bitboard:
        lowest = bitboard & -bitboard
        yield lowest.bit_length() - 1
        bitboard ^= lowest


@dataclass(frozen=True)
class PieceType:
    """A classical piece kind, or a custom one identified by its character."""

    char: str
    custom: bool = False

    KING: ClassVar[PieceType]
    QUEEN: ClassVar[PieceType]
    ROOK: ClassVar[PieceType]
    BISHOP: ClassVar[PieceType]
    KNIGHT: ClassVar[PieceType]
    PAWN: ClassVar[PieceType]

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"piece character must be a single character: {self.char!r}")
        if not self.custom and self.char not in _CLASSICAL_CHARS:
            raise ValueError(f"not a classical piece character: {self.char!r}")

    @classmethod
    def from_char(cls, c: str) -> PieceType:
        """Classical type for k, q, r, b, n, p (any case); custom otherwise."""
        lowered = c.lower()
        if lowered in _CLASSICAL_CHARS:
            return cls(lowered)
        return cls(lowered, custom=True)

    def __str__(self) -> str:
        return self.char


PieceType.KING = PieceType("k")
PieceType.QUEEN = PieceType("q")
PieceType.ROOK = PieceType("r")
PieceType.BISHOP = PieceType("b")
PieceType.KNIGHT = PieceType("n")
PieceType.PAWN = PieceType("p")


class MoveType(Enum):
    QUIET = auto()
    CAPTURE = auto()
    QUEENSIDE_CASTLE = auto()
    KINGSIDE_CASTLE = auto()
    PROMOTION = auto()
    PROMOTION_CAPTURE = auto()
    NULL = auto()


@dataclass(frozen=True)
class Move:
    """A move from src to dst; target is the captured square or castling rook."""

    src: int
    dst: int
    target: int = 0
    move_type: MoveType = MoveType.QUIET
    promotion: str | None = None

    @classmethod
    def null(cls) -> Move:
        """The passing move."""
        return cls(0, 0, 0, MoveType.NULL)

    @property
    def is_capture(self) -> bool:
        return self.move_type in (MoveType.CAPTURE, MoveType.PROMOTION_CAPTURE)

    def __str__(self) -> str:
        text = f"{to_rank_file(*from_index(self.src))}{to_rank_file(*from_index(self.dst))}"
        if self.promotion is not None:
            text += f"={self.promotion}"
        return f"{text} ({self.move_type.name.lower()})"