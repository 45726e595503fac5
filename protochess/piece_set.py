"""Pieces of one kind and the full set of pieces a player owns."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from operator import or_

from .types import PieceType

_CLASSICAL_SLOTS = {
    "k": "king",
    "q": "queen",
    "r": "rook",
    "b": "bishop",
    "n": "knight",
    "p": "pawn",
}


@dataclass(eq=False)
class Piece:
    """All pieces of one type for one player, as a bitboard."""

    char_rep: str
    player_num: int
    piece_type: PieceType
    bitboard: int = 0

    @classmethod
    def blank(cls, player_num: int, piece_type: PieceType) -> Piece:
        return cls(piece_type.char, player_num, piece_type)

    @classmethod
    def blank_custom(cls, player_num: int, char_rep: str) -> Piece:
        return cls(char_rep, player_num, PieceType(char_rep, custom=True))


class PieceSet:
    """The pieces a player owns; custom holds one Piece per custom type."""

    def __init__(self, player_num: int) -> None:
        self.player_num = player_num
        self.occupied = 0
        self.king = Piece.blank(player_num, PieceType.KING)
        self.queen = Piece.blank(player_num, PieceType.QUEEN)
        self.bishop = Piece.blank(player_num, PieceType.BISHOP)
        self.knight = Piece.blank(player_num, PieceType.KNIGHT)
        self.rook = Piece.blank(player_num, PieceType.ROOK)
        self.pawn = Piece.blank(player_num, PieceType.PAWN)
        self.custom: list[Piece] = []

    def piece_refs(self) -> list[Piece]:
        """Classical pieces first (king, queen, bishop, knight, rook, pawn), then custom."""
        return [self.king, self.queen, self.bishop, self.knight, self.rook, self.pawn, *self.custom]

    def piece_at(self, index: int) -> Piece | None:
        mask = 1 << index
        return next((p for p in self.piece_refs() if p.bitboard & mask), None)

    def piece_for(self, piece_type: PieceType) -> Piece | None:
        """The Piece holding the given type, or None for an unregistered custom type."""
        if not piece_type.custom:
            return getattr(self, _CLASSICAL_SLOTS[piece_type.char])
        return next((p for p in self.custom if p.char_rep == piece_type.char), None)

    def update_occupied(self) -> None:
        self.occupied = reduce(or_, (p.bitboard for p in self.piece_refs()), 0)