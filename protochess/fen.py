"""Parsing of the placement, side-to-move and castling fields of FEN strings."""

from __future__ import annotations

from dataclasses import dataclass

from .piece_set import PieceSet
from .types import BOARD_SIZE, DEFAULT_HEIGHT, to_index

_SLOTS = {
    "k": "king",
    "q": "queen",
    "r": "rook",
    "b": "bishop",
    "n": "knight",
    "p": "pawn",
}


@dataclass
class FenLayout:
    """Pieces, side to move and castling availability read from a FEN string."""

    white: PieceSet
    black: PieceSet
    whos_turn: int = 0
    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False

    @property
    def pieces(self) -> list[PieceSet]:
        """Piece sets indexed by player number."""
        return [self.white, self.black]

    @property
    def occupied(self) -> int:
        return self.white.occupied | self.black.occupied


def _parse_placement(text: str, white: PieceSet, black: PieceSet) -> None:
    x, y = 0, DEFAULT_HEIGHT - 1
    for c in text:
        if c == "/":
            x = 0
            y -= 1
            if y < 0:
                raise ValueError("too many ranks in FEN placement")
            continue
        if c.isdecimal():
            x += int(c)
            continue
        slot = _SLOTS.get(c.lower())
        if slot is None:
            continue
        if x >= BOARD_SIZE:
            raise ValueError(f"FEN placement runs off the board at file {x}")
        owner = white if c.isupper() else black
        piece = getattr(owner, slot)
        piece.bitboard |= 1 << to_index(x, y)
        x += 1


def parse_fen(fen: str) -> FenLayout:
    """Read a FEN string; the en passant and move counter fields are ignored."""
    fields = fen.split(" ")
    white, black = PieceSet(0), PieceSet(1)
    _parse_placement(fields[0], white, black)
    white.update_occupied()
    black.update_occupied()

    layout = FenLayout(white, black)
    if len(fields) > 1:
        turn = fields[1]
        layout.whos_turn = 0 if turn.endswith("w") else 1
    if len(fields) > 2:
        castling = fields[2]
        layout.white_kingside = "K" in castling
        layout.white_queenside = "Q" in castling
        layout.black_kingside = "k" in castling
        layout.black_queenside = "q" in castling
    return layout