"""Random keys used to build Zobrist hashes of positions."""

from __future__ import annotations

import random
from functools import lru_cache

from .piece_set import Piece
from .types import NUM_SQUARES, PieceType

_SEED = 5435651169991665628
_NUM_EP_FILES = 17
_CLASSICAL_ORDER = {"k": 0, "q": 1, "r": 2, "b": 3, "n": 4, "p": 5}
_PRESET_CUSTOM_CHARS = "acdefghijlmostuvwxyz"


class ZobristTable:
    """Deterministically seeded Zobrist keys for two players."""

    def __init__(self) -> None:
        self._rng = random.Random(_SEED)
        self._ep = [self._random() for _ in range(_NUM_EP_FILES)]
        self._classical = [
            [self._randoms() for _ in _CLASSICAL_ORDER] for _player in range(2)
        ]
        self._to_move = self._random()
        self._w_q_castle = self._random()
        self._b_q_castle = self._random()
        self._w_k_castle = self._random()
        self._b_k_castle = self._random()
        self._custom: dict[tuple[int, PieceType], list[int]] = {}

    def _random(self) -> int:
        return self._rng.getrandbits(64)

    def _randoms(self) -> list[int]:
        return [self._random() for _ in range(NUM_SQUARES)]

    def to_move_key(self, player_num: int) -> int:
        """Key toggled on every change of turn; the same for every player."""
        return self._to_move

    def castling_key(self, player_num: int, kingside: bool) -> int:
        keys = {
            (0, True): self._w_k_castle,
            (0, False): self._w_q_castle,
            (1, True): self._b_k_castle,
            (1, False): self._b_q_castle,
        }
        return keys.get((player_num, bool(kingside)), 0)

    def square_key(self, piece_type: PieceType, owner: int, index: int) -> int:
        """Key of a piece on a square; 0 for an unregistered custom type."""
        if not piece_type.custom:
            return self._classical[owner][_CLASSICAL_ORDER[piece_type.char]][index]
        keys = self._custom.get((owner, piece_type))
        return 0 if keys is None else keys[index]

    def piece_key(self, piece: Piece, index: int) -> int:
        return self.square_key(piece.piece_type, piece.player_num, index)

    def ep_key(self, file: int) -> int:
        return self._ep[file]

    def register_piecetype(self, player_num: int, piece_type: PieceType) -> None:
        self._custom[(player_num, piece_type)] = self._randoms()


@lru_cache(maxsize=None)
def shared_table() -> ZobristTable:
    """The table shared by all positions, with the usual custom letters registered."""
    table = ZobristTable()
    for c in _PRESET_CUSTOM_CHARS:
        piece_type = PieceType(c, custom=True)
        table.register_piecetype(0, piece_type)
        table.register_piecetype(1, piece_type)
    return table