"""Per-position state that cannot be recovered from a move alone."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .castle_rights import CastleRights
from .types import Move, PieceType


@dataclass
class PositionProperties:
    """Zobrist key, castling, en passant and undo information of one position."""

    zobrist_key: int = 0
    move_played: Move | None = None
    promote_from: PieceType | None = None
    castling_rights: CastleRights = field(default_factory=CastleRights)
    ep_square: int | None = None
    captured_piece: tuple[int, PieceType] | None = None
    prev_properties: PositionProperties | None = field(default=None, repr=False, compare=False)

    @property
    def prev(self) -> PositionProperties | None:
        """Properties of the position before the last move."""
        return self.prev_properties

    def copy(self) -> PositionProperties:
        """A copy sharing the history chain but owning its castling rights."""
        return replace(self, castling_rights=self.castling_rights.copy())