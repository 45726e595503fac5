"""Castling rights for up to eight players, one bit per player."""

from __future__ import annotations

from dataclasses import dataclass, replace

_MAX_PLAYERS = 8
_ALL = (1 << _MAX_PLAYERS) - 1


def _bit(player_num: int) -> int:
    if not 0 <= player_num < _MAX_PLAYERS:
        raise ValueError(f"player number out of range: {player_num}")
    return 1 << player_num


@dataclass
class CastleRights:
    """Kingside and queenside rights, and whether each player has castled."""

    kingside: int = _ALL
    queenside: int = _ALL
    castled: int = 0

    def can_player_castle_kingside(self, player_num: int) -> bool:
        return bool(self.kingside & _bit(player_num))

    def can_player_castle_queenside(self, player_num: int) -> bool:
        return bool(self.queenside & _bit(player_num))

    def can_player_castle(self, player_num: int) -> bool:
        return self.can_player_castle_kingside(player_num) or self.can_player_castle_queenside(
            player_num
        )

    def did_player_castle(self, player_num: int) -> bool:
        return bool(self.castled & _bit(player_num))

    def set_player_castled(self, player_num: int) -> None:
        self.castled |= _bit(player_num)

    def disable_kingside_castle(self, player_num: int) -> None:
        self.kingside &= ~_bit(player_num) & _ALL

    def disable_queenside_castle(self, player_num: int) -> None:
        self.queenside &= ~_bit(player_num) & _ALL

    def copy(self) -> CastleRights:
        return replace(self)