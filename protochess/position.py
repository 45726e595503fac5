"""A chess position on a board of up to 16x16 squares, with make/unmake."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .fen import parse_fen
from .movement_pattern import (
    MovementPattern,
    MovementPatternExternal,
    external_mp_to_internal,
    internal_mp_to_external,
)
from .piece_set import Piece, PieceSet
from .properties import PositionProperties
from .types import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    EMPTY_FEN,
    STARTING_POS,
    Dimensions,
    Move,
    MoveType,
    PieceType,
    from_index,
    iter_bits,
    to_index,
)
from .zobrist import shared_table


def _default_bounds() -> int:
    bounds = 0
    for x in range(DEFAULT_WIDTH):
        for y in range(DEFAULT_HEIGHT):
            bounds |= 1 << to_index(x, y)
    return bounds


class Position:
    """Pieces, bounds, side to move and the history needed to undo moves."""

    def __init__(
        self,
        dimensions: Dimensions,
        bounds: int,
        pieces: list[PieceSet],
        properties: PositionProperties,
        whos_turn: int = 0,
        num_players: int = 2,
        movement_rules: dict[PieceType, MovementPattern] | None = None,
    ) -> None:
        self.dimensions = dimensions
        self.bounds = bounds
        self.pieces = pieces
        self.properties = properties
        self.whos_turn = whos_turn
        self.num_players = num_players
        self.movement_rules: dict[PieceType, MovementPattern] = (
            {} if movement_rules is None else movement_rules
        )
        self.occupied = 0
        self._update_occupied()

    # Construction

    @classmethod
    def default(cls) -> Position:
        """The classical starting position."""
        return cls.from_fen(STARTING_POS)

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        """Build an 8x8 position from a FEN string."""
        layout = parse_fen(fen)
        table = shared_table()
        properties = PositionProperties()
        key = 0
        for player in (0, 1):
            for kingside in (True, False):
                key ^= table.castling_key(player, kingside)

        rights = properties.castling_rights
        for player, kingside, allowed in (
            (0, True, layout.white_kingside),
            (1, True, layout.black_kingside),
            (0, False, layout.white_queenside),
            (1, False, layout.black_queenside),
        ):
            if allowed:
                continue
            if kingside:
                rights.disable_kingside_castle(player)
            else:
                rights.disable_queenside_castle(player)
            key ^= table.castling_key(player, kingside)

        for piece_set in layout.pieces:
            for piece in piece_set.piece_refs():
                for index in iter_bits(piece.bitboard):
                    key ^= table.piece_key(piece, index)
        properties.zobrist_key = key

        return cls(
            Dimensions(DEFAULT_WIDTH, DEFAULT_HEIGHT),
            _default_bounds(),
            layout.pieces,
            properties,
            whos_turn=layout.whos_turn,
        )

    @classmethod
    def custom(
        cls,
        dimensions: Dimensions,
        bounds: int,
        movement_patterns: Mapping[str, MovementPatternExternal],
        pieces: Iterable[tuple[int, int, PieceType]],
    ) -> Position:
        """Position with custom bounds, piece types and (owner, index, type) pieces."""
        position = cls.from_fen(EMPTY_FEN)
        position.dimensions = dimensions
        position.bounds = bounds
        for char_rep, mpe in movement_patterns.items():
            position.register_piecetype(char_rep, mpe)
        for owner, index, piece_type in pieces:
            position.add_piece(owner, piece_type, index)
        return position

    # Piece types and bounds

    def register_piecetype(self, char_rep: str, mpe: MovementPatternExternal) -> None:
        """Register a custom piece type for every player."""
        self.movement_rules[PieceType(char_rep, custom=True)] = external_mp_to_internal(mpe)
        for player_num, piece_set in enumerate(self.pieces):
            piece_set.custom.append(Piece.blank_custom(player_num, char_rep))

    def char_movement_patterns(self) -> dict[str, MovementPatternExternal]:
        """Movement patterns of the custom piece types, keyed by character."""
        return {
            piece_type.char: internal_mp_to_external(pattern)
            for piece_type, pattern in self.movement_rules.items()
            if piece_type.custom
        }

    def movement_pattern(self, piece_type: PieceType) -> MovementPattern | None:
        return self.movement_rules.get(piece_type)

    def set_bounds(self, dimensions: Dimensions, bounds: int) -> None:
        self.dimensions = dimensions
        self.bounds = bounds

    @property
    def zobrist(self) -> int:
        """Zobrist hash key of this position."""
        return self.properties.zobrist_key

    # Making and unmaking moves

    def _push_properties(self, properties: PositionProperties, move: Move) -> None:
        properties.move_played = move
        properties.prev_properties = self.properties
        self.properties = properties

    def make_move(self, move: Move) -> None:
        """Play a move, recording what is needed to undo it."""
        table = shared_table()
        player = self.whos_turn
        self.whos_turn = (self.whos_turn + 1) % self.num_players

        props = self.properties.copy()
        props.zobrist_key ^= table.to_move_key(self.whos_turn)
        if move.move_type is MoveType.NULL:
            props.ep_square = None
            self._push_properties(props, move)
            return

        if move.is_capture:
            owner, captured = self._require_piece(move.target)
            props.zobrist_key ^= table.square_key(
                captured.piece_type, captured.player_num, move.target
            )
            props.captured_piece = (owner, captured.piece_type)
            self._remove_piece(move.target)
        elif move.move_type in (MoveType.KINGSIDE_CASTLE, MoveType.QUEENSIDE_CASTLE):
            rook_from = move.target
            rook_to = self._castled_rook_square(move)
            props.zobrist_key ^= table.square_key(PieceType.ROOK, player, rook_from)
            props.zobrist_key ^= table.square_key(PieceType.ROOK, player, rook_to)
            self.move_piece(rook_from, rook_to)
            props.castling_rights.set_player_castled(player)

        src, dst = move.src, move.dst
        moving_type = self._require_piece(src)[1].piece_type
        props.zobrist_key ^= table.square_key(moving_type, player, src)
        props.zobrist_key ^= table.square_key(moving_type, player, dst)
        self.move_piece(src, dst)

        if move.move_type in (MoveType.PROMOTION, MoveType.PROMOTION_CAPTURE):
            if move.promotion is None:
                raise ValueError("promotion move without a promotion piece")
            props.promote_from = moving_type
            props.zobrist_key ^= table.square_key(moving_type, player, dst)
            self._remove_piece(dst)
            promoted = PieceType.from_char(move.promotion)
            props.zobrist_key ^= table.square_key(promoted, player, dst)
            self._add_piece(player, promoted, dst)

        x1, y1 = from_index(src)
        x2, y2 = from_index(dst)
        if self.properties.ep_square is not None:
            props.zobrist_key ^= table.ep_key(from_index(self.properties.ep_square)[0])
        if moving_type == PieceType.PAWN and abs(y2 - y1) == 2 and x1 == x2:
            props.ep_square = to_index(x1, y2 - 1 if y2 > y1 else y2 + 1)
            props.zobrist_key ^= table.ep_key(x1)
        else:
            props.ep_square = None

        rights = props.castling_rights
        if rights.can_player_castle(player):
            if moving_type == PieceType.KING:
                props.zobrist_key ^= table.castling_key(player, True)
                props.zobrist_key ^= table.castling_key(player, False)
                rights.disable_kingside_castle(player)
                rights.disable_queenside_castle(player)
            elif moving_type == PieceType.ROOK:
                kingside = x1 >= self.dimensions.width // 2
                if kingside:
                    rights.disable_kingside_castle(player)
                else:
                    rights.disable_queenside_castle(player)
                props.zobrist_key ^= table.castling_key(player, kingside)

        self._push_properties(props, move)
        self._update_occupied()

    def unmake_move(self) -> None:
        """Undo the most recent move."""
        move = self.properties.move_played
        previous = self.properties.prev
        if move is None or previous is None:
            raise ValueError("no move to undo")
        self.whos_turn = (self.whos_turn - 1) % self.num_players
        player = self.whos_turn

        if move.move_type is MoveType.NULL:
            self.properties = previous
            return

        src, dst = move.src, move.dst
        self.move_piece(dst, src)

        if move.move_type in (MoveType.PROMOTION, MoveType.PROMOTION_CAPTURE):
            promote_from = self.properties.promote_from
            if promote_from is None:
                raise ValueError("promotion recorded without its original piece type")
            self._remove_piece(src)
            self._add_piece(player, promote_from, src)

        if move.is_capture:
            captured = self.properties.captured_piece
            if captured is None:
                raise ValueError("capture recorded without its captured piece")
            owner, piece_type = captured
            self._add_piece(owner, piece_type, move.target)
        elif move.move_type in (MoveType.KINGSIDE_CASTLE, MoveType.QUEENSIDE_CASTLE):
            self.move_piece(self._castled_rook_square(move), move.target)

        self.properties = previous
        self._update_occupied()

    @staticmethod
    def _castled_rook_square(move: Move) -> int:
        x, y = from_index(move.dst)
        if move.move_type is MoveType.KINGSIDE_CASTLE:
            return to_index(x - 1, y)
        return to_index(x + 1, y)

    # Inspection

    def __str__(self) -> str:
        text = ""
        for y in reversed(range(self.dimensions.height)):
            text = f"{text} {y} "
            for x in range(self.dimensions.width):
                found = self.piece_at(to_index(x, y))
                if found is None:
                    text += "."
                else:
                    player_num, piece = found
                    text += piece.char_rep.upper() if player_num == 0 else piece.char_rep.lower()
                text += " "
            text += "\n"
        text += "  "
        for x in range(self.dimensions.width):
            text = f"{text} {x}"
        return f"{text} \nZobrist Key: {self.properties.zobrist_key}"

    def pieces_as_tuples(self) -> list[tuple[int, int, int, str]]:
        """Every piece as (owner, x, y, char)."""
        return [
            (player_num, *from_index(index), piece.char_rep)
            for player_num, piece_set in enumerate(self.pieces)
            for piece in piece_set.piece_refs()
            for index in iter_bits(piece.bitboard)
        ]

    def tiles_as_tuples(self) -> list[tuple[int, int, str]]:
        """Every square of the board as (x, y, 'b' | 'w' | 'x' for out of bounds)."""
        tiles = []
        for x in range(self.dimensions.width):
            for y in range(self.dimensions.height):
                if self.xy_in_bounds(x, y):
                    tiles.append((x, y, "b" if (x + y) % 2 == 0 else "w"))
                else:
                    tiles.append((x, y, "x"))
        return tiles

    def piece_at(self, index: int) -> tuple[int, Piece] | None:
        """(player_num, Piece) on a square, or None if it is empty."""
        for player_num, piece_set in enumerate(self.pieces):
            piece = piece_set.piece_at(index)
            if piece is not None:
                return player_num, piece
        return None

    def _require_piece(self, index: int) -> tuple[int, Piece]:
        found = self.piece_at(index)
        if found is None:
            x, y = from_index(index)
            raise ValueError(f"no piece on square ({x}, {y})")
        return found

    def xy_in_bounds(self, x: int, y: int) -> bool:
        if x < self.dimensions.width and y < self.dimensions.height:
            return bool(self.bounds >> to_index(x, y) & 1)
        return False

    # Modification

    def move_piece(self, src: int, dst: int) -> None:
        """Move whatever piece is on src to dst."""
        piece = self._require_piece(src)[1]
        piece.bitboard = (piece.bitboard & ~(1 << src)) | (1 << dst)

    def _remove_piece(self, index: int) -> None:
        piece = self._require_piece(index)[1]
        piece.bitboard &= ~(1 << index)

    def _add_piece(self, owner: int, piece_type: PieceType, index: int) -> None:
        # An unregistered custom type is silently ignored.
        piece = self.pieces[owner].piece_for(piece_type)
        if piece is not None:
            piece.bitboard |= 1 << index

    def _update_occupied(self) -> None:
        self.occupied = 0
        for piece_set in self.pieces:
            piece_set.update_occupied()
            self.occupied |= piece_set.occupied

    def add_piece(self, owner: int, piece_type: PieceType, index: int) -> None:
        """Place a piece, updating the hash and recording a new properties entry."""
        props = self.properties.copy()
        props.zobrist_key ^= shared_table().square_key(piece_type, owner, index)
        self._add_piece(owner, piece_type, index)
        self._update_occupied()
        props.prev_properties = self.properties
        self.properties = props

    def remove_piece(self, index: int) -> None:
        """Remove the piece on a square."""
        self._remove_piece(index)
        self._update_occupied()