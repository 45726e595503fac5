import pytest

from protochess.movement_pattern import MovementPatternExternal
from protochess.position import Position
from protochess.types import Dimensions, Move, MoveType, PieceType, to_index
from protochess.zobrist import shared_table


def sq(x, y):
    return to_index(x, y)


def test_print_pieces_default_counts():
    pos = Position.default()
    pieces = pos.pieces_as_tuples()
    assert len(pieces) == 32
    assert sum(1 for p in pieces if p[0] == 0) == 16
    assert (0, 4, 0, "k") in pieces
    assert (1, 3, 7, "q") in pieces
    tiles = pos.tiles_as_tuples()
    assert len(tiles) == 64
    assert all(t[2] in "bw" for t in tiles)
    assert tiles[0] == (0, 0, "b")


def test_null_move_eq():
    pos = Position.default()
    zob_0 = pos.zobrist
    for _ in range(4):
        pos.make_move(Move.null())
    for _ in range(4):
        pos.unmake_move()
    assert pos.zobrist == zob_0
    assert pos.whos_turn == 0


def test_null_move_changes_turn_and_key():
    pos = Position.default()
    zob_0 = pos.zobrist
    pos.make_move(Move.null())
    assert pos.whos_turn == 1
    assert pos.zobrist == zob_0 ^ shared_table().to_move_key(1)


def test_str_layout():
    pos = Position.default()
    text = str(pos)
    lines = text.split("\n")
    assert lines[0] == " 7 r n b q k b n r "
    assert lines[7] == " 0 R N B Q K B N R "
    assert text.endswith(f"Zobrist Key: {pos.zobrist}")


def test_double_push_sets_ep_and_undoes():
    pos = Position.default()
    zob_0 = pos.zobrist
    pos.make_move(Move(sq(4, 1), sq(4, 3)))
    assert pos.properties.ep_square == sq(4, 2)
    assert pos.piece_at(sq(4, 3))[1].piece_type == PieceType.PAWN
    assert pos.piece_at(sq(4, 1)) is None
    pos.unmake_move()
    assert pos.zobrist == zob_0
    assert pos.piece_at(sq(4, 1))[0] == 0
    assert pos.properties.ep_square is None


def test_capture_and_undo():
    pos = Position.default()
    start = sorted(pos.pieces_as_tuples())
    zob_0 = pos.zobrist
    pos.make_move(Move(sq(4, 1), sq(4, 3)))
    pos.make_move(Move(sq(3, 6), sq(3, 4)))
    pos.make_move(Move(sq(4, 3), sq(3, 4), sq(3, 4), MoveType.CAPTURE))
    assert len(pos.pieces_as_tuples()) == 31
    owner, piece = pos.piece_at(sq(3, 4))
    assert owner == 0 and piece.piece_type == PieceType.PAWN
    assert pos.properties.captured_piece == (1, PieceType.PAWN)
    for _ in range(3):
        pos.unmake_move()
    assert sorted(pos.pieces_as_tuples()) == start
    assert pos.zobrist == zob_0


def test_kingside_castle():
    pos = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    zob_0 = pos.zobrist
    pos.make_move(Move(sq(4, 0), sq(6, 0), sq(7, 0), MoveType.KINGSIDE_CASTLE))
    assert pos.piece_at(sq(6, 0))[1].piece_type == PieceType.KING
    assert pos.piece_at(sq(5, 0))[1].piece_type == PieceType.ROOK
    assert pos.piece_at(sq(7, 0)) is None
    rights = pos.properties.castling_rights
    assert rights.did_player_castle(0)
    assert not rights.can_player_castle(0)
    assert rights.can_player_castle(1)
    pos.unmake_move()
    assert pos.piece_at(sq(7, 0))[1].piece_type == PieceType.ROOK
    assert pos.piece_at(sq(4, 0))[1].piece_type == PieceType.KING
    assert pos.zobrist == zob_0
    assert not pos.properties.castling_rights.did_player_castle(0)


def test_queenside_castle():
    pos = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    pos.make_move(Move(sq(4, 0), sq(2, 0), sq(0, 0), MoveType.QUEENSIDE_CASTLE))
    assert pos.piece_at(sq(2, 0))[1].piece_type == PieceType.KING
    assert pos.piece_at(sq(3, 0))[1].piece_type == PieceType.ROOK
    pos.unmake_move()
    assert pos.piece_at(sq(0, 0))[1].piece_type == PieceType.ROOK


def test_rook_move_disables_one_side():
    pos = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    pos.make_move(Move(sq(7, 0), sq(7, 1)))
    rights = pos.properties.castling_rights
    assert not rights.can_player_castle_kingside(0)
    assert rights.can_player_castle_queenside(0)


def test_promotion_and_undo():
    pos = Position.from_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
    zob_0 = pos.zobrist
    pos.make_move(Move(sq(0, 6), sq(0, 7), 0, MoveType.PROMOTION, "q"))
    assert pos.piece_at(sq(0, 7))[1].piece_type == PieceType.QUEEN
    assert pos.pieces[0].pawn.bitboard == 0
    pos.unmake_move()
    assert pos.piece_at(sq(0, 6))[1].piece_type == PieceType.PAWN
    assert pos.pieces[0].queen.bitboard == 0
    assert pos.zobrist == zob_0


def test_promotion_without_piece_raises():
    pos = Position.from_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
    with pytest.raises(ValueError):
        pos.make_move(Move(sq(0, 6), sq(0, 7), 0, MoveType.PROMOTION, None))


def test_unmake_without_moves_raises():
    pos = Position.default()
    with pytest.raises(ValueError):
        pos.unmake_move()


def test_castling_fields_change_key():
    with_rights = Position.from_fen("8/8/8/8/8/8/8/8 w KQkq - 0 1")
    without = Position.from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
    assert without.zobrist == 0
    table = shared_table()
    expected = 0
    for player in (0, 1):
        for kingside in (True, False):
            expected ^= table.castling_key(player, kingside)
    assert with_rights.zobrist == expected
    assert not without.properties.castling_rights.can_player_castle(0)


def test_black_to_move():
    pos = Position.from_fen("8/8/8/8/8/8/8/8 b - - 0 1")
    assert pos.whos_turn == 1


def test_xy_in_bounds():
    pos = Position.default()
    assert pos.xy_in_bounds(7, 7)
    assert not pos.xy_in_bounds(8, 0)
    assert not pos.xy_in_bounds(0, 8)


def test_set_bounds():
    pos = Position.default()
    pos.set_bounds(Dimensions(10, 10), 1 << sq(9, 9))
    assert pos.xy_in_bounds(9, 9)
    assert not pos.xy_in_bounds(0, 0)
    tiles = pos.tiles_as_tuples()
    assert len(tiles) == 100
    assert (9, 9, "b") in tiles
    assert (0, 0, "x") in tiles


def test_remove_piece():
    pos = Position.default()
    pos.remove_piece(sq(0, 1))
    assert pos.piece_at(sq(0, 1)) is None
    assert not pos.occupied >> sq(0, 1) & 1
    with pytest.raises(ValueError):
        pos.remove_piece(sq(0, 4))


def test_move_piece_from_empty_square_raises():
    pos = Position.default()
    with pytest.raises(ValueError):
        pos.move_piece(sq(3, 3), sq(3, 4))


def test_register_and_custom_pieces():
    mpe = MovementPatternExternal(translate_north=True, attack_jump_deltas=[(1, 1)])
    pos = Position.custom(
        Dimensions(8, 8),
        pos_bounds := (1 << 256) - 1,
        {"a": mpe},
        [(0, sq(0, 0), PieceType.KING), (1, sq(7, 7), PieceType.KING),
         (0, sq(3, 3), PieceType("a", custom=True))],
    )
    assert pos.bounds == pos_bounds
    owner, piece = pos.piece_at(sq(3, 3))
    assert owner == 0 and piece.char_rep == "a"
    pattern = pos.movement_pattern(PieceType("a", custom=True))
    assert pattern.translate_north
    assert pattern.attack_jump_deltas == [(1, 1)]
    patterns = pos.char_movement_patterns()
    assert list(patterns) == ["a"]
    assert patterns["a"].translate_north
    assert pos.movement_pattern(PieceType.QUEEN) is None


def test_add_piece_updates_key():
    pos = Position.from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
    pos.register_piecetype("a", MovementPatternExternal())
    pt = PieceType("a", custom=True)
    before = pos.zobrist
    pos.add_piece(0, pt, sq(2, 2))
    assert pos.zobrist == before ^ shared_table().square_key(pt, 0, sq(2, 2))
    assert pos.occupied == 1 << sq(2, 2)
    assert pos.properties.prev.zobrist_key == before


def test_add_unregistered_custom_is_ignored():
    pos = Position.from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
    pos.add_piece(0, PieceType("z", custom=True), sq(1, 1))
    assert pos.occupied == 0