import pytest

from bitchess.move import Move, MoveType
from bitchess.position import HistoryEntry, Position
from bitchess.square import (
    A7,
    A8,
    B1,
    B8,
    C1,
    C3,
    D1,
    D5,
    D6,
    E1,
    E2,
    E3,
    E4,
    E5,
    F1,
    F3,
    F6,
    G1,
    G8,
    H1,
    H8,
)
from bitchess.types import Piece, Side

CASTLE_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

CASES = [
    ("startpos", Move(MoveType.DOUBLE, E2, E4, Piece.PAWN)),
    ("startpos", Move(MoveType.NORMAL, G1, F3, Piece.KNIGHT)),
    ("startpos", Move(MoveType.NORMAL, E2, E3, Piece.PAWN)),
    (CASTLE_FEN, Move(MoveType.KSC, E1, G1, Piece.KING)),
    (CASTLE_FEN, Move(MoveType.QSC, E1, C1, Piece.KING)),
    (CASTLE_FEN, Move(MoveType.CAPTURE, H1, H8, Piece.ROOK, Piece.ROOK)),
    (CASTLE_FEN, Move(MoveType.NORMAL, E1, D1, Piece.KING)),
    ("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1", Move(MoveType.ENPASSANT, E5, D6, Piece.PAWN, Piece.PAWN)),
    ("4k3/P7/8/8/8/8/8/4K3 w - - 0 1", Move(MoveType.PROMO, A7, A8, Piece.PAWN, Piece.NONE, Piece.QUEEN)),
    (
        "1r2k3/P7/8/8/8/8/8/4K3 w - - 0 1",
        Move(MoveType.PROMO_CAPTURE, A7, B8, Piece.PAWN, Piece.ROOK, Piece.KNIGHT),
    ),
]


def _snapshot(pos):
    return (str(pos), pos.hash, pos.halfmoves, pos.fullmoves, pos.ep, pos.turn)


@pytest.mark.parametrize("fen,move", CASES)
def test_incremental_hash_matches_full_hash(fen, move):
    pos = Position(fen)
    pos.makemove(move)
    assert pos.hash == pos.calculate_hash()


@pytest.mark.parametrize("fen,move", CASES)
def test_predict_hash_matches_makemove(fen, move):
    pos = Position(fen)
    predicted = pos.predict_hash(move)
    pos.makemove(move)
    assert predicted == pos.hash


@pytest.mark.parametrize("fen,move", CASES)
def test_undomove_restores_state(fen, move):
    pos = Position(fen)
    before = _snapshot(pos)
    castling_before = [pos.can_castle(s, t) for s in Side for t in (MoveType.KSC, MoveType.QSC)]
    pos.makemove(move)
    assert pos.turn is Side.BLACK
    pos.undomove()
    assert _snapshot(pos) == before
    assert [pos.can_castle(s, t) for s in Side for t in (MoveType.KSC, MoveType.QSC)] == castling_before
    assert pos.history == ()


def test_double_push_sets_ep_and_history():
    pos = Position("startpos")
    start_hash = pos.hash
    move = Move(MoveType.DOUBLE, E2, E4, Piece.PAWN)
    pos.makemove(move)
    assert pos.ep == E3
    assert pos.piece_on(E4) is Piece.PAWN
    assert pos.piece_on(E2) is Piece.NONE
    assert pos.history == (HistoryEntry(start_hash, move, None, 0, (True, True, True, True)),)


def test_king_side_castle_moves_rook_and_clears_rights():
    pos = Position(CASTLE_FEN)
    pos.makemove(Move(MoveType.KSC, E1, G1, Piece.KING))
    assert pos.piece_on(G1) is Piece.KING
    assert pos.piece_on(F1) is Piece.ROOK
    assert pos.piece_on(H1) is Piece.NONE
    assert not pos.can_castle(Side.WHITE, MoveType.KSC)
    assert not pos.can_castle(Side.WHITE, MoveType.QSC)
    assert pos.can_castle(Side.BLACK, MoveType.KSC)
    assert pos.can_castle(Side.BLACK, MoveType.QSC)


def test_rook_capture_removes_both_rights():
    pos = Position(CASTLE_FEN)
    pos.makemove(Move(MoveType.CAPTURE, H1, H8, Piece.ROOK, Piece.ROOK))
    assert not pos.can_castle(Side.WHITE, MoveType.KSC)
    assert not pos.can_castle(Side.BLACK, MoveType.KSC)
    assert pos.can_castle(Side.WHITE, MoveType.QSC)
    assert pos.can_castle(Side.BLACK, MoveType.QSC)
    assert pos.halfmoves == 0
    assert pos.occupancy(Side.BLACK).count() == 2


def test_en_passant_removes_captured_pawn():
    pos = Position("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
    pos.makemove(Move(MoveType.ENPASSANT, E5, D6, Piece.PAWN, Piece.PAWN))
    assert pos.piece_on(D5) is Piece.NONE
    assert D6 in pos.pieces(Side.WHITE, Piece.PAWN)
    assert not pos.pieces(Side.BLACK, Piece.PAWN)
    assert pos.ep is None


def test_promotion_capture_replaces_pieces():
    pos = Position("1r2k3/P7/8/8/8/8/8/4K3 w - - 0 1")
    pos.makemove(Move(MoveType.PROMO_CAPTURE, A7, B8, Piece.PAWN, Piece.ROOK, Piece.KNIGHT))
    assert pos.piece_on(B8) is Piece.KNIGHT
    assert B8 in pos.occupancy(Side.WHITE)
    assert not pos.pieces(Side.BLACK, Piece.ROOK)
    assert not pos.occupancy(Piece.PAWN)


def test_clocks_advance():
    pos = Position("startpos")
    pos.makemove(Move(MoveType.NORMAL, G1, F3, Piece.KNIGHT))
    assert pos.halfmoves == 1
    assert pos.fullmoves == 1
    pos.makemove(Move(MoveType.NORMAL, G8, F6, Piece.KNIGHT))
    assert pos.halfmoves == 2
    assert pos.fullmoves == 2
    pos.undomove()
    assert pos.fullmoves == 1


def test_threefold_repetition():
    pos = Position("startpos")
    shuffle = [
        Move(MoveType.NORMAL, G1, F3, Piece.KNIGHT),
        Move(MoveType.NORMAL, G8, F6, Piece.KNIGHT),
        Move(MoveType.NORMAL, F3, G1, Piece.KNIGHT),
        Move(MoveType.NORMAL, F6, G8, Piece.KNIGHT),
    ]
    start_hash = pos.hash
    for move in shuffle:
        pos.makemove(move)
    assert pos.hash == start_hash
    assert not pos.threefold()
    for move in shuffle:
        pos.makemove(move)
    assert pos.threefold()
    pos.undomove()
    assert not pos.threefold()


def test_null_move_round_trip():
    pos = Position("startpos")
    pos.makemove(Move(MoveType.DOUBLE, E2, E4, Piece.PAWN))
    before = _snapshot(pos)
    pos.makenull()
    assert pos.turn is Side.WHITE
    assert pos.ep is None
    assert pos.halfmoves == 0
    assert pos.hash == pos.calculate_hash()
    assert pos.history[-1].move is None
    pos.undonull()
    assert _snapshot(pos) == before
    assert len(pos.history) == 1


def test_undomove_without_history_raises():
    pos = Position("startpos")
    with pytest.raises(IndexError):
        pos.undomove()
    with pytest.raises(IndexError):
        pos.undonull()


def test_mismatched_undo_kinds_raise():
    pos = Position("startpos")
    pos.makenull()
    with pytest.raises(ValueError):
        pos.undomove()
    pos.undonull()
    pos.makemove(Move(MoveType.NORMAL, B1, C3, Piece.KNIGHT))
    with pytest.raises(ValueError):
        pos.undonull()


def test_makemove_rejects_wrong_piece():
    pos = Position("startpos")
    with pytest.raises(ValueError):
        pos.makemove(Move(MoveType.NORMAL, E3, E4, Piece.PAWN))
    with pytest.raises(ValueError):
        pos.makemove(Move(MoveType.NORMAL, G8, F6, Piece.KNIGHT))
    assert pos.history == ()


def test_set_fen_clears_history():
    pos = Position("startpos")
    pos.makemove(Move(MoveType.NORMAL, G1, F3, Piece.KNIGHT))
    pos.set_fen("startpos")
    assert pos.history == ()
    assert pos.turn is Side.WHITE