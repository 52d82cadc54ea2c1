import pytest

from bitchess import zobrist
from bitchess.bitboard import EMPTY, RANK_1, RANK_2, RANK_3, Bitboard
from bitchess.board import STARTPOS_FEN, Board
from bitchess.move import MoveType
from bitchess.square import A1, A2, A8, D1, E1, E2, E3, E8, H1, Square
from bitchess.types import PIECES, Piece, Side


@pytest.fixture
def start():
    return Board("startpos")


def test_startpos_alias_matches_fen(start):
    other = Board(STARTPOS_FEN)
    assert start.hash == other.hash
    assert start.occupied() == other.occupied()


def test_startpos_placement(start):
    assert start.occupied().count() == 32
    assert start.occupancy(Side.WHITE).count() == 16
    assert start.piece_on(E1) is Piece.KING
    assert start.piece_on(D1) is Piece.QUEEN
    assert start.piece_on(A8) is Piece.ROOK
    assert start.piece_on(E3) is Piece.NONE
    assert start.king_position(Side.BLACK) == E8
    assert start.pieces(Side.WHITE, Piece.PAWN) == RANK_2


def test_startpos_state(start):
    assert start.turn is Side.WHITE
    assert start.ep is None
    assert start.halfmoves == 0
    assert start.fullmoves == 1
    for side in Side:
        for kind in (MoveType.KSC, MoveType.QSC):
            assert start.can_castle(side, kind)


def test_empty_is_complement(start):
    assert start.empty() == ~start.occupied()
    assert (start.empty() & start.occupied()) == EMPTY


def test_hash_matches_calculation(start):
    assert start.hash == start.calculate_hash()


def test_hash_turn_difference():
    white = Board("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    black = Board("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
    assert white.hash ^ black.hash == zobrist.turn_key()


def test_hash_castling_difference():
    without = Board("4k3/8/8/8/8/8/8/4K2R w - - 0 1")
    with_right = Board("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
    assert without.hash ^ with_right.hash == zobrist.castling_key(0)


def test_en_passant_parsing_and_hash():
    fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
    board = Board(fen)
    plain = Board(fen.replace(" e3 ", " - "))
    assert board.ep == E3
    assert board.turn is Side.BLACK
    assert board.hash ^ plain.hash == zobrist.ep_key(E3)


def test_clocks_and_fifty_moves():
    board = Board("4k3/8/8/8/8/8/8/4K3 w - - 100 60")
    assert board.halfmoves == 100
    assert board.fullmoves == 60
    assert board.fiftymoves()
    assert not Board("4k3/8/8/8/8/8/8/4K3 w - - 99 60").fiftymoves()


def test_clear_resets(start):
    start.clear()
    assert start.occupied() == EMPTY
    assert start.hash == 0
    assert start.turn is Side.WHITE
    assert start.ep is None
    assert not start.can_castle(Side.WHITE, MoveType.KSC)


def test_default_board_is_empty():
    board = Board()
    assert board.occupied() == EMPTY
    with pytest.raises(ValueError):
        board.king_position(Side.WHITE)


def test_occupancy_of_none_rejected(start):
    with pytest.raises(ValueError):
        start.occupancy(Piece.NONE)


def test_bad_en_passant_square_rejected():
    with pytest.raises(ValueError):
        Board("4k3/8/8/8/8/8/8/4K3 w - z9 0 1")


def test_piece_bitboards_partition_occupancy(start):
    union = EMPTY
    for piece in PIECES:
        union |= start.occupancy(piece)
    assert union == start.occupied()


def test_squares_attacked_startpos(start):
    expected = RANK_2 | RANK_3 | (RANK_1 ^ A1 ^ H1)
    assert start.squares_attacked(Side.WHITE) == expected


def test_squares_attacked_symmetry(start):
    white = {sq.flip() for sq in start.squares_attacked(Side.WHITE)}
    black = set(start.squares_attacked(Side.BLACK))
    assert white == black


def test_pinned_piece():
    board = Board("k3r3/8/8/8/8/8/4B3/4K3 w - - 0 1")
    assert board.pinned(Side.WHITE, E1) == Bitboard.from_square(E2)
    assert board.pinned() == board.pinned(Side.WHITE, E1)


def test_nothing_pinned():
    board = Board("k7/8/8/8/r7/8/4B3/4K3 w - - 0 1")
    assert board.pinned() == EMPTY


def test_passed_pawns():
    board = Board("4k3/8/8/3p4/8/8/P2P4/4K3 w - - 0 1")
    assert board.passed_pawns(Side.WHITE) == Bitboard.from_square(A2)
    assert board.passed_pawns(Side.BLACK) == EMPTY
    assert board.passed_pawns() == board.passed_pawns(Side.WHITE)


def test_str_startpos(start):
    text = str(start)
    assert text.startswith("rnbqkbnr\npppppppp\n")
    assert "RNBQKBNR\n" in text
    assert "Castling: KQkq\n" in text
    assert "EP: -\n" in text
    assert text.endswith("Turn: w")


def test_str_en_passant():
    board = Board("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1")
    text = str(board)
    assert "EP: e3\n" in text
    assert text.endswith("Turn: b")


def test_set_fen_replaces_position(start):
    start.set_fen("4k3/8/8/8/8/8/8/4K3 b - - 3 7")
    assert start.occupied().count() == 2
    assert start.turn is Side.BLACK
    assert start.piece_on(Square.from_name("e8")) is Piece.KING
    assert start.hash == start.calculate_hash()