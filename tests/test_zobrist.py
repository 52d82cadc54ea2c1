import pytest

from bitchess.square import A1, A3, A6, E3, E6, H8, SQUARES, Square
from bitchess.types import PIECES, Piece, Side
from bitchess.zobrist import castling_key, ep_key, piece_key, turn_key


def test_turn_key_value():
    assert turn_key() == 0x679EBE6F2ED869A4


def test_castling_keys_values():
    assert castling_key(0) == 0x6B63254B15E00A87
    assert castling_key(3) == 0x71588A053B2BD9E5


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_castling_key_out_of_range(index):
    with pytest.raises(ValueError):
        castling_key(index)


def test_piece_key_first_and_last():
    assert piece_key(Piece.PAWN, Side.WHITE, A1) == 0xDE0A6308C3DF1559
    assert piece_key(Piece.KING, Side.BLACK, H8) == 0x677524F27EFE26FE


def test_piece_key_rejects_none():
    with pytest.raises(ValueError):
        piece_key(Piece.NONE, Side.WHITE, A1)


def test_all_piece_keys_distinct_and_64_bit():
    keys = [piece_key(p, s, sq) for p in PIECES for s in Side for sq in SQUARES]
    assert len(keys) == 768
    assert len(set(keys)) == 768
    assert all(0 <= k < 2**64 for k in keys)


def test_ep_key_depends_on_file_only():
    assert ep_key(A3) == ep_key(A6)
    assert ep_key(E3) == ep_key(E6)
    assert ep_key(A3) != ep_key(E3)


def test_ep_key_value():
    assert ep_key(A3) == 0xA72780F845E9076D


def test_ep_keys_distinct_per_file():
    keys = {ep_key(Square(f)) for f in range(8)}
    assert len(keys) == 8


def test_key_families_do_not_collide():
    pieces = {piece_key(p, s, sq) for p in PIECES for s in Side for sq in SQUARES}
    others = {turn_key()} | {castling_key(i) for i in range(4)} | {
        ep_key(Square(f)) for f in range(8)
    }
    assert pieces.isdisjoint(others)