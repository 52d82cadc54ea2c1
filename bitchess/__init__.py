"""Bitboard chess positions, attack tables, Zobrist hashing and make/undo of moves."""

__version__ = "0.1.0"

__all__ = ["types", "square", "bitboard", "move", "movegen", "zobrist", "board", "position"]