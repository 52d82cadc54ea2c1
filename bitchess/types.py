"""Sides and piece kinds."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """The colour of a player."""

    WHITE = 0
    BLACK = 1

    def other(self) -> Side:
        """Return the opposing side."""
        return Side.BLACK if self is Side.WHITE else Side.WHITE


class Piece(IntEnum):
    """A kind of piece; NONE marks the absence of one."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


PIECES: tuple[Piece, ...] = (
    Piece.PAWN,
    Piece.KNIGHT,
    Piece.BISHOP,
    Piece.ROOK,
    Piece.QUEEN,
    Piece.KING,
)