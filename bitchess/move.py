"""Chess moves and their packed integer form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .square import Square
from .types import Piece


class MoveType(IntEnum):
    """What kind of move a move is."""

    NORMAL = 0
    CAPTURE = 1
    DOUBLE = 2
    ENPASSANT = 3
    KSC = 4
    QSC = 5
    PROMO = 6
    PROMO_CAPTURE = 7


_PROMOTION_LETTERS = {
    Piece.KNIGHT: "n",
    Piece.BISHOP: "b",
    Piece.ROOK: "r",
    Piece.QUEEN: "q",
}


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


@dataclass(frozen=True)
class Move:
    """A move from one square to another, with the pieces it involves.

    Its integer form packs, from the lowest bit: the origin square (6 bits),
    the target square (6), the move type (3), the moving piece (3), the
    captured piece (3) and the promotion piece (3).
    """

    move_type: MoveType
    from_square: Square
    to_square: Square
    piece: Piece
    captured: Piece = Piece.NONE
    promotion: Piece = Piece.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "move_type", MoveType(self.move_type))
        for name in ("from_square", "to_square"):
            value = getattr(self, name)
            if not isinstance(value, Square):
                object.__setattr__(self, name, Square(value))
        for name in ("piece", "captured", "promotion"):
            object.__setattr__(self, name, Piece(getattr(self, name)))
        self._validate()

    def _validate(self) -> None:
        kind = self.move_type
        _require(self.piece is not Piece.NONE, "a move needs a moving piece")
        _require(self.to_square != self.from_square, "a move must change square")

        no_capture = self.captured is Piece.NONE
        no_promotion = self.promotion is Piece.NONE
        valid_promotion = self.promotion in _PROMOTION_LETTERS

        if kind is MoveType.NORMAL:
            _require(no_capture, "a normal move captures nothing")
            _require(no_promotion, "a normal move does not promote")
        elif kind is MoveType.CAPTURE:
            _require(not no_capture, "a capture needs a captured piece")
            _require(self.captured is not Piece.KING, "the king cannot be captured")
            _require(no_promotion, "a plain capture does not promote")
        elif kind is MoveType.DOUBLE:
            _require(self.piece is Piece.PAWN, "only pawns make double pushes")
            _require(no_capture, "a double push captures nothing")
            _require(no_promotion, "a double push does not promote")
        elif kind is MoveType.ENPASSANT:
            _require(self.piece is Piece.PAWN, "only pawns capture en passant")
            _require(self.captured is Piece.PAWN, "en passant captures a pawn")
            _require(no_promotion, "en passant does not promote")
        elif kind in (MoveType.KSC, MoveType.QSC):
            _require(self.piece is Piece.KING, "castling moves the king")
            _require(no_capture, "castling captures nothing")
            _require(no_promotion, "castling does not promote")
        elif kind is MoveType.PROMO:
            _require(self.piece is Piece.PAWN, "only pawns promote")
            _require(no_capture, "a quiet promotion captures nothing")
            _require(valid_promotion, f"cannot promote to {self.promotion.name}")
        else:
            _require(self.piece is Piece.PAWN, "only pawns promote")
            _require(
                self.captured not in (Piece.NONE, Piece.PAWN, Piece.KING),
                f"a promoting capture cannot take {self.captured.name}",
            )
            _require(valid_promotion, f"cannot promote to {self.promotion.name}")

    def is_capturing(self) -> bool:
        return self.move_type in (
            MoveType.CAPTURE,
            MoveType.PROMO_CAPTURE,
            MoveType.ENPASSANT,
        )

    def is_promoting(self) -> bool:
        return self.move_type in (MoveType.PROMO, MoveType.PROMO_CAPTURE)

    def __int__(self) -> int:
        return (
            int(self.from_square)
            | int(self.to_square) << 6
            | int(self.move_type) << 12
            | int(self.piece) << 15
            | int(self.captured) << 18
            | int(self.promotion) << 21
        )

    def __str__(self) -> str:
        text = f"{self.from_square}{self.to_square}"
        if self.promotion is not Piece.NONE:
            text += _PROMOTION_LETTERS[self.promotion]
        return text