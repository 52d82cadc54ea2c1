"""A board that can make and take back moves, keeping a history."""

from __future__ import annotations

from dataclasses import dataclass

from . import zobrist
from .board import BLACK_KSC, BLACK_QSC, WHITE_KSC, WHITE_QSC, Board
from .move import Move, MoveType
from .square import A1, A8, D1, D8, E1, E8, F1, F8, H1, H8, Square
from .types import Piece, Side

# Rook origin and destination for each castling move, indexed by side.
_CASTLE_ROOKS = {
    MoveType.KSC: ((H1, F1), (H8, F8)),
    MoveType.QSC: ((A1, D1), (A8, D8)),
}

# For each castling right, the squares whose involvement in a move removes it.
_RIGHT_SQUARES = {
    WHITE_KSC: (H1, E1, H1),
    WHITE_QSC: (A1, E1, A1),
    BLACK_KSC: (H8, E8, H8),
    BLACK_QSC: (A8, E8, A8),
}


@dataclass(frozen=True)
class HistoryEntry:
    """State needed to take back one move; ``move`` is None for a null move."""

    hash: int
    move: Move | None
    ep: Square | None
    halfmove_clock: int
    castling: tuple[bool, bool, bool, bool]


def _loses_right(right: int, src: Square, dst: Square) -> bool:
    target, king_from, rook_from = _RIGHT_SQUARES[right]
    return dst == target or src == king_from or src == rook_from


class Position(Board):
    """A board with move making, unmaking and repetition detection."""

    def clear(self) -> None:
        super().clear()
        self._history: list[HistoryEntry] = []

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Entries for every move made since the position was set, oldest first."""
        return tuple(self._history)

    def _toggle(self, side: Side, piece: Piece, square: Square) -> None:
        self._colours[side] = self._colours[side] ^ square
        self._pieces[piece] = self._pieces[piece] ^ square

    def _swap_kind(self, old: Piece, new: Piece, square: Square) -> None:
        self._pieces[old] = self._pieces[old] ^ square
        self._pieces[new] = self._pieces[new] ^ square

    def makemove(self, move: Move) -> None:
        """Play ``move`` for the side to move."""
        us = self._turn
        them = us.other()
        src, dst = move.from_square, move.to_square
        piece, captured, promo = move.piece, move.captured, move.promotion

        if self.piece_on(src) is not piece or src not in self._colours[us]:
            raise ValueError(f"no {piece.name} of {us.name} on {src}")

        hash_old = self._hash
        ep_old = self._ep
        halfmove_old = self._halfmove_clock
        castling_old = tuple(self._castling)

        self._toggle(us, piece, src)
        self._toggle(us, piece, dst)
        if us is Side.BLACK:
            self._fullmove_clock += 1

        value = self._hash ^ zobrist.turn_key()
        value ^= zobrist.piece_key(piece, us, src) ^ zobrist.piece_key(piece, us, dst)
        if ep_old is not None:
            value ^= zobrist.ep_key(ep_old)

        self._ep = None
        self._halfmove_clock += 1

        kind = move.move_type
        if kind is MoveType.NORMAL:
            if piece is Piece.PAWN:
                self._halfmove_clock = 0
        elif kind is MoveType.CAPTURE:
            self._halfmove_clock = 0
            value ^= zobrist.piece_key(captured, them, dst)
            self._toggle(them, captured, dst)
        elif kind is MoveType.DOUBLE:
            self._halfmove_clock = 0
            self._ep = dst.south() if us is Side.WHITE else dst.north()
            value ^= zobrist.ep_key(self._ep)
        elif kind is MoveType.ENPASSANT:
            self._halfmove_clock = 0
            victim = dst.south() if us is Side.WHITE else dst.north()
            value ^= zobrist.piece_key(Piece.PAWN, them, victim)
            self._toggle(them, Piece.PAWN, victim)
        elif kind in _CASTLE_ROOKS:
            rook_from, rook_to = _CASTLE_ROOKS[kind][us]
            value ^= zobrist.piece_key(Piece.ROOK, us, rook_from)
            value ^= zobrist.piece_key(Piece.ROOK, us, rook_to)
            self._toggle(us, Piece.ROOK, rook_from)
            self._toggle(us, Piece.ROOK, rook_to)
        elif kind is MoveType.PROMO:
            self._halfmove_clock = 0
            value ^= zobrist.piece_key(Piece.PAWN, us, dst)
            value ^= zobrist.piece_key(promo, us, dst)
            self._swap_kind(Piece.PAWN, promo, dst)
        else:
            self._halfmove_clock = 0
            value ^= zobrist.piece_key(captured, them, dst)
            value ^= zobrist.piece_key(Piece.PAWN, us, dst)
            value ^= zobrist.piece_key(promo, us, dst)
            self._swap_kind(Piece.PAWN, promo, dst)
            self._toggle(them, captured, dst)

        self._history.append(
            HistoryEntry(hash_old, move, ep_old, halfmove_old, castling_old)
        )

        for right in range(4):
            if _loses_right(right, src, dst):
                self._castling[right] = False
            if self._castling[right] != castling_old[right]:
                value ^= zobrist.castling_key(right)

        self._hash = value
        self._turn = them

    def undomove(self) -> None:
        """Take back the last move made with :meth:`makemove`."""
        if not self._history:
            raise IndexError("no move to undo")
        entry = self._history[-1]
        move = entry.move
        if move is None:
            raise ValueError("the last move is a null move; use undonull")
        self._history.pop()

        self._turn = self._turn.other()
        us = self._turn
        them = us.other()
        src, dst = move.from_square, move.to_square
        piece, captured, promo = move.piece, move.captured, move.promotion

        self._ep = entry.ep
        self._halfmove_clock = entry.halfmove_clock
        if us is Side.BLACK:
            self._fullmove_clock -= 1
        self._castling = list(entry.castling)
        self._hash = entry.hash

        self._toggle(us, piece, dst)
        self._toggle(us, piece, src)

        kind = move.move_type
        if kind is MoveType.CAPTURE:
            self._toggle(them, captured, dst)
        elif kind is MoveType.ENPASSANT:
            victim = dst.south() if us is Side.WHITE else dst.north()
            self._toggle(them, Piece.PAWN, victim)
        elif kind in _CASTLE_ROOKS:
            rook_from, rook_to = _CASTLE_ROOKS[kind][us]
            self._toggle(us, Piece.ROOK, rook_from)
            self._toggle(us, Piece.ROOK, rook_to)
        elif kind is MoveType.PROMO:
            self._swap_kind(Piece.PAWN, promo, dst)
        elif kind is MoveType.PROMO_CAPTURE:
            self._swap_kind(Piece.PAWN, promo, dst)
            self._toggle(them, captured, dst)

    def makenull(self) -> None:
        """Pass the turn to the other side without moving."""
        self._history.append(
            HistoryEntry(
                self._hash, None, self._ep, self._halfmove_clock, tuple(self._castling)
            )
        )
        if self._ep is not None:
            self._hash ^= zobrist.ep_key(self._ep)
        self._hash ^= zobrist.turn_key()
        self._turn = self._turn.other()
        self._ep = None
        self._halfmove_clock = 0

    def undonull(self) -> None:
        """Take back the last null move."""
        if not self._history:
            raise IndexError("no null move to undo")
        entry = self._history[-1]
        if entry.move is not None:
            raise ValueError("the last move is not a null move; use undomove")
        self._history.pop()
        self._hash = entry.hash
        self._ep = entry.ep
        self._halfmove_clock = entry.halfmove_clock
        self._turn = self._turn.other()

    def predict_hash(self, move: Move) -> int:
        """The hash the position would have after ``move``, without playing it."""
        us = self._turn
        them = us.other()
        src, dst = move.from_square, move.to_square
        piece, captured, promo = move.piece, move.captured, move.promotion

        value = self._hash ^ zobrist.turn_key()
        if self._ep is not None:
            value ^= zobrist.ep_key(self._ep)

        kind = move.move_type
        if kind in (MoveType.PROMO, MoveType.PROMO_CAPTURE):
            value ^= zobrist.piece_key(Piece.PAWN, us, src)
            value ^= zobrist.piece_key(promo, us, dst)
        else:
            value ^= zobrist.piece_key(piece, us, src)
            value ^= zobrist.piece_key(piece, us, dst)

        if kind in (MoveType.CAPTURE, MoveType.PROMO_CAPTURE):
            value ^= zobrist.piece_key(captured, them, dst)
        elif kind is MoveType.DOUBLE:
            value ^= zobrist.ep_key(dst)
        elif kind is MoveType.ENPASSANT:
            victim = dst.south() if us is Side.WHITE else dst.north()
            value ^= zobrist.piece_key(Piece.PAWN, them, victim)
        elif kind in _CASTLE_ROOKS:
            rook_from, rook_to = _CASTLE_ROOKS[kind][us]
            value ^= zobrist.piece_key(Piece.ROOK, us, rook_from)
            value ^= zobrist.piece_key(Piece.ROOK, us, rook_to)

        for right in range(4):
            if self._castling[right] and _loses_right(right, src, dst):
                value ^= zobrist.castling_key(right)
        return value

    def threefold(self) -> bool:
        """Whether the current position has occurred twice before."""
        if self._halfmove_clock < 8:
            return False
        repeats = 0
        limit = min(len(self._history), self._halfmove_clock)
        for back in range(2, limit + 1, 2):
            if self._history[-back].hash == self._hash:
                repeats += 1
                if repeats >= 2:
                    return True
        return False