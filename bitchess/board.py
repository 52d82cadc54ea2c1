"""Board state: piece placement, side to move, castling rights and clocks."""

from __future__ import annotations

from . import movegen, zobrist
from .bitboard import RANK_1, Bitboard
from .move import MoveType
from .square import Square
from .types import PIECES, Piece, Side

STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Indices into the castling rights: white king side, white queen side,
# black king side, black queen side.
WHITE_KSC, WHITE_QSC, BLACK_KSC, BLACK_QSC = range(4)

_PIECE_LETTERS = {
    "p": Piece.PAWN,
    "n": Piece.KNIGHT,
    "b": Piece.BISHOP,
    "r": Piece.ROOK,
    "q": Piece.QUEEN,
    "k": Piece.KING,
}
_LETTER_OF = {piece: letter for letter, piece in _PIECE_LETTERS.items()}
_CASTLING_LETTERS = {"K": WHITE_KSC, "Q": WHITE_QSC, "k": BLACK_KSC, "q": BLACK_QSC}


class Board:
    """Piece placement and the game state needed to hash and query it."""

    def __init__(self, fen: str | None = None) -> None:
        self.clear()
        if fen is not None:
            self.set_fen(fen)

    def clear(self) -> None:
        """Empty the board and reset every piece of state."""
        self._colours = [Bitboard(), Bitboard()]
        self._pieces = [Bitboard() for _ in PIECES]
        self._halfmove_clock = 0
        self._fullmove_clock = 0
        self._ep: Square | None = None
        self._hash = 0
        self._castling = [False, False, False, False]
        self._turn = Side.WHITE

    def _set(self, square: Square, side: Side, piece: Piece) -> None:
        self._colours[side] = self._colours[side] | square
        self._pieces[piece] = self._pieces[piece] | square

    def set_fen(self, fen: str) -> None:
        """Load a position from FEN; ``"startpos"`` loads the initial position."""
        if fen == "startpos":
            fen = STARTPOS_FEN

        self.clear()
        fields = fen.split()
        if not fields:
            return

        index = 56
        for char in fields[0]:
            piece = _PIECE_LETTERS.get(char.lower())
            if piece is not None:
                side = Side.WHITE if char.isupper() else Side.BLACK
                self._set(Square(index), side, piece)
                index += 1
            elif char in "12345678":
                index += int(char)
            elif char == "/":
                index -= 16

        if len(fields) > 1:
            self._turn = Side.WHITE if fields[1] == "w" else Side.BLACK

        if len(fields) > 2:
            for char in fields[2]:
                right = _CASTLING_LETTERS.get(char)
                if right is not None:
                    self._castling[right] = True

        if len(fields) > 3 and fields[3] != "-":
            self._ep = Square.from_name(fields[3])

        if len(fields) > 4:
            self._halfmove_clock = int(fields[4])
        if len(fields) > 5:
            self._fullmove_clock = int(fields[5])

        self._hash = self.calculate_hash()

    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def ep(self) -> Square | None:
        """The en passant target square, or None."""
        return self._ep

    @property
    def hash(self) -> int:
        return self._hash

    @property
    def halfmoves(self) -> int:
        return self._halfmove_clock

    @property
    def fullmoves(self) -> int:
        return self._fullmove_clock

    def occupancy(self, key: Side | Piece) -> Bitboard:
        """Squares held by a side, or by pieces of one kind of either side."""
        if isinstance(key, Side):
            return self._colours[key]
        piece = Piece(key)
        if piece is Piece.NONE:
            raise ValueError("no occupancy for Piece.NONE")
        return self._pieces[piece]

    def pieces(self, side: Side, piece: Piece) -> Bitboard:
        return self.occupancy(Side(side)) & self.occupancy(Piece(piece))

    def occupied(self) -> Bitboard:
        return self._colours[Side.WHITE] | self._colours[Side.BLACK]

    def empty(self) -> Bitboard:
        return ~self.occupied()

    def king_position(self, side: Side) -> Square:
        return self.pieces(side, Piece.KING).lsb()

    def can_castle(self, side: Side, move_type: MoveType) -> bool:
        king_side = move_type is MoveType.KSC
        if side is Side.WHITE:
            return self._castling[WHITE_KSC if king_side else WHITE_QSC]
        return self._castling[BLACK_KSC if king_side else BLACK_QSC]

    def piece_on(self, square: Square) -> Piece:
        for piece in PIECES:
            if square in self._pieces[piece]:
                return piece
        return Piece.NONE

    def calculate_hash(self) -> int:
        """Compute the Zobrist hash of the board from scratch."""
        value = 0
        if self._turn is Side.BLACK:
            value ^= zobrist.turn_key()
        for side in Side:
            for piece in PIECES:
                for square in self.pieces(side, piece):
                    value ^= zobrist.piece_key(piece, side, square)
        for right, allowed in enumerate(self._castling):
            if allowed:
                value ^= zobrist.castling_key(right)
        if self._ep is not None:
            value ^= zobrist.ep_key(self._ep)
        return value

    def passed_pawns(self, side: Side | None = None) -> Bitboard:
        """Pawns of ``side`` (default: side to move) with no enemy pawn ahead."""
        side = self._turn if side is None else Side(side)
        mask = self.pieces(side.other(), Piece.PAWN)
        step = Bitboard.south if side is Side.WHITE else Bitboard.north
        mask |= step(mask).east()
        mask |= step(mask).west()
        for _ in range(5):
            mask |= step(mask)
        return self.pieces(side, Piece.PAWN) & ~mask

    def squares_attacked(self, side: Side) -> Bitboard:
        """Every square attacked by a piece of ``side``."""
        side = Side(side)
        occupied = self.occupied()
        pawns = self.pieces(side, Piece.PAWN)
        forward = pawns.north() if side is Side.WHITE else pawns.south()
        mask = forward.east() | forward.west()

        for square in self.pieces(side, Piece.KNIGHT):
            mask |= movegen.knight_moves(square)
        for square in self.pieces(side, Piece.BISHOP):
            mask |= movegen.bishop_moves(square, occupied)
        for square in self.pieces(side, Piece.ROOK):
            mask |= movegen.rook_moves(square, occupied)
        for square in self.pieces(side, Piece.QUEEN):
            mask |= movegen.queen_moves(square, occupied)
        mask |= movegen.king_moves(self.king_position(side))
        return mask

    def pinned(self, side: Side | None = None, square: Square | None = None) -> Bitboard:
        """Pieces of ``side`` pinned against ``square`` (default: that side's king).

        Pinning pieces are looked for among the pieces of the side not to move.
        """
        side = self._turn if side is None else Side(side)
        if square is None:
            square = self.king_position(side)

        occupied = self.occupied()
        own = self.occupancy(side)
        enemy = self._turn.other()
        before = movegen.rook_moves(square, occupied) | movegen.bishop_moves(square, occupied)
        result = Bitboard()

        sliders = (
            (movegen.bishop_moves, Piece.BISHOP),
            (movegen.rook_moves, Piece.ROOK),
        )
        for moves, slider in sliders:
            pinners = self.pieces(enemy, slider) | self.pieces(enemy, Piece.QUEEN)
            for candidate in moves(square, occupied) & own:
                blockers = occupied ^ candidate
                discovery = moves(square, blockers)
                if blockers & discovery & ~before & pinners:
                    result |= candidate
        return result

    def fiftymoves(self) -> bool:
        return self._halfmove_clock >= 100

    def __str__(self) -> str:
        rows = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                square = Square(rank * 8 + file)
                piece = self.piece_on(square)
                if piece is Piece.NONE:
                    row.append("-")
                    continue
                letter = _LETTER_OF[piece]
                row.append(letter.upper() if square in self._colours[Side.WHITE] else letter)
            rows.append("".join(row) + "\n")

        castling = "".join(
            letter
            for letter, right in _CASTLING_LETTERS.items()
            if self._castling[right]
        )
        ep = "-" if self._ep is None else str(self._ep)
        turn = "w" if self._turn is Side.WHITE else "b"
        return "".join(rows) + f"Castling: {castling}\nEP: {ep}\nTurn: {turn}"


__all__ = ["Board", "STARTPOS_FEN", "RANK_1"]