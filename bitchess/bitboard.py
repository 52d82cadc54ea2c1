"""64-bit sets of squares."""

from __future__ import annotations

from collections.abc import Iterator

from .square import Square

_FULL = (1 << 64) - 1
_FILE_A_MASK = 0x0101010101010101
_FILE_H_MASK = 0x8080808080808080


def _bits(value: Bitboard | Square) -> int:
    if isinstance(value, Bitboard):
        return value.mask
    if isinstance(value, Square):
        return 1 << value.index
    raise TypeError(f"expected Bitboard or Square, not {type(value).__name__}")


class Bitboard:
    """An immutable set of squares stored as a 64-bit mask."""

    __slots__ = ("_mask",)

    def __init__(self, mask: int = 0) -> None:
        self._mask = int(mask) & _FULL

    @classmethod
    def from_square(cls, square: Square) -> Bitboard:
        return cls(1 << int(square))

    @property
    def mask(self) -> int:
        return self._mask

    def __int__(self) -> int:
        return self._mask

    def __contains__(self, square: Square) -> bool:
        return bool((self._mask >> int(square)) & 1)

    def __iter__(self) -> Iterator[Square]:
        mask = self._mask
        while mask:
            low = mask & -mask
            yield Square(low.bit_length() - 1)
            mask ^= low

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bitboard):
            return self._mask == other._mask
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        return f"Bitboard(0x{self._mask:016x})"

    def __invert__(self) -> Bitboard:
        return Bitboard(~self._mask)

    def __and__(self, other: Bitboard | Square) -> Bitboard:
        try:
            return Bitboard(self._mask & _bits(other))
        except TypeError:
            return NotImplemented

    def __or__(self, other: Bitboard | Square) -> Bitboard:
        try:
            return Bitboard(self._mask | _bits(other))
        except TypeError:
            return NotImplemented

    def __xor__(self, other: Bitboard | Square) -> Bitboard:
        try:
            return Bitboard(self._mask ^ _bits(other))
        except TypeError:
            return NotImplemented

    def __lshift__(self, n: int) -> Bitboard:
        return Bitboard(self._mask << n)

    def __rshift__(self, n: int) -> Bitboard:
        return Bitboard(self._mask >> n)

    def count(self) -> int:
        """Number of squares in the set."""
        return bin(self._mask).count("1")

    def north(self) -> Bitboard:
        return Bitboard(self._mask << 8)

    def south(self) -> Bitboard:
        return Bitboard(self._mask >> 8)

    def east(self) -> Bitboard:
        return Bitboard((self._mask << 1) & ~_FILE_A_MASK)

    def west(self) -> Bitboard:
        return Bitboard((self._mask >> 1) & ~_FILE_H_MASK)

    def adjacent(self) -> Bitboard:
        """Squares one king step away from any square in the set."""
        north, south = self.north(), self.south()
        return (
            north
            | south
            | self.east()
            | self.west()
            | north.east()
            | north.west()
            | south.east()
            | south.west()
        )

    def lsb(self) -> Square:
        """Lowest square in the set."""
        if not self._mask:
            raise ValueError("lsb of an empty bitboard")
        return Square((self._mask & -self._mask).bit_length() - 1)

    def hsb(self) -> Square:
        """Highest square in the set."""
        if not self._mask:
            raise ValueError("hsb of an empty bitboard")
        return Square(self._mask.bit_length() - 1)

    def __str__(self) -> str:
        rows = []
        for rank in range(7, -1, -1):
            row = "".join(
                "1" if (self._mask >> (rank * 8 + file)) & 1 else "0" for file in range(8)
            )
            rows.append(row + "\n")
        return "".join(rows)


def _between_mask(i: int, j: int) -> int:
    a, b = Square(i), Square(j)
    dx = b.file - a.file
    dy = b.rank - a.rank
    if not (dx == 0 or dy == 0 or abs(dx) == abs(dy)):
        return 0
    step = ((dx > 0) - (dx < 0)) + 8 * ((dy > 0) - (dy < 0))
    mask = 0
    k = i
    while k != j:
        k += step
        mask |= 1 << k
    return mask & ~(1 << j)


_BETWEEN: tuple[tuple[Bitboard, ...], ...] = tuple(
    tuple(Bitboard(_between_mask(i, j)) for j in range(64)) for i in range(64)
)


def squares_between(sq1: Square, sq2: Square) -> Bitboard:
    """Squares strictly between two squares on a line; empty if not aligned."""
    return _BETWEEN[int(sq1)][int(sq2)]


FILE_A = Bitboard(0x0101010101010101)
FILE_B = Bitboard(0x0202020202020202)
FILE_C = Bitboard(0x0404040404040404)
FILE_D = Bitboard(0x0808080808080808)
FILE_E = Bitboard(0x1010101010101010)
FILE_F = Bitboard(0x2020202020202020)
FILE_G = Bitboard(0x4040404040404040)
FILE_H = Bitboard(0x8080808080808080)

RANK_1 = Bitboard(0x00000000000000FF)
RANK_2 = Bitboard(0x000000000000FF00)
RANK_3 = Bitboard(0x0000000000FF0000)
RANK_4 = Bitboard(0x00000000FF000000)
RANK_5 = Bitboard(0x000000FF00000000)
RANK_6 = Bitboard(0x0000FF0000000000)
RANK_7 = Bitboard(0x00FF000000000000)
RANK_8 = Bitboard(0xFF00000000000000)

FILES = (FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H)
RANKS = (RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8)
ADJACENT_FILES = (
    FILE_B,
    FILE_A | FILE_C,
    FILE_B | FILE_D,
    FILE_C | FILE_E,
    FILE_D | FILE_F,
    FILE_E | FILE_G,
    FILE_F | FILE_H,
    FILE_G,
)

LIGHT_SQUARES = Bitboard(0x55AA55AA55AA55AA)
DARK_SQUARES = Bitboard(0xAA55AA55AA55AA55)
EMPTY = Bitboard(0)
ALL_SQUARES = Bitboard(0xFFFFFFFFFFFFFFFF)
EDGE = Bitboard(0xFF818181818181FF)