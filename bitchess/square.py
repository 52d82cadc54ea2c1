"""Board squares."""

from __future__ import annotations

from dataclasses import dataclass

_FILE_NAMES = "abcdefgh"
_RANK_NAMES = "12345678"


@dataclass(frozen=True, order=True)
class Square:
    """A square on the board, numbered 0 (a1) to 63 (h8)."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"square index must be an int, not {self.index!r}")
        if not 0 <= self.index < 64:
            raise ValueError(f"square index out of range: {self.index}")

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse a square name such as ``"e4"``."""
        if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
            raise ValueError(f"invalid square name: {name!r}")
        return cls(_RANK_NAMES.index(name[1]) * 8 + _FILE_NAMES.index(name[0]))

    @property
    def file(self) -> int:
        return self.index % 8

    @property
    def rank(self) -> int:
        return self.index // 8

    @property
    def light(self) -> bool:
        return (self.rank + self.file) % 2 == 1

    @property
    def dark(self) -> bool:
        return not self.light

    def flip(self) -> Square:
        """Mirror the square vertically."""
        return Square(self.index ^ 56)

    def north(self) -> Square:
        return Square(self.index + 8)

    def south(self) -> Square:
        return Square(self.index - 8)

    def east(self) -> Square:
        return Square(self.index + 1)

    def west(self) -> Square:
        return Square(self.index - 1)

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return _FILE_NAMES[self.file] + _RANK_NAMES[self.rank]


SQUARES: tuple[Square, ...] = tuple(Square(i) for i in range(64))

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]