"""Attack sets for each kind of piece."""

from __future__ import annotations

from .bitboard import Bitboard
from .square import Square

# (file step, rank step, moves towards higher square indices)
_DIRECTIONS_DIAGONAL = ((1, 1, True), (-1, 1, True), (1, -1, False), (-1, -1, False))
_DIRECTIONS_ORTHOGONAL = ((0, 1, True), (1, 0, True), (0, -1, False), (-1, 0, False))


def _ray(index: int, file_step: int, rank_step: int) -> int:
    file, rank = index % 8, index // 8
    mask = 0
    file += file_step
    rank += rank_step
    while 0 <= file < 8 and 0 <= rank < 8:
        mask |= 1 << (rank * 8 + file)
        file += file_step
        rank += rank_step
    return mask


def _ray_table(directions):
    return tuple(
        (tuple(_ray(i, df, dr) for i in range(64)), ascending)
        for df, dr, ascending in directions
    )


_BISHOP_RAYS = _ray_table(_DIRECTIONS_DIAGONAL)
_ROOK_RAYS = _ray_table(_DIRECTIONS_ORTHOGONAL)


def _slide(rays, index: int, occupied: int) -> int:
    attacks = 0
    for table, ascending in rays:
        ray = table[index]
        blockers = ray & occupied
        if blockers:
            if ascending:
                first = (blockers & -blockers).bit_length() - 1
            else:
                first = blockers.bit_length() - 1
            ray ^= table[first]
        attacks |= ray
    return attacks


def _knight_mask(square: Square) -> Bitboard:
    bb = Bitboard.from_square(square)
    return (
        bb.north().north().east()
        | bb.north().north().west()
        | bb.south().south().east()
        | bb.south().south().west()
        | bb.east().east().north()
        | bb.east().east().south()
        | bb.west().west().north()
        | bb.west().west().south()
    )


_KNIGHT_MASKS = tuple(_knight_mask(Square(i)) for i in range(64))
_KING_MASKS = tuple(Bitboard.from_square(Square(i)).adjacent() for i in range(64))


def knight_moves(square: Square) -> Bitboard:
    """Squares a knight on ``square`` attacks."""
    return _KNIGHT_MASKS[int(square)]


def bishop_moves(square: Square, occupied: Bitboard) -> Bitboard:
    """Squares a bishop attacks, stopping at (and including) the first blocker."""
    return Bitboard(_slide(_BISHOP_RAYS, int(square), int(occupied)))


def rook_moves(square: Square, occupied: Bitboard) -> Bitboard:
    """Squares a rook attacks, stopping at (and including) the first blocker."""
    return Bitboard(_slide(_ROOK_RAYS, int(square), int(occupied)))


def queen_moves(square: Square, occupied: Bitboard) -> Bitboard:
    """Squares a queen attacks given the occupied squares."""
    return bishop_moves(square, occupied) | rook_moves(square, occupied)


def king_moves(square: Square) -> Bitboard:
    """Squares a king on ``square`` attacks."""
    return _KING_MASKS[int(square)]