"""Square type and coordinate helpers.

Board layout (row-major, rank 8 first):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

So ``a8`` is ``Square(0, 0)`` and ``h1`` is ``Square(7, 7)``.
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"
RANKS = "12345678"


class Square(NamedTuple):
    """A (row, col) pair. May lie off the board; check :attr:`is_valid`."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < 8 and 0 <= self.col < 8

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if not self.is_valid:
            return f"({self.row}, {self.col})"
        return square_name(self)


def is_valid_square(sq: Square) -> bool:
    """Whether both coordinates of *sq* lie in [0, 7]."""
    return sq.is_valid


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' -> Square(6, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), FILES.index(name[0]))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(6, 4) -> 'e2'."""
    if not sq.is_valid:
        raise ValueError(f"Square off the board: {tuple(sq)!r}")
    return FILES[sq.col] + str(8 - sq.row)


def all_squares() -> list[Square]:
    """All 64 squares in row-major order (a8 first, h1 last)."""
    return [Square(row, col) for row in range(8) for col in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
