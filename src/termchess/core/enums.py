"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color. White moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveRejection(IntEnum):
    """Why :meth:`Rules.check_move` refused a move."""

    INVALID_SQUARE = auto()
    EMPTY_SOURCE = auto()
    WRONG_SIDE = auto()
    OWN_PIECE_AT_TARGET = auto()
    ILLEGAL_GEOMETRY = auto()
    PATH_BLOCKED = auto()
    LEAVES_KING_IN_CHECK = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
