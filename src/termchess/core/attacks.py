"""Attack and check detection by scanning the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.enums import Color, PieceType
from termchess.core.movement import PAWN_DIRECTION, is_pseudo_legal
from termchess.core.types import Square

if TYPE_CHECKING:
    from termchess.core.board import Board


def pawn_attacks(color: Color, from_sq: Square, target: Square) -> bool:
    """Whether a *color* pawn on *from_sq* attacks *target* diagonally."""
    direction = PAWN_DIRECTION[int(color)]
    return (
        target.row == from_sq.row + direction
        and abs(target.col - from_sq.col) == 1
    )


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns only count through their diagonal capture pattern. Every other
    piece attacks the squares it could reach pseudo-legally and move into,
    so a king attacks its eight neighbours.
    """
    enterable = board.different_side_or_empty(sq, by_color)
    for from_sq, piece in board.occupied(by_color):
        if piece.piece_type == PieceType.PAWN:
            if pawn_attacks(by_color, from_sq, sq):
                return True
            continue
        if enterable and is_pseudo_legal(board, from_sq, sq):
            return True
    return False


def find_king(board: Board, color: Color) -> Square | None:
    """First square (row-major) holding *color*'s king, or ``None``."""
    for sq, piece in board.occupied(color):
        if piece.piece_type == PieceType.KING:
            return sq
    return None


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a *color* king is never in check.
    """
    king_sq = find_king(board, color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
