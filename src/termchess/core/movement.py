"""Per-piece movement geometry and path clearance (check safety ignored)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.enums import Color, PieceType
from termchess.core.types import Square

if TYPE_CHECKING:
    from termchess.core.board import Board

# [color] -> row delta of a single pawn step
PAWN_DIRECTION: tuple[int, int] = (-1, 1)
# [color] -> row from which a pawn may advance two squares
PAWN_START_ROW: tuple[int, int] = (6, 1)

_SLIDING_TYPES = frozenset((PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP))


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_straight(from_sq: Square, to_sq: Square) -> bool:
    """Same row or same column (and not the same square)."""
    if from_sq == to_sq:
        return False
    return from_sq.row == to_sq.row or from_sq.col == to_sq.col


def is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    d_row = to_sq.row - from_sq.row
    return d_row != 0 and abs(d_row) == abs(to_sq.col - from_sq.col)


def squares_between(from_sq: Square, to_sq: Square) -> list[Square]:
    """Squares strictly between two aligned squares, walking from *from_sq*.

    Returns an empty list if the squares do not share a rank, file or
    diagonal.
    """
    if not (is_straight(from_sq, to_sq) or is_diagonal(from_sq, to_sq)):
        return []
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)
    squares: list[Square] = []
    sq = from_sq.offset(step_row, step_col)
    while sq != to_sq:
        squares.append(sq)
        sq = sq.offset(step_row, step_col)
    return squares


def path_is_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Every square strictly between *from_sq* and *to_sq* is empty.

    The endpoints are never inspected. Unaligned squares have no path.
    """
    if not (is_straight(from_sq, to_sq) or is_diagonal(from_sq, to_sq)):
        return False
    return all(board.is_empty(sq) for sq in squares_between(from_sq, to_sq))


def has_line_geometry(piece_type: PieceType, from_sq: Square, to_sq: Square) -> bool:
    """Whether a sliding piece could travel between the squares on an empty board."""
    if piece_type == PieceType.ROOK:
        return is_straight(from_sq, to_sq)
    if piece_type == PieceType.BISHOP:
        return is_diagonal(from_sq, to_sq)
    if piece_type == PieceType.QUEEN:
        return is_straight(from_sq, to_sq) or is_diagonal(from_sq, to_sq)
    return False


def is_sliding(piece_type: PieceType) -> bool:
    return piece_type in _SLIDING_TYPES


# -- Piece rules ------------------------------------------------------------


def _king_move(from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq.row - from_sq.row)
    d_col = abs(to_sq.col - from_sq.col)
    return max(d_row, d_col) == 1


def _knight_move(from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq.row - from_sq.row) * abs(to_sq.col - from_sq.col) == 2


def _pawn_move(board: Board, color: Color, from_sq: Square, to_sq: Square) -> bool:
    direction = PAWN_DIRECTION[int(color)]
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    # Single push
    if d_col == 0 and d_row == direction:
        return board.is_empty(to_sq)

    # Double push from the starting row
    if d_col == 0 and d_row == 2 * direction:
        if from_sq.row != PAWN_START_ROW[int(color)]:
            return False
        return board.is_empty(from_sq.offset(direction, 0)) and board.is_empty(to_sq)

    # Diagonal capture
    if abs(d_col) == 1 and d_row == direction:
        target = board[to_sq]
        return target is not None and target.color != color

    return False


def is_pseudo_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Does the piece on *from_sq* move like that, with a clear path?

    Ignores check safety and does not look at who occupies *to_sq*, except
    for pawns, whose captures and pushes depend on the target square.
    Both squares must be valid; an empty origin is never pseudo-legal.
    """
    piece = board[from_sq]
    if piece is None:
        return False

    pt = piece.piece_type
    if pt == PieceType.KING:
        return _king_move(from_sq, to_sq)
    if pt == PieceType.KNIGHT:
        return _knight_move(from_sq, to_sq)
    if pt == PieceType.PAWN:
        return _pawn_move(board, piece.color, from_sq, to_sq)
    return has_line_geometry(pt, from_sq, to_sq) and path_is_clear(
        board, from_sq, to_sq
    )
