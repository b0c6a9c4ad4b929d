"""Move legality and application: simulate on a copy, then commit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termchess.core.attacks import is_in_check
from termchess.core.enums import Color, MoveRejection
from termchess.core.movement import has_line_geometry, is_pseudo_legal, is_sliding
from termchess.core.types import Square

if TYPE_CHECKING:
    from termchess.core.board import Board

_LOGGER = logging.getLogger(__name__)


def _relocate(board: Board, from_sq: Square, to_sq: Square) -> None:
    """Raw move: whatever stood on *to_sq* is overwritten."""
    board[to_sq] = board[from_sq]
    board.clear(from_sq)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Legality never depends on anything but the board and the side to move:
    there is no castling, en passant or promotion state to consult.
    """

    @staticmethod
    def check_move(
        board: Board, from_sq: Square, to_sq: Square, turn: Color
    ) -> MoveRejection | None:
        """Return why *turn* may not play *from_sq* -> *to_sq*, or ``None``.

        The board is never modified.
        """
        if not (from_sq.is_valid and to_sq.is_valid):
            return MoveRejection.INVALID_SQUARE

        piece = board[from_sq]
        if piece is None:
            return MoveRejection.EMPTY_SOURCE
        if piece.color != turn:
            return MoveRejection.WRONG_SIDE
        if not board.different_side_or_empty(to_sq, turn):
            return MoveRejection.OWN_PIECE_AT_TARGET

        if not is_pseudo_legal(board, from_sq, to_sq):
            if is_sliding(piece.piece_type) and has_line_geometry(
                piece.piece_type, from_sq, to_sq
            ):
                return MoveRejection.PATH_BLOCKED
            return MoveRejection.ILLEGAL_GEOMETRY

        trial = board.copy()
        _relocate(trial, from_sq, to_sq)
        if is_in_check(trial, turn):
            return MoveRejection.LEAVES_KING_IN_CHECK

        return None

    @staticmethod
    def play_move(
        board: Board, from_sq: Square, to_sq: Square, turn: Color
    ) -> MoveRejection | None:
        """Validate once and, if legal, apply the move to *board*.

        Returns ``None`` after mutating *board* in place, otherwise the
        rejection reason with the board untouched.
        """
        rejection = Rules.check_move(board, from_sq, to_sq, turn)
        if rejection is not None:
            _LOGGER.debug(
                "Rejected %s %s -> %s: %s", turn, from_sq, to_sq, rejection
            )
            return rejection

        captured = board[to_sq]
        _relocate(board, from_sq, to_sq)
        if captured is not None:
            _LOGGER.debug(
                "Applied %s %s -> %s, captured %s", turn, from_sq, to_sq, captured
            )
        else:
            _LOGGER.debug("Applied %s %s -> %s", turn, from_sq, to_sq)
        return None

    @staticmethod
    def attempt_move(
        board: Board, from_sq: Square, to_sq: Square, turn: Color
    ) -> bool:
        """Apply the move if it is legal for *turn*.

        Returns ``True`` after mutating *board* in place; on ``False`` the
        board is untouched.
        """
        return Rules.play_move(board, from_sq, to_sq, turn) is None

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)
