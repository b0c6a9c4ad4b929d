"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from termchess.core import Board, Color, Rules, parse_square

    board = Board.initial()
    Rules.attempt_move(board, parse_square("e2"), parse_square("e4"), Color.WHITE)
"""

from termchess.core.attacks import find_king, is_in_check, is_square_attacked
from termchess.core.board import Board
from termchess.core.enums import Color, MoveRejection, PieceType
from termchess.core.movement import is_pseudo_legal, path_is_clear
from termchess.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from termchess.core.piece import Piece
from termchess.core.rules import Rules
from termchess.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveRejection",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    # Geometry / attacks
    "find_king",
    "is_in_check",
    "is_pseudo_legal",
    "is_square_attacked",
    "path_is_clear",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
