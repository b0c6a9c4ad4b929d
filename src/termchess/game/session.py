"""Game session — the board plus whose turn it is."""

from __future__ import annotations

from dataclasses import dataclass, field

from termchess.core.board import Board
from termchess.core.enums import Color, MoveRejection
from termchess.core.notation import board_from_fen
from termchess.core.rules import Rules
from termchess.core.types import Square


@dataclass
class GameSession:
    """Two players alternating moves on one board.

    The session owns the only live :class:`Board`; moves go through
    :class:`Rules` and the turn passes only when a move is applied.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    ply_count: int = field(default=0, init=False)
    last_rejection: MoveRejection | None = field(default=None, init=False)

    @classmethod
    def from_fen(cls, fen: str, side_to_move: Color = Color.WHITE) -> GameSession:
        return cls(board=board_from_fen(fen), side_to_move=side_to_move)

    def reset(self) -> None:
        """Back to the starting position with white to move."""
        self.board = Board.initial()
        self.side_to_move = Color.WHITE
        self.ply_count = 0
        self.last_rejection = None

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Try the move for the side to move; on success the turn passes."""
        self.last_rejection = Rules.play_move(
            self.board, from_sq, to_sq, self.side_to_move
        )
        if self.last_rejection is not None:
            return False

        self.side_to_move = self.side_to_move.opposite
        self.ply_count += 1
        return True

    @property
    def in_check(self) -> bool:
        """Whether the side to move is currently in check."""
        return Rules.is_in_check(self.board, self.side_to_move)
