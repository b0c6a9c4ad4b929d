"""FEN piece-placement parsing and serialization.

Only the first FEN field is handled: side to move is passed to the rules
engine separately and there is no castling, en passant or clock state.
"""

from __future__ import annotations

from termchess.core.board import Board
from termchess.core.piece import Piece
from termchess.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Build a :class:`Board` from a FEN placement (extra fields are ignored)."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    # FEN lists rank 8 first, which is row 0.
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialize the piece placement of *board* as a FEN field."""
    ranks: list[str] = []
    for row in range(8):
        text = ""
        empty = 0
        for col in range(8):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
