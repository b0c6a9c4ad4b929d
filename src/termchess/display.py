"""Plain-text board rendering for the terminal."""

from __future__ import annotations

from termchess.core.board import Board
from termchess.core.types import FILES, Square

_FRAME = "  +------------------------+"


def render_board(board: Board, unicode: bool = False) -> str:
    """Framed 8x8 grid, rank 8 at the top, file labels underneath.

    Empty squares are blank. With *unicode* the pieces are drawn as chess
    glyphs instead of letters.
    """
    lines = ["", _FRAME]
    for row in range(8):
        cells = []
        for col in range(8):
            piece = board[Square(row, col)]
            if piece is None:
                ch = " "
            else:
                ch = piece.symbol if unicode else str(piece)
            cells.append(f" {ch} ")
        lines.append(f"{8 - row} |{''.join(cells)}|")
    lines.append(_FRAME)
    lines.append("    " + "  ".join(FILES))
    return "\n".join(lines) + "\n"
