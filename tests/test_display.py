"""Tests for terminal board rendering."""

from termchess.core.board import Board
from termchess.core.notation import board_from_fen
from termchess.display import render_board


class TestRenderBoard:
    def test_starting_position(self, board: Board) -> None:
        lines = render_board(board).splitlines()
        assert lines[0] == ""
        assert lines[1] == "  +------------------------+"
        assert lines[2] == "8 | r  n  b  q  k  b  n  r |"
        assert lines[3] == "7 | p  p  p  p  p  p  p  p |"
        assert lines[5] == "5 |                        |"
        assert lines[9] == "1 | R  N  B  Q  K  B  N  R |"
        assert lines[10] == "  +------------------------+"
        assert lines[11] == "    a  b  c  d  e  f  g  h"

    def test_trailing_newline(self, empty_board: Board) -> None:
        assert render_board(empty_board).endswith("h\n")

    def test_unicode_glyphs(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3")
        text = render_board(board, unicode=True)
        assert "♚" in text
        assert "♔" in text
        assert "K" not in text.replace("♔", "")

    def test_rendering_does_not_mutate(self, board: Board) -> None:
        render_board(board)
        assert board == Board.initial()
