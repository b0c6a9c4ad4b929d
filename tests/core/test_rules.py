"""Tests for Rules: move validation, self-check guard, apply."""

import logging

import pytest

from termchess.core.board import Board
from termchess.core.enums import Color, MoveRejection, PieceType
from termchess.core.notation import board_from_fen, board_to_fen
from termchess.core.piece import Piece
from termchess.core.rules import Rules
from termchess.core.types import (
    A6, A7, D1, D5, D8, E1, E2, E4, E5, E7, F1, H5,
    Square,
    parse_square,
)


def _play(board: Board, text: str, turn: Color) -> bool:
    return Rules.attempt_move(
        board, parse_square(text[:2]), parse_square(text[2:]), turn
    )


class TestScenarios:
    def test_e2e4_from_start(self, board: Board) -> None:
        assert Rules.attempt_move(board, E2, E4, Color.WHITE)
        assert board.is_empty(E2)
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_e2e5_from_start(self, board: Board) -> None:
        assert not Rules.attempt_move(board, E2, E5, Color.WHITE)
        assert board == Board.initial()

    def test_wrong_side_piece(self, board: Board) -> None:
        assert not Rules.attempt_move(board, A7, A6, Color.WHITE)
        assert board == Board.initial()

    def test_queen_after_open_game(self, board: Board) -> None:
        assert _play(board, "e2e4", Color.WHITE)
        assert _play(board, "e7e5", Color.BLACK)
        assert not Rules.attempt_move(board, D1, D8, Color.WHITE)
        assert Rules.attempt_move(board, D1, H5, Color.WHITE)
        assert board[H5] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_capture_overwrites_target(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/4P3/8/8/4K3")
        assert _play(board, "e4d5", Color.WHITE)
        assert board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert len(list(board.occupied(Color.BLACK))) == 1


class TestPlayMove:
    def test_applies_and_returns_none(self, board: Board) -> None:
        assert Rules.play_move(board, E2, E4, Color.WHITE) is None
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_returns_reason_without_mutating(self, board: Board) -> None:
        assert Rules.play_move(board, A7, A6, Color.WHITE) == MoveRejection.WRONG_SIDE
        assert board == Board.initial()


class TestRejectionReasons:
    @pytest.mark.parametrize(
        ("from_sq", "to_sq", "turn", "reason"),
        [
            (Square(8, 4), E4, Color.WHITE, MoveRejection.INVALID_SQUARE),
            (E2, Square(-1, 4), Color.WHITE, MoveRejection.INVALID_SQUARE),
            (E4, E5, Color.WHITE, MoveRejection.EMPTY_SOURCE),
            (E7, E5, Color.WHITE, MoveRejection.WRONG_SIDE),
            (E1, E2, Color.WHITE, MoveRejection.OWN_PIECE_AT_TARGET),
            (E2, E5, Color.WHITE, MoveRejection.ILLEGAL_GEOMETRY),
            (D1, parse_square("d3"), Color.WHITE, MoveRejection.PATH_BLOCKED),
            (F1, parse_square("c4"), Color.WHITE, MoveRejection.PATH_BLOCKED),
        ],
    )
    def test_reason(
        self,
        board: Board,
        from_sq: Square,
        to_sq: Square,
        turn: Color,
        reason: MoveRejection,
    ) -> None:
        assert Rules.check_move(board, from_sq, to_sq, turn) == reason
        assert not Rules.attempt_move(board, from_sq, to_sq, turn)
        assert board == Board.initial()

    def test_legal_move_has_no_reason(self, board: Board) -> None:
        assert Rules.check_move(board, E2, E4, Color.WHITE) is None
        assert board == Board.initial()  # check_move never mutates

    def test_rejection_is_logged(
        self, board: Board, caplog: pytest.LogCaptureFixture
    ) -> None:
        Rules.attempt_move(board, E2, E5, Color.WHITE)
        assert any(
            r.levelno == logging.DEBUG and "illegal geometry" in r.getMessage()
            for r in caplog.records
        )


class TestSelfCheckGuard:
    def test_pinned_rook_on_file(self) -> None:
        # White rook on e2 pinned by the black rook on e8.
        board = board_from_fen("4r2k/8/8/8/8/8/4R3/4K3")
        before = board_to_fen(board)
        assert Rules.check_move(
            board, E2, parse_square("d2"), Color.WHITE
        ) == MoveRejection.LEAVES_KING_IN_CHECK
        assert board_to_fen(board) == before
        # Sliding along the pin line is fine, and so is capturing the pinner.
        assert Rules.check_move(board, E2, E5, Color.WHITE) is None
        assert Rules.attempt_move(board, E2, parse_square("e8"), Color.WHITE)

    def test_pinned_knight_on_diagonal(self) -> None:
        board = board_from_fen("7k/8/8/1b6/8/3N4/8/5K2")
        knight = parse_square("d3")
        for target in ("b4", "c5", "e5", "f4", "f2", "b2", "c1", "e1"):
            assert not Rules.attempt_move(
                board, knight, parse_square(target), Color.WHITE
            ), target
        assert board[knight] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_must_answer_check(self) -> None:
        board = board_from_fen("4r2k/8/8/8/8/8/P7/4K3")
        assert not _play(board, "a2a3", Color.WHITE)
        assert _play(board, "e1d1", Color.WHITE)

    def test_king_cannot_step_into_attack(self) -> None:
        board = board_from_fen("3r3k/8/8/8/8/8/8/4K3")
        assert not _play(board, "e1d2", Color.WHITE)
        assert _play(board, "e1f2", Color.WHITE)

    def test_kings_cannot_approach_each_other(self) -> None:
        board = board_from_fen("8/8/8/4k3/8/4K3/8/8")
        assert not _play(board, "e3e4", Color.WHITE)
        assert not _play(board, "e3d4", Color.WHITE)
        assert not _play(board, "e5f4", Color.BLACK)
        assert _play(board, "e3e2", Color.WHITE)

    def test_king_may_capture_unprotected_attacker(self) -> None:
        board = board_from_fen("7k/8/8/8/8/8/4q3/4K3")
        assert _play(board, "e1e2", Color.WHITE)

    def test_king_may_not_capture_protected_attacker(self) -> None:
        board = board_from_fen("7k/8/8/8/8/6n1/4q3/4K3")
        assert not _play(board, "e1e2", Color.WHITE)

    def test_no_king_means_no_guard(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/4R3/8")
        assert _play(board, "e2d2", Color.WHITE)


class TestKnightJumps:
    def test_knight_move_through_pieces(self, board: Board) -> None:
        assert _play(board, "g1f3", Color.WHITE)
        assert _play(board, "b8c6", Color.BLACK)

    def test_knight_cannot_land_on_own_piece(self, board: Board) -> None:
        assert not _play(board, "g1e2", Color.WHITE)


class TestPawnDoubleStep:
    def test_second_double_step_is_illegal(self, board: Board) -> None:
        assert _play(board, "e2e3", Color.WHITE)
        assert not _play(board, "e3e5", Color.WHITE)

    def test_black_double_step(self, board: Board) -> None:
        assert _play(board, "d7d5", Color.BLACK)

    def test_double_step_over_piece(self, board: Board) -> None:
        assert _play(board, "g1f3", Color.WHITE)
        assert not _play(board, "f2f4", Color.WHITE)


class TestInCheck:
    def test_delegates_to_attack_scan(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/8/4K3")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)
