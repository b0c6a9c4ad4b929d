"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging

import pytest

from termchess.core.board import Board


@pytest.fixture
def board() -> Board:
    """A fresh board in the starting position."""
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture engine diagnostics so tests can assert on them."""
    caplog.set_level(logging.DEBUG, logger="termchess")
