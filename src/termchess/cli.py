"""Interactive terminal front end: read moves, print the board."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from termchess.core.enums import Color
from termchess.core.types import Square, parse_square
from termchess.display import render_board
from termchess.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

_QUIT_COMMANDS = frozenset(("quit", "exit"))
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_move_text(text: str) -> tuple[Square, Square]:
    """Parse ``"e2e4"`` or ``"e2 e4"`` into a pair of squares."""
    text = text.strip()
    if len(text) == 4:
        tokens = [text[:2], text[2:]]
    else:
        tokens = text.split()
    if len(tokens) != 2:
        raise ValueError(f"Invalid move text: {text!r}")
    return parse_square(tokens[0]), parse_square(tokens[1])


def _side_label(color: Color) -> str:
    return "White" if color == Color.WHITE else "Black"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchess",
        description="Two-player chess in the terminal.",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="draw pieces as Unicode chess glyphs instead of letters",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=_LOG_LEVELS,
        help="logging threshold for diagnostics on stderr (default: %(default)s)",
    )
    return parser


def run_loop(
    session: GameSession,
    stdin: TextIO,
    stdout: TextIO,
    unicode: bool = False,
) -> None:
    """Prompt for moves until the input ends or the player quits."""
    stdout.write("Welcome to Simple Terminal Chess\n")
    stdout.write("Enter moves like e2e4 or e2 e4. Type 'quit' to exit.\n")

    while True:
        stdout.write(render_board(session.board, unicode=unicode) + "\n")
        stdout.write(f"{_side_label(session.side_to_move)} to move > ")
        stdout.flush()

        line = stdin.readline()
        if not line:
            break
        text = line.strip()
        if text in _QUIT_COMMANDS:
            break
        if not text:
            continue

        try:
            from_sq, to_sq = parse_move_text(text)
        except ValueError:
            _LOGGER.info("Unparsable input %r", text)
            stdout.write("Invalid input.\n")
            continue

        if not session.submit_move(from_sq, to_sq):
            _LOGGER.info("Illegal move %s: %s", text, session.last_rejection)
            stdout.write("Illegal move.\n")

    stdout.write("Goodbye!\n")


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Console entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    session = GameSession()
    _LOGGER.info("New game, %s to move", session.side_to_move)
    run_loop(
        session,
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
        unicode=args.unicode,
    )
    return 0
