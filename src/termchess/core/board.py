"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from termchess.core.enums import Color, PieceType
from termchess.core.piece import Piece
from termchess.core.types import Square, all_squares

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of cells, each a :class:`Piece` or ``None``.

    Element access performs no legality checks. Reading or writing a
    square off the board raises :class:`IndexError`; the rules engine
    validates squares before touching the grid.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {tuple(sq)!r}")
        return self._cells[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {tuple(sq)!r}")
        self._cells[sq.row][sq.col] = piece

    def clear(self, sq: Square) -> None:
        """Empty a single square."""
        self[sq] = None

    # -- Query helpers ------------------------------------------------------

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def owned_by(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of *color*."""
        piece = self[sq]
        return piece is not None and piece.color == color

    def different_side_or_empty(self, sq: Square, color: Color) -> bool:
        """Whether *color* could move into *sq*: empty, or an enemy to capture."""
        piece = self[sq]
        return piece is None or piece.color != color

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, row-major.

        If *color* is given, only that side's pieces are yielded.
        """
        for sq in all_squares():
            piece = self._cells[sq.row][sq.col]
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield sq, piece

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent copy, safe to mutate for move simulation."""
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._cells):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
