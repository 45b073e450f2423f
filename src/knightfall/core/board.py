"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from knightfall.core.enums import Color, PieceType
from knightfall.core.piece import Piece
from knightfall.core.types import BOARD_SIZE, Square

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
    """64-square board indexed by ``(row, col)``.

    Rules code treats a board as a value: it is only written to while being
    built, and every move produces a fresh copy via :meth:`copy`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order (a8, b8, ..., h1)."""
        for row, rank in enumerate(self._grid):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """Squares and pieces of *color* in row-major order."""
        return [(sq, p) for sq, p in self.squares() if p.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if the board has none."""
        for sq, piece in self.squares():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [rank.copy() for rank in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, rank in enumerate(self._grid):
            cells = [str(p) if p else "." for p in rank]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def initial_board() -> Board:
    """Fresh standard setup."""
    return Board.initial()
