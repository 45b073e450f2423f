"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from knightfall.core.enums import CastlingSide
from knightfall.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Destination of a move plus its special-move flag.

    The source square is supplied alongside by the caller. At most one of
    ``en_passant`` and ``castling`` is set.
    """

    dest_row: int
    dest_col: int
    en_passant: bool = False
    castling: CastlingSide | None = None

    @property
    def dest(self) -> Square:
        return (self.dest_row, self.dest_col)

    def __str__(self) -> str:
        base = square_name(self.dest)
        if self.en_passant:
            return f"{base} e.p."
        if self.castling is not None:
            return f"{base} ({self.castling.value})"
        return base


@dataclass(frozen=True, slots=True)
class SourcedMove:
    """A :class:`Move` together with the square it starts from."""

    from_sq: Square
    move: Move

    @property
    def dest(self) -> Square:
        return self.move.dest

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.move.dest)}"
