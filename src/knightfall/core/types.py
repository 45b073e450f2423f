"""Square type alias and coordinate helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
    col 0 = file a, col 7 = file h

So ``(0, 0)`` is a8, ``(7, 4)`` is e1 and ``(4, 4)`` is e4.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` addresses a square on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``(7, 4)`` → ``'e1'``."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
