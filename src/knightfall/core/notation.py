"""FEN parsing and serialization, UCI-style move strings."""

from __future__ import annotations

from typing import NamedTuple

from knightfall.core.board import Board
from knightfall.core.enums import Color, PieceType
from knightfall.core.move import Move
from knightfall.core.piece import Piece
from knightfall.core.types import BOARD_SIZE, Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

# castling letter -> (king square, rook square)
_CASTLING_HOMES: dict[str, tuple[Square, Square]] = {
    "K": ((7, 4), (7, 7)),
    "Q": ((7, 4), (7, 0)),
    "k": ((0, 4), (0, 7)),
    "q": ((0, 4), (0, 0)),
}

_HOME_BOARD = Board.initial()


class FenPosition(NamedTuple):
    """What a FEN string describes that the rules engine needs."""

    board: Board
    side_to_move: Color
    en_passant: Square | None


def position_from_fen(fen: str) -> FenPosition:
    """Parse a FEN string.

    Only the placement field is mandatory; side to move defaults to white
    and castling to whatever the home squares allow. ``has_moved`` is
    derived: a piece is unmoved when it stands on a square its type starts
    on, except that kings and rooks follow the castling field when given.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    placement = parts[0]
    side_part = parts[1] if len(parts) > 1 else "w"
    castling_part = parts[2] if len(parts) > 2 else None
    ep_part = parts[3] if len(parts) > 3 else "-"

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                home = _HOME_BOARD[(row, col)]
                unmoved = (
                    home is not None
                    and home.color == piece.color
                    and home.piece_type == piece.piece_type
                )
                board[(row, col)] = Piece(piece.color, piece.piece_type, not unmoved)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    if castling_part is not None:
        _apply_castling_field(board, castling_part)

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_row = 2 if side == Color.WHITE else 5
        if ep[0] != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    return FenPosition(board, side, ep)


def _apply_castling_field(board: Board, castling_part: str) -> None:
    seen: set[str] = set()
    for ch in "" if castling_part == "-" else castling_part:
        if ch not in _CASTLING_HOMES or ch in seen:
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
        seen.add(ch)

    unmoved: set[Square] = set()
    for ch in seen:
        unmoved.update(_CASTLING_HOMES[ch])

    for sq, piece in list(board.squares()):
        if piece.piece_type not in (PieceType.KING, PieceType.ROOK):
            continue
        board[sq] = Piece(piece.color, piece.piece_type, sq not in unmoved)


def board_to_placement(board: Board) -> str:
    """Serialise piece placement (the first FEN field)."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def position_to_fen(
    board: Board,
    side_to_move: Color,
    en_passant: Square | None = None,
    fullmove_number: int = 1,
) -> str:
    """Serialise a position to FEN.

    Castling rights are read back from the ``has_moved`` flags. The
    halfmove clock is not tracked and is always written as 0.
    """
    castling_str = ""
    for ch, (king_sq, rook_sq) in _CASTLING_HOMES.items():
        color = Color.WHITE if ch.isupper() else Color.BLACK
        king = board[king_sq]
        rook = board[rook_sq]
        if (
            king is not None
            and king.piece_type == PieceType.KING
            and king.color == color
            and not king.has_moved
            and rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.has_moved
        ):
            castling_str += ch

    side_str = "w" if side_to_move == Color.WHITE else "b"
    ep_str = square_name(en_passant) if en_passant is not None else "-"
    return (
        f"{board_to_placement(board)} {side_str} {castling_str or '-'} "
        f"{ep_str} 0 {fullmove_number}"
    )


def move_to_uci(
    from_sq: Square,
    move: Move,
    promotion: PieceType | None = None,
) -> str:
    """Long-algebraic move string, e.g. ``e7e8q``."""
    base = f"{square_name(from_sq)}{square_name(move.dest)}"
    if promotion is not None:
        base += _PROMO_CHARS.get(promotion, "")
    return base
