"""Move application - pure board transforms."""

from __future__ import annotations

from knightfall.core.board import Board
from knightfall.core.enums import CastlingSide, Color, PieceType
from knightfall.core.move import Move
from knightfall.core.types import Square

# castling side -> (rook column before, rook column after)
_ROOK_HOPS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}


def apply_move(
    board: Board,
    from_sq: Square,
    move: Move,
    promotion: PieceType | None = None,
) -> Board:
    """Return a new board with *move* played from *from_sq*.

    *board* is left untouched. The moving piece (and a castling rook) is
    replaced by a copy flagged as moved. A pawn reaching the last row
    becomes *promotion*, or a queen when none is given.

    Only moves obtained from :meth:`MoveGenerator.legal_moves` are
    supported.
    """
    new_board = board.copy()
    piece = new_board[from_sq]
    assert piece is not None
    from_row, _ = from_sq
    to_row, to_col = move.dest

    if move.en_passant:
        captured_row = to_row + 1 if piece.color == Color.WHITE else to_row - 1
        new_board[(captured_row, to_col)] = None

    if move.castling is not None:
        rook_from, rook_to = _ROOK_HOPS[move.castling]
        rook = new_board[(from_row, rook_from)]
        assert rook is not None
        new_board[(from_row, rook_from)] = None
        new_board[(from_row, rook_to)] = rook.moved()

    placed = piece.moved()
    if piece.piece_type == PieceType.PAWN and to_row in (0, 7):
        placed = piece.promoted(promotion or PieceType.QUEEN)

    new_board[from_sq] = None
    new_board[move.dest] = placed
    return new_board


def next_en_passant(board: Board, from_sq: Square, move: Move) -> Square | None:
    """En-passant target created by playing *move* on *board*.

    Only a two-square pawn advance creates one: the square it passed over.
    *board* is the position before the move.
    """
    piece = board[from_sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return None
    from_row, from_col = from_sq
    if abs(move.dest_row - from_row) != 2:
        return None
    return ((from_row + move.dest_row) // 2, from_col)


def is_promotion_move(board: Board, from_sq: Square, dest: Square) -> bool:
    """Whether moving the piece on *from_sq* to *dest* promotes a pawn."""
    piece = board[from_sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    return dest[0] in (0, 7)
