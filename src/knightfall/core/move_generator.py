"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from knightfall.core.apply import apply_move
from knightfall.core.board import Board
from knightfall.core.enums import CastlingSide, Color, PieceType
from knightfall.core.move import Move, SourcedMove
from knightfall.core.piece import Piece
from knightfall.core.types import Square, in_bounds

# Offsets are (d_row, d_col). Their order fixes the order moves are produced
# in, which the search relies on for tie-breaking.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[tuple[int, int], ...] = QUEEN_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# castling side -> (king destination column, column the king passes, columns
# that must be empty)
_CASTLING_PATHS: dict[CastlingSide, tuple[int, int, tuple[int, ...]]] = {
    CastlingSide.KINGSIDE: (6, 5, (5, 6)),
    CastlingSide.QUEENSIDE: (2, 3, (1, 2, 3)),
}
_CASTLING_ROOK_COL: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 7,
    CastlingSide.QUEENSIDE: 0,
}


def _pawn_direction(color: Color) -> int:
    return -1 if color == Color.WHITE else 1


def _pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    The board is never modified; legality testing plays each candidate on
    a scratch copy. *en_passant* is the target square valid for this ply,
    if any.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: Square | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Geometrically valid moves for the piece on *sq*.

        Ignores whether the move leaves the mover's own king in check.
        Empty for an empty square.
        """
        piece = self._board[sq]
        if piece is None:
            return []
        return self._generate(sq, piece)

    def legal_moves(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves for *sq* that keep the mover's king safe."""
        piece = self._board[sq]
        if piece is None:
            return []

        board = self._board
        color = piece.color
        opponent = color.opposite
        legal: list[Move] = []
        append_legal = legal.append

        for move in self._generate(sq, piece):
            after = apply_move(board, sq, move)
            if MoveGenerator(after).is_in_check(color):
                continue
            if move.castling is not None:
                if self.is_in_check(color):
                    continue
                _, pass_col, _ = _CASTLING_PATHS[move.castling]
                if self.is_square_attacked((sq[0], pass_col), opponent):
                    continue
            append_legal(move)
        return legal

    def all_legal_moves(self, color: Color) -> list[SourcedMove]:
        """Every legal move of *color*, pieces scanned in row-major order."""
        moves: list[SourcedMove] = []
        for sq, _ in self._board.pieces(color):
            moves.extend(SourcedMove(sq, move) for move in self.legal_moves(sq))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        return any(self.legal_moves(sq) for sq, _ in self._board.pieces(color))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without such a king is reported as not in check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* among the pseudo-legal destinations of a *by_color* piece?

        Moves are generated without an en-passant target. A pawn therefore
        attacks the squares it could push to, and a diagonal only when an
        opposing piece stands on it. For an occupied *sq*, such as a king
        square, this is the ordinary notion of attack.
        """
        gen = self if self._en_passant is None else MoveGenerator(self._board)
        for from_sq, piece in self._board.pieces(by_color):
            if any(move.dest == sq for move in gen._generate(from_sq, piece)):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _generate(self, sq: Square, piece: Piece) -> list[Move]:
        moves: list[Move] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif pt == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
            if not piece.has_moved:
                self._gen_castling(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_DIRS[pt], moves)
        return moves

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        row, col = sq
        direction = _pawn_direction(color)
        one_row = row + direction

        if in_bounds(one_row, col) and board.is_empty((one_row, col)):
            moves.append(Move(one_row, col))
            two_row = row + 2 * direction
            if row == _pawn_start_row(color) and board.is_empty((two_row, col)):
                moves.append(Move(two_row, col))

        for dc in (-1, 1):
            cap_col = col + dc
            if not in_bounds(one_row, cap_col):
                continue
            target = board[(one_row, cap_col)]
            if target is not None:
                if target.color != color:
                    moves.append(Move(one_row, cap_col))
            elif self._en_passant == (one_row, cap_col):
                moves.append(Move(one_row, cap_col, en_passant=True))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if not in_bounds(r, c):
                continue
            target = board[(r, c)]
            if target is None or target.color != color:
                moves.append(Move(r, c))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq
        for dr, dc in directions:
            r, c = row + dr, col + dc
            while in_bounds(r, c):
                target = board[(r, c)]
                if target is None:
                    moves.append(Move(r, c))
                elif target.color != color:
                    moves.append(Move(r, c))
                    break
                else:
                    break
                r += dr
                c += dc

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        # Attack checks happen in legal_moves(); only geometry and
        # has_moved flags are tested here.
        board = self._board
        row, _ = king_sq
        for side in (CastlingSide.KINGSIDE, CastlingSide.QUEENSIDE):
            rook = board[(row, _CASTLING_ROOK_COL[side])]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != color
                or rook.has_moved
            ):
                continue
            dest_col, _, between = _CASTLING_PATHS[side]
            if all(board.is_empty((row, c)) for c in between):
                moves.append(Move(row, dest_col, castling=side))
