"""Tests for Board and Piece."""

import pytest

from knightfall.core.board import Board, initial_board
from knightfall.core.enums import Color, PieceType
from knightfall.core.piece import Piece
from knightfall.core.types import parse_square


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_black_back_rank_is_row_zero(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[(0, col)] == Piece(Color.BLACK, pt)
            assert board[(7, col)] == Piece(Color.WHITE, pt)

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[(1, col)] == Piece(Color.BLACK, PieceType.PAWN)
            assert board[(6, col)] == Piece(Color.WHITE, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None

    def test_nothing_has_moved(self) -> None:
        board = initial_board()
        pieces = list(board.squares())
        assert len(pieces) == 32
        assert not any(p.has_moved for _, p in pieces)


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[parse_square("e4")] = piece
        assert board[parse_square("e4")] == piece
        assert board.is_empty(parse_square("e2"))

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[parse_square("e1")] = None
        assert board != copy
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == (7, 4)
        assert board.find_king(Color.BLACK) == (0, 4)

    def test_find_king_missing(self) -> None:
        assert Board().find_king(Color.WHITE) is None

    def test_pieces_row_major(self) -> None:
        board = Board.initial()
        squares = [sq for sq, _ in board.pieces(Color.WHITE)]
        assert squares == sorted(squares)
        assert squares[0] == (6, 0)
        assert len(squares) == 16

    def test_repr(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestPiece:
    def test_moved_sets_flag_on_copy(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        moved = rook.moved()
        assert moved.has_moved
        assert not rook.has_moved

    def test_moved_is_monotonic(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK).moved()
        assert rook.moved().has_moved

    def test_promoted(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN, has_moved=True)
        assert pawn.promoted(PieceType.KNIGHT) == Piece(
            Color.BLACK, PieceType.KNIGHT, has_moved=True
        )

    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
