"""Tests for square names, FEN and UCI move strings."""

import pytest

from knightfall.core.board import Board
from knightfall.core.enums import CastlingSide, Color, PieceType
from knightfall.core.move import Move, SourcedMove
from knightfall.core.notation import (
    STARTING_FEN,
    board_to_placement,
    move_to_uci,
    position_from_fen,
    position_to_fen,
)
from knightfall.core.types import parse_square, square_name


class TestSquareNames:
    @pytest.mark.parametrize(
        "name, square",
        [("a8", (0, 0)), ("h8", (0, 7)), ("a1", (7, 0)), ("e1", (7, 4)), ("e4", (4, 4))],
    )
    def test_parse_and_name(self, name: str, square: tuple[int, int]) -> None:
        assert parse_square(name) == square
        assert square_name(square) == name

    @pytest.mark.parametrize("bad", ["", "e", "i1", "a9", "a0", "e44", "E4"])
    def test_invalid_names(self, bad: str) -> None:
        with pytest.raises(ValueError):
            parse_square(bad)


class TestFenParsing:
    def test_starting_position(self) -> None:
        board, side, ep = position_from_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE
        assert ep is None

    def test_placement_only(self) -> None:
        board, side, ep = position_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        assert board == Board.initial()
        assert side == Color.WHITE
        assert ep is None

    def test_black_to_move_with_target(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        _, side, ep = position_from_fen(fen)
        assert side == Color.BLACK
        assert ep == parse_square("e3")

    def test_off_home_pieces_count_as_moved(self) -> None:
        board, _, _ = position_from_fen("4k3/8/8/8/4P3/8/8/R3K3 w Q - 0 1")
        assert board[parse_square("e4")].has_moved
        assert not board[parse_square("a1")].has_moved
        assert not board[parse_square("e1")].has_moved
        assert board[parse_square("e8")].has_moved  # no black rights

    def test_castling_field_marks_rooks(self) -> None:
        board, _, _ = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert board[parse_square("a1")].has_moved
        assert not board[parse_square("h1")].has_moved
        assert not board[parse_square("a8")].has_moved
        assert board[parse_square("h8")].has_moved

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/9 w - - 0 1",
            "8/8/8/8/8/8/8/7 w - - 0 1",
            "8/8/8/8/8/8/8/44p w - - 0 1",
            "8/8/8/8/8/8/8/7x w - - 0 1",
            "8/8/8/8/8/8/8/8 x - - 0 1",
            "8/8/8/8/8/8/8/8 w KX - 0 1",
            "8/8/8/8/8/8/8/8 w KK - 0 1",
            "8/8/8/8/8/8/8/8 w - e4 0 1",
            "8/8/8/8/8/8/8/8 w - e3 0 1",
            "8/8/8/8/8/8/8/8 w - - 0 1 extra",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenWriting:
    def test_starting_round_trip(self) -> None:
        board, side, ep = position_from_fen(STARTING_FEN)
        assert position_to_fen(board, side, ep) == STARTING_FEN

    def test_placement(self) -> None:
        assert board_to_placement(Board.initial()) == STARTING_FEN.split()[0]

    def test_rights_follow_moved_flags(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 7"
        board, side, ep = position_from_fen(fen)
        assert position_to_fen(board, side, ep, fullmove_number=7) == fen

    def test_no_rights(self) -> None:
        board, side, ep = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert position_to_fen(board, side, ep).split()[2] == "-"

    def test_en_passant_written(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 3"
        board, side, ep = position_from_fen(fen)
        assert position_to_fen(board, side, ep, 3) == fen


class TestUci:
    def test_plain_move(self) -> None:
        assert move_to_uci((6, 4), Move(4, 4)) == "e2e4"

    def test_castle(self) -> None:
        move = Move(7, 6, castling=CastlingSide.KINGSIDE)
        assert move_to_uci((7, 4), move) == "e1g1"

    def test_promotion_suffix(self) -> None:
        assert move_to_uci((1, 0), Move(0, 0), PieceType.KNIGHT) == "a7a8n"

    def test_sourced_move_str(self) -> None:
        assert str(SourcedMove((1, 3), Move(3, 3))) == "d7d5"
