"""Tests for the static evaluation."""

import pytest

from knightfall.core.board import Board
from knightfall.core.enums import Color, PieceType
from knightfall.core.notation import position_from_fen
from knightfall.engine.evaluation import PIECE_VALUES, evaluate, piece_square_bonus


class TestEvaluate:
    def test_initial_position_is_balanced(self) -> None:
        assert evaluate(Board.initial(), Color.WHITE) == 0
        assert evaluate(Board.initial(), Color.BLACK) == 0

    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "4k3/8/8/8/3r4/8/8/3QK3 w - - 0 1",
        ],
    )
    def test_symmetric(self, fen: str) -> None:
        board, _, _ = position_from_fen(fen)
        assert evaluate(board, Color.WHITE) == -evaluate(board, Color.BLACK)

    def test_extra_queen_dominates(self) -> None:
        board, _, _ = position_from_fen("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
        assert evaluate(board, Color.WHITE) > PIECE_VALUES[PieceType.ROOK]

    def test_central_pawn_beats_home_pawn(self) -> None:
        home, _, _ = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        center, _, _ = position_from_fen("4k3/8/8/8/4P3/8/8/4K3 w - - 0 1")
        assert evaluate(center, Color.WHITE) > evaluate(home, Color.WHITE)


class TestPieceSquareBonus:
    def test_black_reads_table_mirrored(self) -> None:
        # e4 for white and e5 for black are the same table cell.
        white = piece_square_bonus(PieceType.PAWN, Color.WHITE, 4, 4)
        black = piece_square_bonus(PieceType.PAWN, Color.BLACK, 3, 4)
        assert white == black == 20

    def test_knight_on_rim(self) -> None:
        assert piece_square_bonus(PieceType.KNIGHT, Color.WHITE, 0, 0) == -50
