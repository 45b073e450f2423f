"""High-level chess rules: check, checkmate, stalemate, captured material."""

from __future__ import annotations

from collections import Counter

from knightfall.core.board import Board
from knightfall.core.enums import Color, GameStatus, PieceType
from knightfall.core.move_generator import MoveGenerator
from knightfall.core.types import Square


class Rules:
    """Static rule-checker over a board, side to move and en-passant target.

    Status is never stored; every query recomputes it from the position.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def game_status(
        board: Board,
        side_to_move: Color,
        en_passant: Square | None = None,
    ) -> GameStatus:
        """Classify the position for *side_to_move*."""
        gen = MoveGenerator(board, en_passant)
        in_check = gen.is_in_check(side_to_move)

        if gen.has_legal_move(side_to_move):
            return GameStatus.CHECK if in_check else GameStatus.PLAYING
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def is_checkmate(
        board: Board,
        side_to_move: Color,
        en_passant: Square | None = None,
    ) -> bool:
        return Rules.game_status(board, side_to_move, en_passant) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(
        board: Board,
        side_to_move: Color,
        en_passant: Square | None = None,
    ) -> bool:
        return Rules.game_status(board, side_to_move, en_passant) == GameStatus.STALEMATE


def captured_pieces(start: Board, current: Board) -> dict[Color, list[PieceType]]:
    """Pieces of each color present on *start* but missing from *current*.

    Promotions show up as the pawn missing and the new piece surplus;
    surplus pieces are ignored.
    """
    before = Counter((p.color, p.piece_type) for _, p in start.squares())
    after = Counter((p.color, p.piece_type) for _, p in current.squares())
    missing = before - after

    captured: dict[Color, list[PieceType]] = {Color.WHITE: [], Color.BLACK: []}
    for (color, piece_type), count in sorted(missing.items()):
        captured[color].extend([piece_type] * count)
    return captured
