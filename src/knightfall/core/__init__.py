"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from knightfall.core import Board, MoveGenerator, Rules, apply_move, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    move = MoveGenerator(board).legal_moves(e2)[1]  # e2-e4
    board = apply_move(board, e2, move)
"""

from knightfall.core.apply import apply_move, is_promotion_move, next_en_passant
from knightfall.core.board import Board, initial_board
from knightfall.core.enums import CastlingSide, Color, GameStatus, PieceType
from knightfall.core.move import Move, SourcedMove
from knightfall.core.move_generator import MoveGenerator
from knightfall.core.notation import (
    STARTING_FEN,
    FenPosition,
    move_to_uci,
    position_from_fen,
    position_to_fen,
)
from knightfall.core.piece import Piece
from knightfall.core.rules import Rules, captured_pieces
from knightfall.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "SourcedMove",
    # Operations
    "apply_move",
    "captured_pieces",
    "initial_board",
    "is_promotion_move",
    "next_en_passant",
    # Notation
    "STARTING_FEN",
    "FenPosition",
    "move_to_uci",
    "position_from_fen",
    "position_to_fen",
]
