"""Game state - board, turn, en passant, history and captured material."""

from __future__ import annotations

from dataclasses import dataclass, field

from knightfall.core.apply import apply_move, next_en_passant
from knightfall.core.board import Board
from knightfall.core.enums import Color, GameStatus, PieceType
from knightfall.core.move import Move
from knightfall.core.move_generator import MoveGenerator
from knightfall.core.notation import (
    STARTING_FEN,
    move_to_uci,
    position_from_fen,
    position_to_fen,
)
from knightfall.core.piece import Piece
from knightfall.core.rules import Rules, captured_pieces
from knightfall.core.types import Square
from knightfall.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    piece_type: PieceType
    from_sq: Square
    move: Move
    notation: str
    fen_after: str
    status_after: GameStatus
    captured: Piece | None = None
    promotion: PieceType | None = None


@dataclass
class PendingPromotion:
    """A pawn move waiting for the player to pick the promotion piece."""

    from_sq: Square
    move: Move
    color: Color


@dataclass
class GameState:
    """Everything that persists between moves of one game.

    The rules engine is stateless; this class owns the board, whose turn
    it is, the en-passant target and the history. No threading, no UI.
    """

    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    en_passant: Square | None = field(default=None, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    winner: Color | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    pending_promotion: PendingPromotion | None = field(default=None, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    _start_board: Board = field(init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self._load_start()
        self._start_board = self.board.copy()
        self.phase = GamePhase.AWAITING_MOVE
        self.winner = None
        self.pending_promotion = None
        self.move_history.clear()
        self._refresh_status()

    # ── Move application ─────────────────────────────────────────────────

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the side to move's piece on *sq*."""
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.board, self.en_passant).legal_moves(sq)

    def apply_move(
        self,
        from_sq: Square,
        move: Move,
        promotion: PieceType | None = None,
    ) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        board = self.board
        piece = board[from_sq]
        assert piece is not None

        captured = board[move.dest]
        if move.en_passant:
            captured = board[(from_sq[0], move.dest_col)]

        promoted_to: PieceType | None = None
        if piece.piece_type == PieceType.PAWN and move.dest_row in (0, 7):
            promoted_to = promotion or PieceType.QUEEN

        self.board = apply_move(board, from_sq, move, promoted_to)
        self.en_passant = next_en_passant(board, from_sq, move)
        self.side_to_move = piece.color.opposite
        self.pending_promotion = None
        self._refresh_status()

        record = MoveRecord(
            color=piece.color,
            piece_type=piece.piece_type,
            from_sq=from_sq,
            move=move,
            notation=move_to_uci(from_sq, move, promoted_to),
            fen_after=position_to_fen(
                self.board,
                self.side_to_move,
                self.en_passant,
                (self.ply_count + 1) // 2 + 1,
            ),
            status_after=self.status,
            captured=captured,
            promotion=promoted_to,
        )
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move by replaying the rest of the history.

        Returns the undone record, or None if there is nothing to undo.
        """
        if not self.move_history:
            return None

        undone = self.move_history.pop()
        replay = list(self.move_history)
        self.move_history.clear()
        self._load_start()
        for record in replay:
            self.apply_move(record.from_sq, record.move, record.promotion)
        if not replay:
            self._refresh_status()

        self.pending_promotion = None
        return undone

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.winner = color.opposite
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_number(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    @property
    def captured(self) -> dict[Color, list[PieceType]]:
        """Pieces of each color taken off the board so far."""
        return captured_pieces(self._start_board, self.board)

    # ── Internal ─────────────────────────────────────────────────────────

    def _load_start(self) -> None:
        start = position_from_fen(self.start_fen)
        self.board = start.board
        self.side_to_move = start.side_to_move
        self.en_passant = start.en_passant

    def _refresh_status(self) -> None:
        self.status = Rules.game_status(self.board, self.side_to_move, self.en_passant)
        if self.status == GameStatus.CHECKMATE:
            self.winner = self.side_to_move.opposite
            self.phase = GamePhase.GAME_OVER
        elif self.status == GameStatus.STALEMATE:
            self.winner = None
            self.phase = GamePhase.GAME_OVER
        else:
            self.winner = None
            self.phase = GamePhase.AWAITING_MOVE
