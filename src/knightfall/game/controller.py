"""GameController - the central orchestrator of a chess game.

Coordinates: Players, GameState, the rules engine and, for AI turns, an
engine. Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from knightfall.core.apply import is_promotion_move
from knightfall.core.enums import Color, PieceType
from knightfall.core.move import Move, SourcedMove
from knightfall.core.types import Square, square_name
from knightfall.engine.search import IEngine
from knightfall.game.interfaces import GamePhase, IPlayer
from knightfall.game.player import AIPlayer
from knightfall.game.state import GameState, MoveRecord, PendingPromotion

_LOGGER = logging.getLogger(__name__)

_PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameState], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, runs the promotion
    prompt, switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). AI results computed elsewhere come back through
    :meth:`submit_move`.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        fen: str | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(fen)

        if self._state.is_game_over:
            self._emit_game_over()
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def select(self, sq: Square) -> list[Move]:
        """Legal moves for the piece a human player picked up on *sq*."""
        cp = self.current_player
        if self._state.phase != GamePhase.AWAITING_MOVE or cp is None:
            return []
        if not cp.is_human:
            return []
        return self._state.legal_moves_from(sq)

    def submit_move(self, from_sq: Square, move: Move) -> bool:
        """Submit a move. Returns True if legal and accepted.

        A human pawn move onto the last rank is only parked: the game waits
        in ``AWAITING_PROMOTION`` until :meth:`choose_promotion`. AI
        promotions always become a queen.
        """
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if move not in self._state.legal_moves_from(from_sq):
            _LOGGER.debug(
                "Rejected illegal move %s%s",
                square_name(from_sq),
                square_name(move.dest),
            )
            return False

        cp = self.current_player
        if is_promotion_move(self._state.board, from_sq, move.dest):
            if cp is not None and cp.is_human:
                self._state.pending_promotion = PendingPromotion(
                    from_sq, move, self._state.side_to_move
                )
                self._state.phase = GamePhase.AWAITING_PROMOTION
                self._emit_phase(GamePhase.AWAITING_PROMOTION)
                return True
            self._commit(from_sq, move, PieceType.QUEEN)
            return True

        self._commit(from_sq, move, None)
        return True

    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Finish a parked promotion with the chosen piece."""
        pending = self._state.pending_promotion
        if pending is None or self._state.phase != GamePhase.AWAITING_PROMOTION:
            return False
        if piece_type not in _PROMOTION_CHOICES:
            return False
        self._commit(pending.from_sq, pending.move, piece_type)
        return True

    def cancel_promotion(self) -> None:
        """Drop a parked promotion; the same player moves again."""
        if self._state.pending_promotion is None:
            return
        self._state.pending_promotion = None
        self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._cancel_ai()
        self._state.resign(color)
        self._emit_game_over()

    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
        if self._state.is_game_over or not self._state.move_history:
            return False

        self._cancel_ai()
        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    def play_engine_move(self, engine: IEngine) -> SourcedMove | None:
        """Let *engine* play for the AI whose turn it is (blocking).

        Returns the move played, or None if it is not an AI turn or the AI
        has no legal move.
        """
        cp = self.current_player
        if not isinstance(cp, AIPlayer) or self._state.is_game_over:
            return None

        state = self._state
        choice = engine.best_move(
            state.board, state.side_to_move, state.en_passant, cp.difficulty
        )
        if choice is None:
            return None
        if not self.submit_move(choice.from_sq, choice.move):
            return None
        return choice

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, from_sq: Square, move: Move, promotion: PieceType | None) -> None:
        record = self._state.apply_move(from_sq, move, promotion)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over()
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state)

    def _cancel_ai(self) -> None:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        state = self._state
        _LOGGER.info(
            "Game over: %s, winner %s",
            state.status.value,
            state.winner if state.winner is not None else "none",
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
