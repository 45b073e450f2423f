"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from knightfall.core.board import Board
from knightfall.engine.minimax import MinimaxEngine
from knightfall.engine.search import Difficulty, EngineSettings, IEngine

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and call :meth:`request_move` through a queued
    signal so the search never blocks the UI thread. The search itself
    cannot be interrupted: :meth:`cancel` only makes the worker drop the
    result of the request in flight.
    """

    best_move_ready = pyqtSignal(int, object, object, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_difficulty")

    def __init__(
        self,
        *,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        settings: EngineSettings | None = None,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = engine or MinimaxEngine(settings)
        self._difficulty = Difficulty.parse(difficulty)
        self._cancel_event = threading.Event()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, object, int)
    def request_move(
        self,
        board_obj: object,
        color: object,
        en_passant: object,
        request_id: int,
    ) -> None:
        """Search *board_obj* for *color*'s best move and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        self._cancel_event.clear()
        # The caller keeps its board; search a private copy.
        board = board_obj.copy()
        try:
            result = self._engine.analyse(board, color, en_passant, self._difficulty)
        except Exception as exc:
            _LOGGER.warning("Engine search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            _LOGGER.info("Discarding result of cancelled search %d", request_id)
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Abandon the current search; its result will not be emitted."""
        self._cancel_event.set()

    @pyqtSlot(str)
    def set_difficulty(self, difficulty: str) -> None:
        """Update strength (takes effect on the next search)."""
        self._difficulty = Difficulty.parse(difficulty)
