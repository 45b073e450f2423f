"""Pure-Python chess engine search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
import random

from knightfall.core.apply import apply_move
from knightfall.core.board import Board
from knightfall.core.enums import Color
from knightfall.core.move import SourcedMove
from knightfall.core.move_generator import MoveGenerator
from knightfall.core.types import Square
from knightfall.engine.evaluation import evaluate
from knightfall.engine.search import Difficulty, EngineSettings, IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)

INF_SCORE = 1_000_000
MATE_SCORE = 100_000


class MinimaxEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    Every ply works on its own board copy, and nothing but the settings
    and the random source survives between calls. The random source only
    drives the easy-mode random move; pass a seeded ``random.Random`` to
    make it reproducible.
    """

    __slots__ = ("_settings", "_rng", "_nodes")

    def __init__(
        self,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or EngineSettings()
        self._rng = rng or random.Random()
        self._nodes = 0

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # -- Public API ---------------------------------------------------------

    def best_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
    ) -> SourcedMove | None:
        """Move *color* should play, or ``None`` when it has no legal move."""
        return self.analyse(board, color, en_passant, difficulty).best_move

    def analyse(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
    ) -> SearchResult:
        difficulty = Difficulty.parse(difficulty)
        depth = self._settings.depth_for(difficulty)
        self._nodes = 0

        root_moves = MoveGenerator(board, en_passant).all_legal_moves(color)
        if not root_moves:
            _LOGGER.debug("No legal moves for %s", color)
            return SearchResult(None, None, depth, 0)

        if (
            difficulty == Difficulty.EASY
            and self._rng.random() < self._settings.random_move_chance
        ):
            choice = self._rng.choice(root_moves)
            _LOGGER.debug("Easy mode picked random move %s for %s", choice, color)
            return SearchResult(choice, None, 0, 0)

        best_move: SourcedMove | None = None
        best_score = -INF_SCORE
        for candidate in root_moves:
            child = apply_move(board, candidate.from_sq, candidate.move)
            score = self.search(child, depth - 1, -INF_SCORE, INF_SCORE, False, color)
            # Strictly greater: the first of equally scored moves is kept.
            if score > best_score:
                best_score = score
                best_move = candidate

        _LOGGER.debug(
            "Best move for %s at depth %d: %s (score %d, %d nodes)",
            color,
            depth,
            best_move,
            best_score,
            self._nodes,
        )
        return SearchResult(best_move, best_score, depth, self._nodes)

    def search(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        root_color: Color,
        en_passant: Square | None = None,
    ) -> int:
        """Minimax value of *board* from *root_color*'s point of view.

        The side to move is *root_color* when *maximizing*, its opponent
        otherwise. En-passant rights are not tracked below this node.
        """
        self._nodes += 1
        side = root_color if maximizing else root_color.opposite
        gen = MoveGenerator(board, en_passant)

        if depth <= 0:
            if not gen.has_legal_move(side):
                return self._terminal_score(gen, side, depth, maximizing)
            return evaluate(board, root_color)

        moves = gen.all_legal_moves(side)
        if not moves:
            return self._terminal_score(gen, side, depth, maximizing)

        if maximizing:
            best = -INF_SCORE
            for candidate in self._order_moves(board, moves):
                child = apply_move(board, candidate.from_sq, candidate.move)
                score = self.search(child, depth - 1, alpha, beta, False, root_color)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = INF_SCORE
        for candidate in self._order_moves(board, moves):
            child = apply_move(board, candidate.from_sq, candidate.move)
            score = self.search(child, depth - 1, alpha, beta, True, root_color)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    # -- Internal helpers -----------------------------------------------------

    def _terminal_score(
        self,
        gen: MoveGenerator,
        side: Color,
        depth: int,
        maximizing: bool,
    ) -> int:
        if not gen.is_in_check(side):
            return 0  # stalemate
        # Nearer mates score further from zero.
        mate = MATE_SCORE - (self._settings.max_depth - depth)
        return -mate if maximizing else mate

    def _order_moves(self, board: Board, moves: list[SourcedMove]) -> list[SourcedMove]:
        # Captures first; sorted() is stable so generation order is kept
        # within each group.
        return sorted(moves, key=lambda m: board[m.dest] is None)
