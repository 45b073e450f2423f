"""Shared engine search models, settings and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from knightfall.core.board import Board
    from knightfall.core.enums import Color
    from knightfall.core.move import SourcedMove
    from knightfall.core.types import Square


class Difficulty(str, Enum):
    """Engine strength presets."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Coerce a name such as ``"hard"`` into a :class:`Difficulty`."""
        if not isinstance(value, str):
            raise ValueError(f"Unknown difficulty: {value!r}")
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


@dataclass(slots=True, frozen=True)
class EngineSettings:
    """Engine configuration.

    ``max_depth`` is the deepest search the mate-distance bias accounts
    for: a mate found ``n`` plies below the root scores
    ``MATE_SCORE - n`` as long as the search is no deeper than this.
    """

    easy_depth: int = 1
    medium_depth: int = 2
    hard_depth: int = 3
    max_depth: int = 3
    random_move_chance: float = 0.3

    def __post_init__(self) -> None:
        depths = (self.easy_depth, self.medium_depth, self.hard_depth)
        if min(depths) < 1:
            raise ValueError("Search depth must be >= 1")
        if max(depths) > self.max_depth:
            raise ValueError(
                f"Search depth {max(depths)} exceeds max_depth {self.max_depth}"
            )
        if not 0.0 <= self.random_move_chance <= 1.0:
            raise ValueError(
                f"random_move_chance must be within [0, 1]: {self.random_move_chance!r}"
            )

    def depth_for(self, difficulty: Difficulty | str) -> int:
        difficulty = Difficulty.parse(difficulty)
        if difficulty == Difficulty.EASY:
            return self.easy_depth
        if difficulty == Difficulty.MEDIUM:
            return self.medium_depth
        return self.hard_depth


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is ``None`` when no search was run: the side had no legal
    move, or an easy-mode random move was picked.
    """

    best_move: SourcedMove | None
    score: int | None
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the worker and game layer."""

    def analyse(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
    ) -> SearchResult: ...

    def best_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
    ) -> SourcedMove | None: ...
