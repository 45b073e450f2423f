"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from knightfall.core.enums import Color
from knightfall.engine.search import Difficulty
from knightfall.game.interfaces import IPlayer

if TYPE_CHECKING:
    from knightfall.game.state import GameState


class HumanPlayer(IPlayer):
    """A human participant - moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An AI participant that delegates computation to a callback.

    ``AIPlayer`` only stores the callable invoked on ``request_move``.
    In a Qt front end it hands the position to an ``EngineWorker`` living
    in a ``QThread``; headless callers can instead drive the engine through
    ``GameController.play_engine_move``.

    Args:
        color: Side the AI plays.
        name: Display name.
        difficulty: Engine strength preset.
        on_request_move: ``(GameState) -> None`` - called when the game
            controller asks the AI to start thinking.
        on_cancel: ``() -> None`` - called to abort a running search.
    """

    __slots__ = ("_color", "_name", "_difficulty", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        on_request_move: Callable[[GameState], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._difficulty = Difficulty.parse(difficulty)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(state)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
