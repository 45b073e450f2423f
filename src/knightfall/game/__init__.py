"""Game management layer - controller, players, state machine.

Quick start::

    from knightfall.core import Color
    from knightfall.engine import MinimaxEngine
    from knightfall.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK, difficulty="hard"),
    )
"""

from knightfall.game.controller import GameController, GameEvents
from knightfall.game.interfaces import GamePhase, IPlayer
from knightfall.game.player import AIPlayer, HumanPlayer
from knightfall.game.state import GameState, MoveRecord, PendingPromotion

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "PendingPromotion",
]
