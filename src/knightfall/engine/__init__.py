"""Chess engine package: minimax search and Qt worker bridge."""

from knightfall.engine.evaluation import PIECE_VALUES, evaluate
from knightfall.engine.minimax import MATE_SCORE, MinimaxEngine
from knightfall.engine.qt_bridge import EngineWorker
from knightfall.engine.search import (
    Difficulty,
    EngineSettings,
    IEngine,
    SearchResult,
)

__all__ = [
    "MATE_SCORE",
    "PIECE_VALUES",
    "Difficulty",
    "EngineSettings",
    "EngineWorker",
    "IEngine",
    "MinimaxEngine",
    "SearchResult",
    "evaluate",
]
