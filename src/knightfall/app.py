"""Application entry point: a headless engine-versus-engine game."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from knightfall.core.enums import Color
from knightfall.engine.minimax import MinimaxEngine
from knightfall.engine.search import Difficulty
from knightfall.game.controller import GameController
from knightfall.game.player import AIPlayer
from knightfall.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knightfall",
        description="Play the minimax engine against itself.",
    )
    choices = [d.value for d in Difficulty]
    parser.add_argument("--white", choices=choices, default=Difficulty.MEDIUM.value)
    parser.add_argument("--black", choices=choices, default=Difficulty.EASY.value)
    parser.add_argument("--fen", default=None, help="start position (FEN)")
    parser.add_argument("--seed", type=int, default=None, help="seed easy-mode randomness")
    parser.add_argument("--max-plies", type=int, default=200)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _print_move(record: MoveRecord, state: GameState) -> None:
    prefix = f"{(state.ply_count + 1) // 2}." if record.color == Color.WHITE else "   ..."
    print(f"{prefix} {record.notation}  [{record.status_after.value}]")


def _print_result(state: GameState) -> None:
    print(repr(state.board))
    if state.winner is not None:
        print(f"{state.status.value}: {state.winner} wins")
    else:
        print(f"{state.status.value}: draw")


def main(argv: list[str] | None = None) -> int:
    """Run one engine-versus-engine game and print it."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = MinimaxEngine(rng=random.Random(args.seed))
    ctrl = GameController()
    ctrl.events.on_move.append(_print_move)
    ctrl.events.on_game_over.append(_print_result)

    try:
        ctrl.new_game(
            AIPlayer(Color.WHITE, "White engine", difficulty=args.white),
            AIPlayer(Color.BLACK, "Black engine", difficulty=args.black),
            fen=args.fen,
        )
    except ValueError as exc:
        _LOGGER.error("Cannot start game: %s", exc)
        return 2

    while not ctrl.state.is_game_over and ctrl.state.ply_count < args.max_plies:
        if ctrl.play_engine_move(engine) is None:
            break

    if not ctrl.state.is_game_over:
        _LOGGER.info("Stopped after %d plies", ctrl.state.ply_count)
        print(repr(ctrl.state.board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
