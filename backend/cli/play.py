#!/usr/bin/env python3
"""
Headless snake session.

Runs the threaded engine for a fixed number of ticks with a RandomPlayer
acting as the input layer, printing the board after every tick.

Usage:
    python backend/cli/play.py [--ticks 100] [--tick-ms 150] [--seed 42] [--quiet]
"""

import argparse
import json
import logging
import os
import random
import sys
import threading
from typing import Any, Dict, Optional

# Add parent directory to path to import engine modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from game_loop import SnakeGame  # noqa: E402
from players import Player, RandomPlayer  # noqa: E402

logger = logging.getLogger(__name__)


def run_session(
    ticks: int,
    tick_ms: Optional[int] = None,
    seed: Optional[int] = None,
    quiet: bool = False,
    player: Optional[Player] = None,
) -> Dict[str, Any]:
    """
    Run one session until `ticks` states have been published.

    Args:
        ticks: Number of ticks to run before stopping the engine
        tick_ms: Tick period in milliseconds (defaults to config)
        seed: Seed shared by food placement and the player
        quiet: If True, don't print the board each tick
        player: Input logic; defaults to a RandomPlayer

    Returns:
        A dictionary summarizing the session (game_id, ticks, best_score, final_state).
    """
    if ticks <= 0:
        raise ValueError(f"ticks must be positive, got {ticks}")

    if tick_ms is None:
        tick_ms = config.TICK_PERIOD_MS
    rng = random.Random(seed)
    player = player or RandomPlayer(random.Random(rng.random()))

    game = SnakeGame(tick_period=tick_ms / 1000.0, rng=rng)
    done = threading.Event()
    best_score = 0

    def on_state(state: GameState) -> None:
        nonlocal best_score
        best_score = max(best_score, state.score)

        if not quiet:
            print(f"\nTick {game.tick_count} | Score: {state.score}")
            print(state.print_board())

        if game.tick_count >= ticks:
            done.set()
            return
        game.submit_direction(player.get_move(state))

    with game:
        subscription = game.subscribe(on_state)
        done.wait()
        subscription.close()

    final_state = game.get_state()
    return {
        "game_id": game.game_id,
        "ticks": game.tick_count,
        "best_score": best_score,
        "final_state": final_state.to_dict(),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake session driven by a random player."
    )
    parser.add_argument("--ticks", type=int, default=100,
                        help="Number of ticks to run")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_PERIOD_MS,
                        help="Tick period in milliseconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the player")
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print the board after every tick")
    args = parser.parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = run_session(args.ticks, tick_ms=args.tick_ms, seed=args.seed, quiet=args.quiet)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
