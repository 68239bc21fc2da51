"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional, Tuple

from domain.constants import BOARD_SIZE, VALID_MOVES
from domain.game_state import GameState
from domain.rules import next_head
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction whose next cell is not part of the body.

    The board wraps, so there are no walls to avoid.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        # Fixed order so a seeded rng gives repeatable choices
        moves = sorted(VALID_MOVES)

        # The tail cell is vacated this tick only when the snake is at full length,
        # which the player cannot see, so treat the whole body as unsafe.
        valid_moves: List[Tuple[int, int]] = [
            move for move in moves
            if next_head(game_state.head, move, BOARD_SIZE) not in game_state.snake
        ]

        # If no valid moves, just return a random move (the score resets anyway)
        if not valid_moves:
            return self.rng.choice(moves)

        return self.rng.choice(valid_moves)
