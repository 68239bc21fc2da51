"""
Base player interface for the snake engine.
"""

from typing import Tuple

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input logic.

    A player looks at the latest published state and returns the direction
    it wants to submit next.
    """

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Latest published state of the game

        Returns:
            One of: UP, DOWN, LEFT, RIGHT as (dx, dy)
        """
        raise NotImplementedError
