"""
Domain entities for the snake engine.

This module contains the core game entities that are independent of
threading and presentation concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_NAMES,
    BOARD_SIZE, TICK_PERIOD_MS, INITIAL_SNAKE_LENGTH, SCORE_PER_FOOD,
)
from .game_state import GameState
from .direction_register import DirectionRegister, normalize_direction
from .rules import Step, advance, next_head

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_NAMES',
    'BOARD_SIZE', 'TICK_PERIOD_MS', 'INITIAL_SNAKE_LENGTH', 'SCORE_PER_FOOD',
    'GameState',
    'DirectionRegister', 'normalize_direction',
    'Step', 'advance', 'next_head',
]
