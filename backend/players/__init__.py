"""
Player implementations for the snake engine.

Players stand in for the input layer: they read the latest state and
choose the direction to submit.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
