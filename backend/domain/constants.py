"""
Game constants for the snake engine.
"""

# Board / timing settings
BOARD_SIZE = 16
TICK_PERIOD_MS = 150
INITIAL_SNAKE_LENGTH = 4
SCORE_PER_FOOD = 10

# Movement directions as (dx, dy) deltas. Screen coordinates: y grows downward.
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_NAMES = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# Starting layout
INITIAL_FOOD = (5, 5)
INITIAL_SNAKE = ((7, 7),)
INITIAL_DIRECTION = RIGHT
