"""
Pure state-transition rules for a single tick.
"""

import random
from dataclasses import dataclass
from typing import Tuple

from .constants import BOARD_SIZE, INITIAL_SNAKE_LENGTH, SCORE_PER_FOOD
from .game_state import GameState, Position


@dataclass(frozen=True)
class Step:
    """
    Outcome of one tick.

    Attributes:
        state: the freshly derived GameState
        target_length: length the snake may grow to after this tick
        ate_food: whether the new head landed on the food
        collided: whether the new head landed on the pre-tick body
    """

    state: GameState
    target_length: int
    ate_food: bool = False
    collided: bool = False


def next_head(head: Position, direction: Tuple[int, int], size: int = BOARD_SIZE) -> Position:
    """Move the head one cell, wrapping toroidally at the board edges."""
    x, y = head
    dx, dy = direction
    return ((x + dx + size) % size, (y + dy + size) % size)


def random_cell(rng: random.Random, size: int = BOARD_SIZE) -> Position:
    """Uniformly random cell; the snake body is not avoided."""
    return (rng.randrange(size), rng.randrange(size))


def advance(
    state: GameState,
    direction: Tuple[int, int],
    target_length: int,
    rng: random.Random,
    size: int = BOARD_SIZE,
) -> Step:
    """
    Compute the state that follows `state` when moving in `direction`.

    Food and self-collision are both checked against the same new head.
    The collision reset is applied after the food increment, so landing on
    food that sits on the body still resets score and length.
    """
    new_head = next_head(state.head, direction, size)
    score = state.score

    ate_food = new_head == state.food
    if ate_food:
        target_length += 1
        score += SCORE_PER_FOOD

    collided = new_head in state.snake
    if collided:
        target_length = INITIAL_SNAKE_LENGTH
        score = 0

    snake = (new_head,) + state.snake[:target_length - 1]
    food = random_cell(rng, size) if ate_food else state.food

    return Step(
        state=GameState(food=food, snake=snake, score=score),
        target_length=target_length,
        ate_food=ate_food,
        collided=collided,
    )
