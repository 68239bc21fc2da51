"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .constants import BOARD_SIZE, INITIAL_FOOD, INITIAL_SNAKE

Position = Tuple[int, int]


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    States are never mutated; every tick produces a fresh instance.

    Attributes:
        food: (x, y) cell where the food currently sits
        snake: tuple of (x, y) from head at index 0 to tail at the end
        score: points collected since the last self-collision
    """

    food: Position
    snake: Tuple[Position, ...]
    score: int = 0

    def __post_init__(self):
        if not self.snake:
            raise ValueError("Snake must have at least one segment.")
        # Accept lists for convenience but store tuples so the snapshot stays hashable.
        object.__setattr__(self, "food", tuple(self.food))
        object.__setattr__(self, "snake", tuple(tuple(p) for p in self.snake))

    @classmethod
    def initial(cls) -> "GameState":
        """Return the fixed starting state."""
        return cls(food=INITIAL_FOOD, snake=INITIAL_SNAKE, score=0)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    def print_board(self, size: int = BOARD_SIZE) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first (screen coordinates) with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(size)] for _ in range(size)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        # Body first so the head wins if a cell repeats
        for x, y in self.snake[1:]:
            board[y][x] = 'S'
        hx, hy = self.head
        board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(size)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "food": list(self.food),
            "snake": [list(p) for p in self.snake],
            "score": self.score,
        }

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={len(self.snake)}, "
            f"food={self.food}, score={self.score}>"
        )
