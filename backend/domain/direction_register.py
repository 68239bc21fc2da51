"""
DirectionRegister - the single movement vector shared by input and tick loop.
"""

import threading
from typing import Sequence, Tuple

from .constants import INITIAL_DIRECTION, VALID_MOVES

Direction = Tuple[int, int]


def normalize_direction(direction: Sequence[int]) -> Direction:
    """
    Check a direction is a cardinal unit vector and return it as a (dx, dy) tuple.

    Components must already be ints; nothing is coerced.

    Raises:
        ValueError: if the value is not one of UP, DOWN, LEFT, RIGHT
    """
    if isinstance(direction, (str, bytes)):
        raise ValueError(f"Invalid direction {direction!r}.")
    try:
        dx, dy = direction
    except (TypeError, ValueError):
        raise ValueError(f"Invalid direction {direction!r}.") from None

    # bool is an int subclass; exact type check keeps True/False and floats out
    if type(dx) is not int or type(dy) is not int:
        raise ValueError(f"Invalid direction {direction!r}; components must be ints.")

    candidate = (dx, dy)

    if candidate not in VALID_MOVES:
        raise ValueError(f"Invalid direction {direction!r}; expected one of {sorted(VALID_MOVES)}.")
    return candidate


class DirectionRegister:
    """
    Holds the current movement vector.

    Writes are plain assignments under a lock; the most recently completed
    write wins. Reversals are not rejected.
    """

    def __init__(self, initial: Direction = INITIAL_DIRECTION):
        self._lock = threading.Lock()
        self._value = normalize_direction(initial)

    def set(self, direction: Sequence[int]) -> Direction:
        value = normalize_direction(direction)
        with self._lock:
            self._value = value
        return value

    def get(self) -> Direction:
        with self._lock:
            return self._value

    def __repr__(self):
        return f"<DirectionRegister value={self.get()}>"
