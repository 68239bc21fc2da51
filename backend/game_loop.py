"""
Game loop / state engine.

SnakeGame owns the canonical GameState, advances it on a fixed period from a
background thread, and publishes every new state to subscribers. Input
layers only talk to it through submit_direction() and subscribe().
"""

import logging
import random
import threading
import uuid
from typing import Optional, Sequence

import config
from domain.constants import INITIAL_DIRECTION, INITIAL_SNAKE_LENGTH
from domain.direction_register import DirectionRegister
from domain.game_state import GameState
from domain.rules import advance
from services.state_channel import StateCallback, StateChannel, Subscription

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Canonical game state (food, snake, score)
      - Target length counter
      - Direction register shared with the input layer
      - Tick thread and its stop event
      - State publication to observers
    """

    def __init__(
        self,
        tick_period: Optional[float] = None,
        rng: Optional[random.Random] = None,
        initial_state: Optional[GameState] = None,
        initial_direction: Sequence[int] = INITIAL_DIRECTION,
        game_id: Optional[str] = None,
    ):
        if tick_period is None:
            tick_period = config.TICK_PERIOD_MS / 1000.0
        if tick_period <= 0:
            raise ValueError(f"tick_period must be positive, got {tick_period}")

        self.tick_period = tick_period
        self.game_id = game_id or str(uuid.uuid4())
        self._rng = rng or random.Random()

        self._direction = DirectionRegister(initial_direction)
        self._channel = StateChannel(initial_state or GameState.initial())

        # Only the tick path touches these; the lock keeps manual tick() calls
        # from interleaving with the background loop. Always taken before the
        # channel lock; reentrant so a subscriber may call tick().
        self._tick_lock = threading.RLock()
        self._target_length = INITIAL_SNAKE_LENGTH
        self._tick_count = 0

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Observer / input surface
    # ------------------------------------------------------------------

    def get_state(self) -> GameState:
        """Return the most recently published state."""
        return self._channel.latest

    def subscribe(self, callback: StateCallback) -> Subscription:
        """
        Register an observer.

        The callback gets the latest state immediately and then every new
        state in tick order. Call close() on the returned handle to stop.
        """
        with self._tick_lock:
            return self._channel.subscribe(callback)

    def submit_direction(self, direction: Sequence[int]) -> bool:
        """
        Replace the current direction.

        Anything other than the four cardinal unit vectors is ignored.

        Returns:
            True if the direction was accepted, False if it was ignored
        """
        try:
            self._direction.set(direction)
        except ValueError as e:
            logger.warning(f"Ignoring direction for game {self.game_id}: {e}")
            return False
        return True

    @property
    def direction(self):
        return self._direction.get()

    @property
    def target_length(self) -> int:
        return self._target_length

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> GameState:
        """
        Execute one tick:
          1) Read the latest direction
          2) Derive the next state from the current one
          3) Publish it to every subscriber
        """
        with self._tick_lock:
            current = self._channel.latest
            step = advance(current, self._direction.get(), self._target_length, self._rng)

            self._target_length = step.target_length
            self._tick_count += 1

            if step.ate_food:
                logger.debug(
                    f"Game {self.game_id} tick {self._tick_count}: food eaten at "
                    f"{step.state.head}, score {step.state.score}, next food {step.state.food}"
                )
            if step.collided:
                logger.debug(
                    f"Game {self.game_id} tick {self._tick_count}: self-collision at "
                    f"{step.state.head}, score reset"
                )

            # Publishing inside the tick lock keeps delivery in tick order.
            self._channel.publish(step.state)
            return step.state

    def start(self) -> None:
        """Launch the background tick loop."""
        if self._thread is not None:
            raise RuntimeError(f"Game {self.game_id} has already been started.")
        if self._stop_event.is_set():
            raise RuntimeError(f"Game {self.game_id} has been stopped and cannot be restarted.")

        self._thread = threading.Thread(
            target=self._run,
            name=f"snake-tick-{self.game_id[:8]}",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Game {self.game_id} started (tick period {self.tick_period * 1000:.0f} ms)")

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the loop to stop and wait for it to finish its current tick."""
        self._stop_event.set()
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join(timeout)
        if thread.is_alive():
            logger.warning(f"Game {self.game_id} tick thread did not stop within {timeout}s")
        else:
            logger.info(f"Game {self.game_id} stopped after {self._tick_count} ticks")

    def _run(self) -> None:
        # wait() doubles as the tick delay and the cancellation check.
        while not self._stop_event.wait(self.tick_period):
            self.tick()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    def __repr__(self):
        return (
            f"<SnakeGame id={self.game_id}, ticks={self._tick_count}, "
            f"target_length={self._target_length}, state={self.get_state()!r}>"
        )
