"""
Push-based publication of game states to observers.

Subscribers receive the latest state when they subscribe and every state
published afterwards, in publish order. Late subscribers never see
historical states.
"""

import logging
import threading
from typing import Callable, List

from domain.game_state import GameState

logger = logging.getLogger(__name__)

StateCallback = Callable[[GameState], None]


class Subscription:
    """Handle returned by StateChannel.subscribe(); close() stops delivery."""

    def __init__(self, channel: "StateChannel", callback: StateCallback):
        self._channel = channel
        self.callback = callback
        self.active = True

    def close(self) -> None:
        if self.active:
            self.active = False
            self._channel._remove(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class StateChannel:
    """
    Holds the most recent GameState and fans it out to subscribers.

    Delivery runs on the publishing thread while holding the delivery lock,
    so every subscriber sees states in the order they were published.
    """

    def __init__(self, initial: GameState):
        self._latest = initial
        self._latest_lock = threading.Lock()
        # Reentrant so a callback may subscribe or unsubscribe during delivery
        self._delivery_lock = threading.RLock()
        self._subscribers: List[Subscription] = []

    @property
    def latest(self) -> GameState:
        with self._latest_lock:
            return self._latest

    def subscribe(self, callback: StateCallback) -> Subscription:
        """Register a callback and immediately hand it the latest state."""
        subscription = Subscription(self, callback)
        with self._delivery_lock:
            self._subscribers.append(subscription)
            self._deliver(subscription, self.latest)
        return subscription

    def publish(self, state: GameState) -> None:
        """Replace the latest state and push it to every active subscriber."""
        with self._delivery_lock:
            with self._latest_lock:
                self._latest = state
            for subscription in list(self._subscribers):
                if subscription.active:
                    self._deliver(subscription, state)

    @property
    def subscriber_count(self) -> int:
        with self._delivery_lock:
            return len(self._subscribers)

    def _remove(self, subscription: Subscription) -> None:
        with self._delivery_lock:
            if subscription in self._subscribers:
                self._subscribers.remove(subscription)

    def _deliver(self, subscription: Subscription, state: GameState) -> None:
        try:
            subscription.callback(state)
        except Exception:  # noqa: BLE001 - a broken observer must not stop the game
            logger.exception("State subscriber %r failed", subscription.callback)
