"""
Tests for services/state_channel.py.
"""

import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState
from services.state_channel import StateChannel


def _state(x):
    return GameState(food=(0, 0), snake=((x, 1),), score=0)


class TestStateChannel:
    """Tests for StateChannel publication semantics."""

    def test_latest_starts_with_initial(self):
        initial = _state(1)
        assert StateChannel(initial).latest is initial

    def test_publish_replaces_latest(self):
        channel = StateChannel(_state(1))
        channel.publish(_state(2))
        assert channel.latest == _state(2)

    def test_subscribers_receive_in_publish_order(self):
        channel = StateChannel(_state(0))
        received = []
        channel.subscribe(received.append)
        for x in range(1, 5):
            channel.publish(_state(x))
        assert [s.head[0] for s in received] == [0, 1, 2, 3, 4]

    def test_multiple_subscribers(self):
        channel = StateChannel(_state(0))
        a, b = Mock(), Mock()
        channel.subscribe(a)
        channel.subscribe(b)
        channel.publish(_state(1))
        assert a.call_count == 2
        assert b.call_count == 2
        assert channel.subscriber_count == 2

    def test_subscription_context_manager_closes(self):
        channel = StateChannel(_state(0))
        callback = Mock()
        with channel.subscribe(callback) as subscription:
            channel.publish(_state(1))
        channel.publish(_state(2))

        assert subscription.active is False
        assert callback.call_count == 2
        assert channel.subscriber_count == 0

    def test_close_twice_is_harmless(self):
        channel = StateChannel(_state(0))
        subscription = channel.subscribe(Mock())
        subscription.close()
        subscription.close()
        assert channel.subscriber_count == 0

    def test_callback_may_unsubscribe_during_delivery(self):
        channel = StateChannel(_state(0))
        calls = []
        holder = {}

        def once(state):
            calls.append(state)
            if len(calls) == 2:
                holder["sub"].close()

        holder["sub"] = channel.subscribe(once)
        channel.publish(_state(1))
        channel.publish(_state(2))
        assert len(calls) == 2

    def test_failing_callback_is_logged(self, caplog):
        channel = StateChannel(_state(0))
        channel.subscribe(Mock(side_effect=ValueError("bad observer")))
        assert "State subscriber" in caplog.text
        # The channel keeps working afterwards
        channel.publish(_state(1))
        assert channel.latest == _state(1)
