"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the whole suite.
"""

import pytest

from chopsticks.events import EventBus
from chopsticks.game import GameState, Player, PlayerHands


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus.reset()
    yield
    EventBus.reset()


@pytest.fixture
def make_state():
    """Build a state from plain counts: make_state((l1, r1), (l2, r2), current)."""

    def _make(player1=(1, 1), player2=(1, 1), current=Player.PLAYER1):
        return GameState(
            current=current,
            player1=PlayerHands(*player1),
            player2=PlayerHands(*player2),
        )

    return _make
