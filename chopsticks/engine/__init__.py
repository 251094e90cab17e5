"""
Game sessions for Chopsticks.

This package connects the pure rules engine to adapters, computer players
and the event bus.
"""

from chopsticks.engine.base import GameEngine
from chopsticks.engine.chopsticks import ChopsticksEngine, HistoryEntry

__all__ = ["GameEngine", "ChopsticksEngine", "HistoryEntry"]
