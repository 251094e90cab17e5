"""
Platform adapters for Chopsticks game sessions.

This package provides adapters that translate between a game session and
the platform it is played on (console, tests, simulations).
"""

from chopsticks.adapters.base import PlatformAdapter
from chopsticks.adapters.cli import CLIAdapter
from chopsticks.adapters.dummy import DummyAdapter

__all__ = ["PlatformAdapter", "CLIAdapter", "DummyAdapter"]
