"""Computer players for Chopsticks."""

from chopsticks.ai.strategy import (
    GreedyStrategy,
    MinimaxStrategy,
    RandomStrategy,
    Strategy,
    STRATEGIES,
    get_strategy,
    heuristic,
)

__all__ = [
    "Strategy",
    "RandomStrategy",
    "GreedyStrategy",
    "MinimaxStrategy",
    "STRATEGIES",
    "get_strategy",
    "heuristic",
]
