"""
Base engine class for Chopsticks game sessions.

A game engine owns the single authoritative state of one game and connects
the pure rules in ``chopsticks.game`` to a platform adapter and the event bus.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from chopsticks.adapters import PlatformAdapter
from chopsticks.events import EventBus


class GameEngine(ABC):
    """
    Abstract base class for game engines.

    This class defines the common interface for starting games, applying
    moves and rendering the game state.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.state = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def start_game(self) -> None:
        """
        Start a new game.
        """
        pass

    @abstractmethod
    async def execute_move(self, move: Any) -> Any:
        """
        Apply a move for the player to move.

        Args:
            move: Move to apply
        """
        pass

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
