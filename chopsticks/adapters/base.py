"""
Base adapter interface for Chopsticks game sessions.

This module defines the interface that platform-specific adapters must implement
to interact with a ``ChopsticksEngine``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from enum import Enum

from chopsticks.game.moves import Move


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    This abstract class defines the methods that platform-specific adapters
    must implement to interact with a game session. These methods handle
    rendering the board, requesting moves from human players, and notifying
    of game events.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: The board in adapter format (see ``GameState.to_adapter_format``)
        """
        pass

    @abstractmethod
    async def request_player_action(
        self,
        player_id: str,
        player_name: str,
        valid_moves: List[Move],
        timeout_seconds: Optional[float] = None,
    ) -> Move:
        """
        Request a move from a player.

        Args:
            player_id: Seat of the player ("player1" or "player2")
            player_name: Display name of the player
            valid_moves: Legal moves the player can choose from
            timeout_seconds: Optional timeout for the player's decision

        Returns:
            The chosen move

        Raises:
            TimeoutError: If the player doesn't respond within the timeout period
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    @abstractmethod
    async def handle_timeout(self, player_id: str, player_name: str) -> Optional[Move]:
        """
        Handle a player timeout.

        Args:
            player_id: Seat of the player
            player_name: Display name of the player

        Returns:
            The move to play instead, or None to pass the turn
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down.
        """
        pass

