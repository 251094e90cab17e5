"""
Dummy adapter for Chopsticks game sessions, used for testing and simulation.

This module provides a non-interactive adapter that can be used for automated
testing, simulations, and benchmarks where no user interaction is needed.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from enum import Enum

from chopsticks.adapters.base import PlatformAdapter
from chopsticks.game.moves import Move


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real platform. Human seats are
    answered from a per-player script of moves, then from an optional
    strategy function, then with the first legal move.
    """

    def __init__(
        self,
        auto_moves: Optional[Dict[str, List[Move]]] = None,
        strategy_function: Optional[Callable[[str, List[Move]], Move]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            auto_moves: Optional dictionary mapping player IDs to lists of moves
                        to play in sequence
            strategy_function: Optional function that takes (player_id, valid_moves)
                               and returns a move to play
            verbose: Whether to print events to stdout (useful for debugging)
        """
        self.auto_moves = auto_moves or {}
        self.strategy_function = strategy_function
        self.verbose = verbose

        # Track move index for each player
        self.move_index = {}

        # Track events and rendered states for later inspection
        self.events = []
        self.rendered_states = []
        self.timeouts = []

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current game state
        """
        self.rendered_states.append(state)

        if self.verbose:
            print("\n=== Board ===")
            for player in state.get("players", []):
                print(f"{player.get('name')}: {player.get('left')} | {player.get('right')}")
            print(f"To move: {state.get('current_name')}")
            print("=============\n")

    async def request_player_action(
        self,
        player_id: str,
        player_name: str,
        valid_moves: List[Move],
        timeout_seconds: Optional[float] = None,
    ) -> Move:
        """
        Return a scripted move or select one using the strategy function.

        Scripted moves are returned even when they are not in ``valid_moves``,
        so tests can drive illegal input into the engine.

        Args:
            player_id: Seat of the player
            player_name: Display name of the player
            valid_moves: Legal moves the player can choose from
            timeout_seconds: Optional timeout (ignored in this adapter)

        Returns:
            A selected move
        """
        if player_id not in self.move_index:
            self.move_index[player_id] = 0

        selected_move = None

        if player_id in self.auto_moves:
            moves_list = self.auto_moves[player_id]
            if self.move_index[player_id] < len(moves_list):
                selected_move = moves_list[self.move_index[player_id]]
                self.move_index[player_id] += 1

        if selected_move is None and self.strategy_function:
            selected_move = self.strategy_function(player_id, valid_moves)

        if selected_move is None:
            if not valid_moves:
                raise ValueError("No valid moves available.")
            selected_move = valid_moves[0]

        if self.verbose:
            print(f"Player {player_name} plays {selected_move}")

        return selected_move

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type

        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    async def handle_timeout(self, player_id: str, player_name: str) -> Optional[Move]:
        """
        Record the timeout and pass the turn.

        Args:
            player_id: Seat of the player
            player_name: Display name of the player
        """
        self.timeouts.append(player_id)

        if self.verbose:
            print(f"Player {player_name} timed out. Passing the turn.")

        return None

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
        self.move_index.clear()
        self.timeouts.clear()
