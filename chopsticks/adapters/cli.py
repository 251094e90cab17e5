"""
Command-line interface adapter for Chopsticks game sessions.

This module provides an adapter for console-based play. Moves are entered by
number from the printed list or in move notation (``A L R``, ``T L R``,
``S 1 2``).
"""

import asyncio
from typing import Any, Dict, List, Optional, Union
from enum import Enum

from chopsticks.adapters.base import PlatformAdapter
from chopsticks.common.io_interface import ConsoleIOInterface, IOInterface
from chopsticks.game.constants import Player
from chopsticks.game.exceptions import InvalidMoveError
from chopsticks.game.moves import Move
from chopsticks.game.notation import format_move, parse_notation


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for Chopsticks.

    This adapter uses an IOInterface (the console by default) for
    input/output, providing a simple text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None, max_attempts: int = 3):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
            max_attempts: Invalid entries allowed before giving up on a prompt
        """
        self.io_interface = io_interface or ConsoleIOInterface()
        self.max_attempts = max_attempts

        # Lines typed by the user, or the error the read raised
        self._lines: Optional[asyncio.Queue] = None
        self._pending_read: Optional[asyncio.Future] = None

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the board to the console.

        Args:
            state: The board in adapter format
        """
        self.io_interface.output("\n=== Board ===")
        for player in state.get("players", []):
            marker = "*" if player.get("id") == state.get("current") else " "
            self.io_interface.output(
                f"{marker} {player.get('name')}: "
                f"L={player.get('left')} R={player.get('right')}"
            )
        self.io_interface.output("=============\n")

    async def _read(self, prompt: str, timeout_seconds: Optional[float]) -> str:
        # One blocking read at a time; a read that outlives its timeout
        # answers the next prompt instead of racing a second reader
        if self._lines is None:
            self._lines = asyncio.Queue()
        if self._pending_read is None and self._lines.empty():
            loop = asyncio.get_running_loop()
            self._pending_read = loop.run_in_executor(
                None, self.io_interface.input, prompt
            )
            self._pending_read.add_done_callback(self._on_line)

        try:
            line = await asyncio.wait_for(self._lines.get(), timeout_seconds or None)
        except asyncio.TimeoutError:
            raise TimeoutError("Time limit expired") from None
        if isinstance(line, BaseException):
            raise line
        return line

    def _on_line(self, future: "asyncio.Future[str]") -> None:
        self._pending_read = None
        if future.cancelled():
            return
        error = future.exception()
        self._lines.put_nowait(error if error is not None else future.result())

    async def request_player_action(
        self,
        player_id: str,
        player_name: str,
        valid_moves: List[Move],
        timeout_seconds: Optional[float] = None,
    ) -> Move:
        """
        Request a move from a player via the console.

        Args:
            player_id: Seat of the player
            player_name: Display name of the player
            valid_moves: Legal moves the player can choose from
            timeout_seconds: Optional timeout for the player's decision

        Returns:
            The player's chosen move

        Raises:
            TimeoutError: If the player doesn't respond in time or cancels
            InvalidMoveError: If every attempt was invalid
        """
        player = Player(player_id)
        choices = {str(i + 1): move for i, move in enumerate(valid_moves)}

        self.io_interface.output(f"\n{player_name}'s turn. Valid moves:")
        for number, move in choices.items():
            self.io_interface.output(f"{number}: {format_move(move, player)}")

        for _ in range(self.max_attempts):
            try:
                choice = await self._read("Enter your move: ", timeout_seconds)
            except (KeyboardInterrupt, EOFError):
                raise TimeoutError(f"Player {player_name} cancelled") from None

            choice = choice.strip()
            if choice in choices:
                return choices[choice]
            try:
                move = parse_notation(choice, player)
            except InvalidMoveError as e:
                self.io_interface.output(f"{e}. Please try again.")
                continue
            if move in valid_moves:
                return move
            self.io_interface.output("That move is not legal now. Please try again.")

        raise InvalidMoveError(f"Too many invalid entries from {player_name}")

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the user of a game event via the console.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            self.io_interface.output(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Returns:
            Formatted message string or None if no message needed
        """
        if event_type == "MOVE_APPLIED":
            return data.get("description")

        elif event_type == "HAND_DIED":
            player_name = data.get("player_name", "Unknown Player")
            return f"{player_name}'s {data.get('hand')} hand is out!"

        elif event_type == "TURN_SWITCHED":
            return f"{data.get('player_name', 'Unknown Player')}'s turn"

        elif event_type == "GAME_ENDED":
            winner_name = data.get("winner_name")
            if winner_name:
                return f"{winner_name} wins!"
            return "Game over, no winner."

        elif event_type == "ERROR":
            return f"Error: {data.get('message')}"

        elif event_type == "WARNING":
            player_name = data.get("player_name", "Unknown Player")
            return f"{player_name} loses the turn."

        return None

    async def handle_timeout(self, player_id: str, player_name: str) -> Optional[Move]:
        """
        Handle a player timeout by passing the turn.

        Args:
            player_id: Seat of the player
            player_name: Display name of the player
        """
        self.io_interface.output(f"{player_name} timed out. Turn passes.")
        return None
