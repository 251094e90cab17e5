"""
Chopsticks game session.

This module provides the ChopsticksEngine class, which holds the one
authoritative state of a game and threads it through the pure transition
functions: it applies moves, switches turns, runs computer players, keeps the
move history and reports what happened to the adapter and the event bus.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union
import asyncio
import logging
import random
import time
import uuid

from chopsticks.adapters import PlatformAdapter
from chopsticks.ai.strategy import Strategy, get_strategy
from chopsticks.engine.base import GameEngine
from chopsticks.events import EngineEventType
from chopsticks.game.constants import (
    DEFAULT_PLAYER_NAMES,
    HANDS,
    PLAYERS,
    Player,
)
from chopsticks.game.exceptions import (
    GameOverError,
    InvalidMoveError,
    InvalidPlayerError,
)
from chopsticks.game.moves import Move, SplitMove, parse_move
from chopsticks.game.notation import describe_move, format_move
from chopsticks.game.state import GameState
from chopsticks.game.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)

DEFAULT_AI_DELAY_MS = 350
DEFAULT_MAX_TURNS = 200


@dataclass(frozen=True)
class HistoryEntry:
    """
    One applied move.

    Attributes:
        turn: 1-based move number
        player: Player who moved
        move: The move as applied
        notation: The move in notation
        description: Human readable sentence
        board: Board snapshot after the move
    """

    turn: int
    player: Player
    move: Move
    notation: str
    description: str
    board: Dict[str, Any]


class ChopsticksEngine(GameEngine):
    """
    Engine for a game of Chopsticks.

    Seats listed under the ``strategies`` config key are played by the
    computer; the other seats ask the adapter for their moves.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Chopsticks engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        super().__init__(adapter, config)
        self.state: GameState = StateTransitionEngine.create_initial_state()
        self.game_id = str(uuid.uuid4())
        self.history: List[HistoryEntry] = []

        self.ai_delay_ms = self.config.get("ai_delay_ms", DEFAULT_AI_DELAY_MS)
        if self.ai_delay_ms < 0:
            raise ValueError("ai_delay_ms must not be negative")
        self.max_turns = self.config.get("max_turns", DEFAULT_MAX_TURNS)
        self.action_timeout = self.config.get("action_timeout")

        names = dict(DEFAULT_PLAYER_NAMES)
        for player, name in self.config.get("player_names", {}).items():
            names[Player(player)] = name
        self.player_names: Dict[Player, str] = names

        rng = random.Random(self.config.get("seed"))
        self.strategies: Dict[Player, Strategy] = {
            Player(player): get_strategy(strategy, rng=rng)
            for player, strategy in self.config.get("strategies", {}).items()
        }

    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await super().initialize()

        await self._emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_type": "chopsticks",
                "config": self.config,
                "timestamp": time.time(),
            },
        )

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self._emit(EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()})

        await super().shutdown()

    async def start_game(self) -> None:
        """
        Start a new game from the initial position.
        """
        self.state = StateTransitionEngine.create_initial_state()
        self.game_id = str(uuid.uuid4())
        self.history = []

        await self._emit(
            EngineEventType.GAME_CREATED,
            {"game_id": self.game_id, "timestamp": time.time()},
        )
        await self._emit(
            EngineEventType.GAME_STARTED,
            {
                "game_id": self.game_id,
                "players": {p.value: self.player_names[p] for p in PLAYERS},
                "current": self.state.current.value,
                "timestamp": time.time(),
            },
        )

        await self.render_state()

    async def execute_move(self, move: Union[Move, Mapping[str, Any]]) -> GameState:
        """
        Apply a move, then end the game or pass the turn.

        Args:
            move: A typed move or its dictionary form

        Returns:
            The new authoritative state

        Raises:
            GameOverError: If the game has already ended
            InvalidMoveError: If the engine rejects the move; the state is unchanged
        """
        if self.is_game_over():
            raise GameOverError("The game is already over")

        before = self.state
        player = before.current
        try:
            move = parse_move(move)
            mover = move.player if isinstance(move, SplitMove) else move.attacker_player
            if mover is not None:
                try:
                    mover = Player(mover)
                except ValueError:
                    raise InvalidPlayerError(f"Invalid player: {mover!r}") from None
                if mover != player:
                    raise InvalidMoveError("Not this player's turn")
            after = StateTransitionEngine.apply_move(before, move)
        except InvalidMoveError as e:
            await self._emit_error(player, e)
            raise

        entry = HistoryEntry(
            turn=len(self.history) + 1,
            player=player,
            move=move,
            notation=format_move(move, player),
            description=describe_move(before, move, after, self.player_names),
            board=StateTransitionEngine.get_board(after),
        )
        self.history.append(entry)
        self.state = after
        logger.debug("Turn %d: %s", entry.turn, entry.description)

        await self._emit(
            EngineEventType.MOVE_APPLIED,
            {
                "game_id": self.game_id,
                "turn": entry.turn,
                "player_id": player.value,
                "player_name": self.player_names[player],
                "move": move.to_dict(),
                "notation": entry.notation,
                "description": entry.description,
                "board": entry.board,
                "timestamp": time.time(),
            },
        )

        if isinstance(move, SplitMove):
            await self._emit(
                EngineEventType.HANDS_SPLIT,
                {
                    "game_id": self.game_id,
                    "player_id": player.value,
                    "left": move.left,
                    "right": move.right,
                    "timestamp": time.time(),
                },
            )

        for owner in PLAYERS:
            for hand in HANDS:
                if before.hands_of(owner).get(hand) > 0 and after.hands_of(owner).get(hand) == 0:
                    await self._emit(
                        EngineEventType.HAND_DIED,
                        {
                            "game_id": self.game_id,
                            "player_id": owner.value,
                            "player_name": self.player_names[owner],
                            "hand": hand.value,
                            "timestamp": time.time(),
                        },
                    )

        if StateTransitionEngine.is_terminal(self.state):
            winner = StateTransitionEngine.get_winner(self.state)
            await self._emit(
                EngineEventType.GAME_ENDED,
                {
                    "game_id": self.game_id,
                    "winner_id": winner.value if winner else None,
                    "winner_name": self.player_names[winner] if winner else None,
                    "turns": len(self.history),
                    "timestamp": time.time(),
                },
            )
        else:
            await self._switch_turn()

        await self.render_state()
        return self.state

    async def _emit_error(self, player: Player, error: Exception) -> None:
        await self._emit(
            EngineEventType.ERROR,
            {
                "game_id": self.game_id,
                "player_id": player.value,
                "message": str(error),
                "timestamp": time.time(),
            },
        )

    async def _pass_turn(self, player: Player, reason: str) -> None:
        logger.warning("%s loses the turn: %s", self.player_names[player], reason)
        await self._emit(
            EngineEventType.WARNING,
            {
                "game_id": self.game_id,
                "player_id": player.value,
                "player_name": self.player_names[player],
                "message": reason,
                "timestamp": time.time(),
            },
        )
        await self._switch_turn()
        await self.render_state()

    async def _switch_turn(self) -> None:
        self.state = StateTransitionEngine.switch_turn(self.state)
        current = self.state.current
        await self._emit(
            EngineEventType.TURN_SWITCHED,
            {
                "game_id": self.game_id,
                "player_id": current.value,
                "player_name": self.player_names[current],
                "timestamp": time.time(),
            },
        )

    async def play_ai_turn(self) -> Optional[Move]:
        """
        Let the computer play the current seat.

        Does nothing if the game is over or the seat is human. A move the engine
        rejects makes the turn pass instead.

        Returns:
            The move played, or None if no move was played
        """
        if self.is_game_over():
            return None
        strategy = self.strategies.get(self.state.current)
        if strategy is None:
            return None

        if self.ai_delay_ms:
            await asyncio.sleep(self.ai_delay_ms / 1000.0)

        current = self.state.current
        move = strategy.select_move(self.state)
        if move is None:
            return None

        try:
            await self.execute_move(move)
        except InvalidMoveError as e:
            await self._pass_turn(current, f"{strategy.name} strategy move rejected ({e})")
            return None
        return move

    async def play_turn(self) -> Optional[Move]:
        """
        Play one turn for the current seat, computer or human.

        A human move the engine rejects, or an adapter that gives up on
        getting one, passes the turn to the opponent.

        Returns:
            The move played, or None if the turn passed without a move
        """
        if self.is_game_over():
            raise GameOverError("The game is already over")

        if self.state.current in self.strategies:
            return await self.play_ai_turn()

        current = self.state.current
        name = self.player_names[current]
        valid_moves = self.get_valid_moves()
        await self._emit(
            EngineEventType.PLAYER_DECISION_NEEDED,
            {
                "game_id": self.game_id,
                "player_id": current.value,
                "player_name": name,
                "valid_moves": [move.to_dict() for move in valid_moves],
                "timestamp": time.time(),
            },
        )

        try:
            move = await self.adapter.request_player_action(
                current.value, name, valid_moves, self.action_timeout
            )
        except TimeoutError:
            await self._emit(
                EngineEventType.PLAYER_TIMEOUT,
                {
                    "game_id": self.game_id,
                    "player_id": current.value,
                    "player_name": name,
                    "timestamp": time.time(),
                },
            )
            move = await self.adapter.handle_timeout(current.value, name)
            if move is None:
                await self._switch_turn()
                await self.render_state()
                return None
        except InvalidMoveError as e:
            # The adapter gave up on getting a usable move
            await self._emit_error(current, e)
            await self._pass_turn(current, str(e))
            return None

        try:
            await self.execute_move(move)
        except InvalidMoveError as e:
            await self._pass_turn(current, str(e))
            return None
        return move

    async def run_game(self) -> Optional[Player]:
        """
        Play a whole game from the initial position.

        Stops at the ``max_turns`` limit, since Chopsticks positions can repeat
        forever.

        Returns:
            The winner, or None if the turn limit was reached
        """
        await self.start_game()
        turns = 0
        while not self.is_game_over() and turns < self.max_turns:
            await self.play_turn()
            turns += 1

        if not self.is_game_over():
            logger.info("Game %s stopped after %d turns", self.game_id, turns)
        return self.get_winner()

    def is_game_over(self) -> bool:
        return StateTransitionEngine.is_terminal(self.state)

    def get_winner(self) -> Optional[Player]:
        return StateTransitionEngine.get_winner(self.state)

    def get_winner_name(self) -> Optional[str]:
        winner = self.get_winner()
        return self.player_names[winner] if winner else None

    def can_split(self) -> bool:
        """Check whether the player to move may split."""
        return StateTransitionEngine.can_split(self.state, self.state.current)

    def get_valid_moves(self) -> List[Move]:
        if self.is_game_over():
            return []
        return StateTransitionEngine.get_moves(self.state)

    def get_board(self) -> Dict[str, Any]:
        return StateTransitionEngine.get_board(self.state)

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        adapter_state = self.state.to_adapter_format(self.player_names)
        adapter_state["game_over"] = self.is_game_over()
        adapter_state["winner_name"] = self.get_winner_name()
        adapter_state["history"] = [entry.description for entry in self.history]
        await self.adapter.render_game_state(adapter_state)

    async def _emit(self, event_type: EngineEventType, data: Dict[str, Any]) -> None:
        self.event_bus.emit(event_type, data)
        await self.adapter.notify_game_event(event_type, data)
