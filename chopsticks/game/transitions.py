"""
State transition functions for the Chopsticks hand game.

This module provides pure functions for transitioning between game states,
without modifying the original state objects. Nothing here performs I/O,
emits events or keeps state between calls: the same state and move always
produce the same result.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from chopsticks.game.constants import (
    DEATH_THRESHOLD,
    HANDS,
    PLAYERS,
    Hand,
    Player,
    get_opponent,
)
from chopsticks.game.exceptions import (
    DeadHandError,
    InvalidHandError,
    InvalidPlayerError,
    InvalidSplitError,
    SelfTargetError,
    SplitNotAllowedError,
)
from chopsticks.game.moves import AttackMove, Move, SplitMove, parse_move
from chopsticks.game.state import GameState, PlayerHands


def _to_player(value: Any) -> Player:
    try:
        return Player(value)
    except ValueError:
        raise InvalidPlayerError(f"Invalid player: {value!r}") from None


def _to_hand(value: Any) -> Hand:
    try:
        return Hand(value)
    except ValueError:
        raise InvalidHandError(f"Invalid hand name: {value!r}") from None


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class StateTransitionEngine:
    """
    Pure functions for state transitions in Chopsticks.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original. Illegal requests raise a subclass of ``InvalidMoveError`` before
    any new state is built.
    """

    @staticmethod
    def create_initial_state() -> GameState:
        """
        Create the starting position.

        Returns:
            A state with every hand at 1 and player1 to move
        """
        return GameState(
            current=Player.PLAYER1,
            player1=PlayerHands(),
            player2=PlayerHands(),
        )

    @staticmethod
    def clone_state(state: GameState) -> GameState:
        """
        Create an independent copy of a state.

        States are frozen, so sharing them is already safe; the copy exists
        for callers that want a distinct object to branch from.
        """
        return replace(
            state,
            player1=replace(state.player1),
            player2=replace(state.player2),
        )

    @staticmethod
    def get_current_player(state: GameState) -> Player:
        return state.current

    @staticmethod
    def get_opponent(player: Union[Player, str]) -> Player:
        return get_opponent(_to_player(player))

    @staticmethod
    def has_lost(state: GameState, player: Union[Player, str]) -> bool:
        """Check whether both of a player's hands are dead."""
        return state.hands_of(_to_player(player)).is_dead

    @staticmethod
    def is_terminal(state: GameState) -> bool:
        """Check whether either player has lost."""
        return any(StateTransitionEngine.has_lost(state, p) for p in PLAYERS)

    @staticmethod
    def get_winner(state: GameState) -> Optional[Player]:
        """
        Determine the winner of a finished game.

        Returns:
            The opponent of the single player who has lost, or None when nobody
            has lost yet or both players lost at the same time
        """
        losers = [p for p in PLAYERS if StateTransitionEngine.has_lost(state, p)]
        if len(losers) != 1:
            return None
        return get_opponent(losers[0])

    @staticmethod
    def switch_turn(state: GameState) -> GameState:
        """
        Pass the turn to the other player.

        Terminal states are not checked; whether to switch after a winning move
        is up to the caller.
        """
        return replace(state, current=get_opponent(state.current))

    @staticmethod
    def can_split(state: GameState, player: Union[Player, str]) -> bool:
        """
        Check whether a player may split.

        A split is only possible when exactly one hand is alive and that hand
        holds more than one finger.
        """
        hands = state.hands_of(_to_player(player))
        alive = hands.alive_hands
        return len(alive) == 1 and hands.get(alive[0]) > 1

    @staticmethod
    def attack(
        state: GameState,
        attacker_player: Union[Player, str],
        attacker_hand: Union[Hand, str],
        target_player: Union[Player, str],
        target_hand: Union[Hand, str],
    ) -> GameState:
        """
        Add the attacking hand's fingers to a target hand.

        A target reaching the death threshold is reset to 0. The attacking hand
        keeps its count. Attacking one's own other hand is allowed and is how
        fingers are transferred between hands.

        Args:
            state: Current game state
            attacker_player: Player attacking
            attacker_hand: Hand used to attack
            target_player: Owner of the target hand
            target_hand: Hand being attacked

        Returns:
            New game state with the target hand updated

        Raises:
            InvalidHandError: If either hand name is unknown
            InvalidPlayerError: If either player is unknown
            SelfTargetError: If a player attacks a hand with itself
            DeadHandError: If the attacking or target hand is dead
        """
        attacker_hand = _to_hand(attacker_hand)
        target_hand = _to_hand(target_hand)
        attacker_player = _to_player(attacker_player)
        target_player = _to_player(target_player)

        if attacker_player == target_player and attacker_hand == target_hand:
            raise SelfTargetError("A hand cannot attack itself")

        attacker_value = state.hands_of(attacker_player).get(attacker_hand)
        if attacker_value == 0:
            raise DeadHandError("Cannot attack with a dead hand")

        target_hands = state.hands_of(target_player)
        target_value = target_hands.get(target_hand)
        if target_value == 0:
            raise DeadHandError("Cannot target a dead hand")

        new_value = target_value + attacker_value
        if new_value >= DEATH_THRESHOLD:
            new_value = 0

        return state.with_hands(
            target_player, target_hands.with_count(target_hand, new_value)
        )

    @staticmethod
    def split(
        state: GameState, player: Union[Player, str], left: int, right: int
    ) -> GameState:
        """
        Redistribute a player's fingers between both hands.

        Args:
            state: Current game state
            player: Player splitting
            left: New left hand count
            right: New right hand count

        Returns:
            New game state with the player's hands set to ``left`` and ``right``

        Raises:
            SplitNotAllowedError: If the player cannot split
            InvalidSplitError: If the values are not integers, are below 1,
                reach the death threshold, or change the finger total
        """
        player = _to_player(player)
        if not StateTransitionEngine.can_split(state, player):
            raise SplitNotAllowedError(
                "Can only split with exactly one live hand holding more than one finger"
            )
        if not _is_integer(left) or not _is_integer(right):
            raise InvalidSplitError("Split values must be integers")
        if left < 1 or right < 1:
            raise InvalidSplitError("Split values must be at least 1")

        total = state.hands_of(player).total
        if left + right != total:
            raise InvalidSplitError(
                f"Split values must sum to the original total of {total}"
            )
        if left >= DEATH_THRESHOLD or right >= DEATH_THRESHOLD:
            raise InvalidSplitError(
                f"Split values must be less than {DEATH_THRESHOLD}"
            )

        return state.with_hands(player, PlayerHands(left=left, right=right))

    @staticmethod
    def apply_move(state: GameState, move: Union[Move, Dict[str, Any]]) -> GameState:
        """
        Apply a move for the player it names, or the player to move.

        The turn is not switched; callers do that with ``switch_turn``.

        Args:
            state: Current game state
            move: An ``AttackMove``, a ``SplitMove`` or their dictionary form

        Returns:
            New game state with the move applied

        Raises:
            InvalidMoveError: If the move is malformed or illegal
        """
        move = parse_move(move)
        if isinstance(move, AttackMove):
            return StateTransitionEngine.attack(
                state,
                move.attacker_player or state.current,
                move.attacker_hand,
                move.target_player,
                move.target_hand,
            )
        return StateTransitionEngine.split(
            state, move.player or state.current, move.left, move.right
        )

    @staticmethod
    def get_moves(state: GameState) -> List[Move]:
        """
        List every legal move for the player to move.

        Order: attacks on the opponent, transfers onto the player's other hand,
        then splits by ascending left count. Every returned move is accepted by
        ``apply_move`` for the same state.
        """
        current = state.current
        opponent = get_opponent(current)
        own = state.hands_of(current)
        other = state.hands_of(opponent)
        moves: List[Move] = []

        for source in own.alive_hands:
            for target in other.alive_hands:
                moves.append(
                    AttackMove(
                        attacker_player=current,
                        attacker_hand=source,
                        target_player=opponent,
                        target_hand=target,
                    )
                )

        for source in HANDS:
            if own.get(source) > 0 and own.get(source.other) > 0:
                moves.append(
                    AttackMove(
                        attacker_player=current,
                        attacker_hand=source,
                        target_player=current,
                        target_hand=source.other,
                    )
                )

        if StateTransitionEngine.can_split(state, current):
            total = own.total
            for left in range(1, total):
                right = total - left
                if left < DEATH_THRESHOLD and right < DEATH_THRESHOLD:
                    moves.append(SplitMove(player=current, left=left, right=right))

        return moves

    @staticmethod
    def get_board(state: GameState) -> Dict[str, Any]:
        """Plain snapshot for display and logging: ``[left, right]`` per player."""
        return {
            "current": state.current.value,
            "player1": state.player1.as_list(),
            "player2": state.player2.as_list(),
        }
