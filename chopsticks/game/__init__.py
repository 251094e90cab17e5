"""
Chopsticks game engine.

This module provides the rules of Chopsticks as pure functions over immutable
state: state models, move values, legal move generation, move application
and terminal detection.
"""

from chopsticks.game.constants import (
    DEATH_THRESHOLD as DEATH_THRESHOLD,
    HANDS as HANDS,
    PLAYERS as PLAYERS,
    Hand as Hand,
    Player as Player,
    get_opponent as get_opponent,
)
from chopsticks.game.exceptions import (
    DeadHandError as DeadHandError,
    GameOverError as GameOverError,
    InvalidHandError as InvalidHandError,
    InvalidMoveError as InvalidMoveError,
    InvalidPlayerError as InvalidPlayerError,
    InvalidSplitError as InvalidSplitError,
    SelfTargetError as SelfTargetError,
    SplitNotAllowedError as SplitNotAllowedError,
)
from chopsticks.game.moves import (
    AttackMove as AttackMove,
    Move as Move,
    SplitMove as SplitMove,
    parse_move as parse_move,
)
from chopsticks.game.state import GameState as GameState, PlayerHands as PlayerHands
from chopsticks.game.transitions import StateTransitionEngine as StateTransitionEngine

create_initial_state = StateTransitionEngine.create_initial_state
clone_state = StateTransitionEngine.clone_state
get_current_player = StateTransitionEngine.get_current_player
has_lost = StateTransitionEngine.has_lost
is_terminal = StateTransitionEngine.is_terminal
get_winner = StateTransitionEngine.get_winner
switch_turn = StateTransitionEngine.switch_turn
can_split = StateTransitionEngine.can_split
attack = StateTransitionEngine.attack
split = StateTransitionEngine.split
apply_move = StateTransitionEngine.apply_move
get_moves = StateTransitionEngine.get_moves
get_board = StateTransitionEngine.get_board

__all__ = [
    "DEATH_THRESHOLD",
    "HANDS",
    "PLAYERS",
    "Hand",
    "Player",
    "get_opponent",
    "DeadHandError",
    "GameOverError",
    "InvalidHandError",
    "InvalidMoveError",
    "InvalidPlayerError",
    "InvalidSplitError",
    "SelfTargetError",
    "SplitNotAllowedError",
    "AttackMove",
    "Move",
    "SplitMove",
    "parse_move",
    "GameState",
    "PlayerHands",
    "StateTransitionEngine",
    "create_initial_state",
    "clone_state",
    "get_current_player",
    "has_lost",
    "is_terminal",
    "get_winner",
    "switch_turn",
    "can_split",
    "attack",
    "split",
    "apply_move",
    "get_moves",
    "get_board",
]
