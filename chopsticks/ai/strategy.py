"""
Move selection strategies for computer-controlled Chopsticks players.

A strategy looks at a state and returns one of the moves listed by
``StateTransitionEngine.get_moves`` for it, or None when there is no legal
move. Strategies never modify the state they are given.
"""

import logging
import math
import random
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Type, Union

from chopsticks.game.constants import Player, get_opponent
from chopsticks.game.exceptions import InvalidMoveError
from chopsticks.game.moves import Move, SplitMove
from chopsticks.game.state import GameState
from chopsticks.game.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)

WIN_SCORE = 10000


def heuristic(state: GameState, player: Player) -> float:
    """
    Score a position for ``player``; higher is better.

    Dead opponent hands count for 50, dead own hands against 40, and fewer
    fingers on the opponent's hands is slightly better.
    """
    own = state.hands_of(player)
    other = state.hands_of(get_opponent(player))
    dead_other = (other.left == 0) + (other.right == 0)
    dead_own = (own.left == 0) + (own.right == 0)
    return dead_other * 50 - dead_own * 40 + (8 - other.total)


class Strategy(ABC):
    """Base class for computer players."""

    name = "strategy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @abstractmethod
    def select_move(self, state: GameState) -> Optional[Move]:
        """Pick a legal move for the player to move, or None if there is none."""
        pass

    def __call__(self, state: GameState) -> Optional[Move]:
        return self.select_move(state)


class RandomStrategy(Strategy):
    """Pick uniformly among the legal moves."""

    name = "random"

    def select_move(self, state: GameState) -> Optional[Move]:
        moves = StateTransitionEngine.get_moves(state)
        if not moves:
            return None
        return self.rng.choice(moves)


class GreedyStrategy(Strategy):
    """Play the move with the best immediate outcome, breaking ties randomly."""

    name = "greedy"

    def evaluate_move(self, state: GameState, move: Move) -> float:
        me = state.current
        try:
            after = StateTransitionEngine.apply_move(state, move)
        except InvalidMoveError:
            return -math.inf
        if StateTransitionEngine.get_winner(after) == me:
            return WIN_SCORE

        score = heuristic(after, me)
        if isinstance(move, SplitMove):
            # Prefer even splits
            score += 4 - abs(move.left - move.right)
        return score

    def select_move(self, state: GameState) -> Optional[Move]:
        moves = StateTransitionEngine.get_moves(state)
        if not moves:
            return None

        best_score = -math.inf
        best: List[Move] = []
        for move in moves:
            score = self.evaluate_move(state, move)
            if score > best_score:
                best_score = score
                best = [move]
            elif score == best_score:
                best.append(move)
        return self.rng.choice(best)


class MinimaxStrategy(Strategy):
    """
    Depth-limited minimax with alpha-beta pruning.

    Wins found sooner score higher, losses found later score higher. Positions
    at the depth limit are scored with ``evaluate`` from the searching
    player's point of view.
    """

    name = "minimax"

    def __init__(
        self,
        depth: int = 4,
        evaluate: Callable[[GameState, Player], float] = heuristic,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(rng)
        if depth < 1:
            raise ValueError("Search depth must be at least 1")
        self.depth = depth
        self.evaluate = evaluate
        self.positions_evaluated = 0

    @staticmethod
    def _next_state(state: GameState, move: Move) -> GameState:
        after = StateTransitionEngine.apply_move(state, move)
        if StateTransitionEngine.is_terminal(after):
            return after
        return StateTransitionEngine.switch_turn(after)

    def select_move(self, state: GameState) -> Optional[Move]:
        moves = StateTransitionEngine.get_moves(state)
        if not moves:
            return None

        self.positions_evaluated = 0
        me = state.current
        best_score = -math.inf
        best: List[Move] = []
        for move in moves:
            score = self._minimax(
                self._next_state(state, move), self.depth - 1, me, -math.inf, math.inf
            )
            if score > best_score:
                best_score = score
                best = [move]
            elif score == best_score:
                best.append(move)

        logger.debug(
            "Minimax evaluated %d positions, best score %s",
            self.positions_evaluated,
            best_score,
        )
        return self.rng.choice(best)

    def _minimax(
        self,
        state: GameState,
        depth: int,
        me: Player,
        alpha: float,
        beta: float,
    ) -> float:
        self.positions_evaluated += 1

        if StateTransitionEngine.is_terminal(state):
            winner = StateTransitionEngine.get_winner(state)
            if winner == me:
                return WIN_SCORE + depth
            if winner is None:
                return 0
            return -WIN_SCORE - depth

        moves = StateTransitionEngine.get_moves(state)
        if depth == 0 or not moves:
            return self.evaluate(state, me)

        if state.current == me:
            value = -math.inf
            for move in moves:
                value = max(
                    value,
                    self._minimax(
                        self._next_state(state, move), depth - 1, me, alpha, beta
                    ),
                )
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value

        value = math.inf
        for move in moves:
            value = min(
                value,
                self._minimax(self._next_state(state, move), depth - 1, me, alpha, beta),
            )
            beta = min(beta, value)
            if beta <= alpha:
                break
        return value


STRATEGIES: Dict[str, Type[Strategy]] = {
    RandomStrategy.name: RandomStrategy,
    GreedyStrategy.name: GreedyStrategy,
    MinimaxStrategy.name: MinimaxStrategy,
}


def get_strategy(
    strategy: Union[str, Strategy], rng: Optional[random.Random] = None
) -> Strategy:
    """
    Look up a strategy by name.

    Strategy instances are returned unchanged.

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(strategy, Strategy):
        return strategy
    try:
        strategy_class = STRATEGIES[strategy.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown strategy: {strategy}") from None
    return strategy_class(rng=rng)
