"""
Immutable state models for the Chopsticks hand game.

This module provides frozen dataclasses for representing the state of a
Chopsticks game. These classes are designed to be used with pure transition
functions that create new state instances rather than modifying existing ones,
so a state can be shared freely between callers without copying.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from chopsticks.game.constants import (
    DEATH_THRESHOLD,
    DEFAULT_PLAYER_NAMES,
    HANDS,
    PLAYERS,
    STARTING_COUNT,
    Hand,
    Player,
)


@dataclass(frozen=True)
class PlayerHands:
    """
    Immutable representation of one player's two hands.

    Attributes:
        left: Finger count on the left hand, 0 when the hand is dead
        right: Finger count on the right hand, 0 when the hand is dead
    """

    left: int = STARTING_COUNT
    right: int = STARTING_COUNT

    def __post_init__(self):
        for hand in HANDS:
            count = getattr(self, hand.value)
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(f"{hand.value} hand count must be an integer")
            if not 0 <= count < DEATH_THRESHOLD:
                raise ValueError(
                    f"{hand.value} hand count must be between 0 and "
                    f"{DEATH_THRESHOLD - 1}, got {count}"
                )

    def get(self, hand: Union[Hand, str]) -> int:
        """Get the count on a hand."""
        return getattr(self, Hand(hand).value)

    def with_count(self, hand: Union[Hand, str], count: int) -> "PlayerHands":
        """Return a copy with one hand set to ``count``."""
        return replace(self, **{Hand(hand).value: count})

    @property
    def total(self) -> int:
        return self.left + self.right

    @property
    def alive_hands(self) -> List[Hand]:
        return [hand for hand in HANDS if self.get(hand) > 0]

    @property
    def is_dead(self) -> bool:
        """True when both hands are eliminated."""
        return self.left == 0 and self.right == 0

    def as_list(self) -> List[int]:
        return [self.left, self.right]


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a Chopsticks game state.

    Attributes:
        current: The player to move next
        player1: Hands of the first player
        player2: Hands of the second player
    """

    current: Player = Player.PLAYER1
    player1: PlayerHands = field(default_factory=PlayerHands)
    player2: PlayerHands = field(default_factory=PlayerHands)

    def __post_init__(self):
        # Accept the plain string identifiers as well as the enum
        object.__setattr__(self, "current", Player(self.current))
        for player in PLAYERS:
            if not isinstance(getattr(self, player.value), PlayerHands):
                raise ValueError(f"{player.value} hands must be a PlayerHands")

    def hands_of(self, player: Union[Player, str]) -> PlayerHands:
        """Get the hands of a player."""
        return getattr(self, Player(player).value)

    def with_hands(
        self, player: Union[Player, str], hands: PlayerHands
    ) -> "GameState":
        """Return a copy with one player's hands replaced."""
        return replace(self, **{Player(player).value: hands})

    @property
    def hands(self) -> Dict[Player, PlayerHands]:
        """Mapping of player to hands, built fresh on every access."""
        return {player: self.hands_of(player) for player in PLAYERS}

    @property
    def total_fingers(self) -> int:
        return self.player1.total + self.player2.total

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "current": self.current.value,
            "hands": {
                player.value: {
                    "left": self.hands_of(player).left,
                    "right": self.hands_of(player).right,
                }
                for player in PLAYERS
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameState":
        """
        Build a state from its dictionary form.

        Raises:
            ValueError: If the dictionary does not describe a valid state
        """
        try:
            hands = data["hands"]
            return cls(
                current=data["current"],
                player1=PlayerHands(**hands["player1"]),
                player2=PlayerHands(**hands["player2"]),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed game state: {e}") from e

    def to_adapter_format(
        self, names: Optional[Mapping[Player, str]] = None
    ) -> Dict[str, Any]:
        """
        Convert the game state to a format suitable for platform adapters.

        Args:
            names: Optional display names keyed by player

        Returns:
            Dictionary in adapter-friendly format
        """
        names = names or DEFAULT_PLAYER_NAMES
        return {
            "current": self.current.value,
            "current_name": names.get(self.current, self.current.value),
            "players": [
                {
                    "id": player.value,
                    "name": names.get(player, player.value),
                    "left": self.hands_of(player).left,
                    "right": self.hands_of(player).right,
                    "is_out": self.hands_of(player).is_dead,
                }
                for player in PLAYERS
            ],
        }
