"""Chopsticks constants: player and hand identifiers and the counter limits."""

from enum import Enum


class Player(str, Enum):
    """The two fixed seats of a Chopsticks game."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"

    def __str__(self) -> str:
        return self.value


class Hand(str, Enum):
    """The two hands every player owns."""

    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @property
    def other(self) -> "Hand":
        return Hand.RIGHT if self is Hand.LEFT else Hand.LEFT


PLAYERS = (Player.PLAYER1, Player.PLAYER2)
HANDS = (Hand.LEFT, Hand.RIGHT)

# A counter reaching this value dies (resets to 0)
DEATH_THRESHOLD = 5
STARTING_COUNT = 1

DEFAULT_PLAYER_NAMES = {
    Player.PLAYER1: "Player 1",
    Player.PLAYER2: "Player 2",
}


def get_opponent(player: Player) -> Player:
    """Get the other seat."""
    return Player.PLAYER2 if player == Player.PLAYER1 else Player.PLAYER1
