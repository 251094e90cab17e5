"""
Move values for Chopsticks.

A move is one of two frozen dataclasses, ``AttackMove`` or ``SplitMove``.
``Move`` is their union; there is no other kind of move. ``parse_move`` turns
the dictionary shapes used by UIs and transcripts into these typed values.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from chopsticks.game.constants import Hand, Player
from chopsticks.game.exceptions import InvalidMoveError

ATTACK = "attack"
SPLIT = "split"


@dataclass(frozen=True)
class AttackMove:
    """
    Add the attacking hand's count onto a target hand.

    Attributes:
        attacker_hand: Hand doing the attacking
        target_player: Owner of the target hand (the attacker itself for a transfer)
        target_hand: Hand receiving the fingers
        attacker_player: Attacking player, defaults to the player to move
    """

    attacker_hand: Union[Hand, str]
    target_player: Union[Player, str]
    target_hand: Union[Hand, str]
    attacker_player: Optional[Union[Player, str]] = None

    type = ATTACK

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": ATTACK,
            "attackerHand": str(self.attacker_hand),
            "targetPlayer": str(self.target_player),
            "targetHand": str(self.target_hand),
        }
        if self.attacker_player is not None:
            data["attackerPlayer"] = str(self.attacker_player)
        return data


@dataclass(frozen=True)
class SplitMove:
    """
    Redistribute a player's fingers between both hands.

    Attributes:
        left: New left hand count
        right: New right hand count
        player: Splitting player, defaults to the player to move
    """

    left: int
    right: int
    player: Optional[Union[Player, str]] = None

    type = SPLIT

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": SPLIT, "left": self.left, "right": self.right}
        if self.player is not None:
            data["player"] = str(self.player)
        return data


Move = Union[AttackMove, SplitMove]


def _field(data: Mapping[str, Any], camel: str, snake: str, required: bool = True):
    if camel in data:
        return data[camel]
    if snake in data:
        return data[snake]
    if required:
        raise InvalidMoveError(f"Invalid move: missing '{camel}'")
    return None


def parse_move(value: Any) -> Move:
    """
    Convert a move value into a typed move.

    Typed moves are returned unchanged. Mappings must carry ``type`` set to
    ``"attack"`` or ``"split"``; field names may be camelCase
    (``attackerHand``) or snake_case (``attacker_hand``).

    Raises:
        InvalidMoveError: If the value is missing, not a move, or has an unknown type
    """
    if isinstance(value, (AttackMove, SplitMove)):
        return value
    if not isinstance(value, Mapping) or not value.get("type"):
        raise InvalidMoveError("Invalid move")

    move_type = value["type"]
    if move_type == ATTACK:
        return AttackMove(
            attacker_hand=_field(value, "attackerHand", "attacker_hand"),
            target_player=_field(value, "targetPlayer", "target_player"),
            target_hand=_field(value, "targetHand", "target_hand"),
            attacker_player=_field(
                value, "attackerPlayer", "attacker_player", required=False
            ),
        )
    if move_type == SPLIT:
        return SplitMove(
            left=_field(value, "left", "left"),
            right=_field(value, "right", "right"),
            player=_field(value, "player", "player", required=False),
        )
    raise InvalidMoveError(f"Unknown move type: {move_type!r}")
