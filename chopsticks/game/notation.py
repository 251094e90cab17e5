"""
Chopsticks Move Notation

Format Specification:
--------------------
HANDS: L = left, R = right

MOVES (always from the point of view of the player to move):
  A <from> <to>   = Attack the opponent's <to> hand with own <from> hand
  T <from> <to>   = Transfer: attack own <to> hand with own <from> hand
  S <left> <right> = Split own fingers into <left> and <right>

EXAMPLE:
  A L R   (left hand attacks opponent's right hand)
  T R L   (right hand adds its fingers to own left hand)
  S 1 2   (split 3 fingers into 1 on the left and 2 on the right)
"""

import re
from typing import Mapping, Optional

from chopsticks.game.constants import DEFAULT_PLAYER_NAMES, Hand, Player, get_opponent
from chopsticks.game.exceptions import InvalidMoveError
from chopsticks.game.moves import AttackMove, Move, SplitMove
from chopsticks.game.state import GameState

HAND_CODES = {Hand.LEFT: "L", Hand.RIGHT: "R"}
CODE_HANDS = {code: hand for hand, code in HAND_CODES.items()}

_NOTATION_RE = re.compile(r"^\s*([ATS])\s+(\S+)\s+(\S+)\s*$", re.IGNORECASE)


def format_move(move: Move, player: Player) -> str:
    """
    Write a move in notation.

    Args:
        move: Move to format
        player: Player making the move, used when the move leaves it implicit
    """
    if isinstance(move, SplitMove):
        return f"S {move.left} {move.right}"

    attacker = Player(move.attacker_player or player)
    kind = "T" if Player(move.target_player) == attacker else "A"
    return f"{kind} {HAND_CODES[Hand(move.attacker_hand)]} {HAND_CODES[Hand(move.target_hand)]}"


def parse_notation(text: str, player: Player) -> Move:
    """
    Read a move written in notation.

    Args:
        text: Notation such as ``"A L R"`` or ``"S 1 2"``
        player: Player making the move

    Raises:
        InvalidMoveError: If the text is not valid notation
    """
    match = _NOTATION_RE.match(text or "")
    if not match:
        raise InvalidMoveError(f"Invalid move notation: {text!r}")

    kind, first, second = match.group(1).upper(), match.group(2), match.group(3)
    if kind == "S":
        if not (first.isdigit() and second.isdigit()):
            raise InvalidMoveError(f"Split values must be whole numbers: {text!r}")
        return SplitMove(player=player, left=int(first), right=int(second))

    try:
        source = CODE_HANDS[first.upper()]
        target = CODE_HANDS[second.upper()]
    except KeyError:
        raise InvalidMoveError(f"Hands must be L or R: {text!r}") from None

    return AttackMove(
        attacker_player=player,
        attacker_hand=source,
        target_player=player if kind == "T" else get_opponent(player),
        target_hand=target,
    )


def describe_move(
    before: GameState,
    move: Move,
    after: GameState,
    names: Optional[Mapping[Player, str]] = None,
) -> str:
    """
    Describe an applied move in a sentence, for history lists and transcripts.

    Args:
        before: State the move was applied to
        move: The move
        after: Resulting state
        names: Optional display names keyed by player
    """
    names = names or DEFAULT_PLAYER_NAMES

    if isinstance(move, SplitMove):
        player = Player(move.player or before.current)
        total = before.hands_of(player).total
        return f"{names[player]} splits {total} into {move.left} and {move.right}"

    attacker = Player(move.attacker_player or before.current)
    target = Player(move.target_player)
    source_hand, target_hand = Hand(move.attacker_hand), Hand(move.target_hand)
    added = before.hands_of(attacker).get(source_hand)
    old = before.hands_of(target).get(target_hand)
    new = after.hands_of(target).get(target_hand)

    if target == attacker:
        text = f"{names[attacker]} moves {added} from {source_hand} to {target_hand}"
    else:
        text = (
            f"{names[attacker]}'s {source_hand} hits "
            f"{names[target]}'s {target_hand}"
        )
    if new == 0:
        return f"{text} ({old} + {added}, hand is out)"
    return f"{text} ({old} -> {new})"
