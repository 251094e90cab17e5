import pytest

from chopsticks.game import (
    AttackMove,
    Hand,
    InvalidMoveError,
    Player,
    SplitMove,
    parse_move,
)


def test_parse_camel_case_attack():
    move = parse_move(
        {
            "type": "attack",
            "attackerPlayer": "player1",
            "attackerHand": "left",
            "targetPlayer": "player2",
            "targetHand": "right",
        }
    )

    assert move == AttackMove(
        attacker_hand="left",
        target_player="player2",
        target_hand="right",
        attacker_player="player1",
    )


def test_parse_snake_case_attack_without_player():
    move = parse_move(
        {
            "type": "attack",
            "attacker_hand": "right",
            "target_player": "player1",
            "target_hand": "left",
        }
    )

    assert isinstance(move, AttackMove)
    assert move.attacker_player is None
    assert move.attacker_hand == Hand.RIGHT


def test_parse_split():
    move = parse_move({"type": "split", "left": 1, "right": 2, "player": "player2"})

    assert move == SplitMove(left=1, right=2, player="player2")


def test_parse_returns_typed_moves_unchanged():
    move = SplitMove(left=2, right=2)

    assert parse_move(move) is move


@pytest.mark.parametrize(
    "value,message",
    [
        (None, "Invalid move"),
        ({}, "Invalid move"),
        ({"type": ""}, "Invalid move"),
        ({"type": "clap"}, "Unknown move type"),
        ({"type": "split", "left": 1}, "missing 'right'"),
        ({"type": "attack", "attackerHand": "left"}, "missing 'targetPlayer'"),
    ],
)
def test_parse_rejects_bad_values(value, message):
    with pytest.raises(InvalidMoveError, match=message):
        parse_move(value)


def test_to_dict_matches_wire_shape():
    attack = AttackMove(Hand.LEFT, Player.PLAYER2, Hand.RIGHT, Player.PLAYER1)
    split = SplitMove(1, 3)

    assert attack.to_dict() == {
        "type": "attack",
        "attackerPlayer": "player1",
        "attackerHand": "left",
        "targetPlayer": "player2",
        "targetHand": "right",
    }
    assert split.to_dict() == {"type": "split", "left": 1, "right": 3}
    assert parse_move(attack.to_dict()) == attack
