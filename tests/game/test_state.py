import pytest

from chopsticks.game import GameState, Hand, Player, PlayerHands


def test_player_hands_defaults():
    hands = PlayerHands()

    assert hands.as_list() == [1, 1]
    assert hands.total == 2
    assert hands.alive_hands == [Hand.LEFT, Hand.RIGHT]
    assert not hands.is_dead


def test_player_hands_get_and_with_count():
    hands = PlayerHands(3, 0)

    assert hands.get("left") == 3
    assert hands.get(Hand.RIGHT) == 0
    assert hands.alive_hands == [Hand.LEFT]
    assert hands.with_count(Hand.RIGHT, 2) == PlayerHands(3, 2)
    # Original is untouched
    assert hands == PlayerHands(3, 0)


@pytest.mark.parametrize("left,right", [(5, 1), (-1, 1), (1, 7), (1.0, 1), (True, 1)])
def test_player_hands_reject_counts_outside_range(left, right):
    with pytest.raises(ValueError):
        PlayerHands(left, right)


def test_game_state_accepts_string_player():
    state = GameState(current="player2")

    assert state.current is Player.PLAYER2


def test_game_state_rejects_unknown_player():
    with pytest.raises(ValueError):
        GameState(current="player3")


def test_game_state_rejects_bad_hands():
    with pytest.raises(ValueError):
        GameState(player1=[1, 1])


def test_hands_mapping_is_a_fresh_copy():
    state = GameState(player1=PlayerHands(2, 3))

    hands = state.hands
    hands[Player.PLAYER1] = PlayerHands(0, 0)

    assert state.player1 == PlayerHands(2, 3)
    assert state.hands[Player.PLAYER1] == PlayerHands(2, 3)


def test_dict_round_trip():
    state = GameState(
        current=Player.PLAYER2, player1=PlayerHands(0, 3), player2=PlayerHands(4, 1)
    )

    data = state.to_dict()

    assert data == {
        "current": "player2",
        "hands": {
            "player1": {"left": 0, "right": 3},
            "player2": {"left": 4, "right": 1},
        },
    }
    assert GameState.from_dict(data) == state


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"current": "player1"},
        {"current": "player1", "hands": {"player1": {"left": 1, "right": 1}}},
        {
            "current": "player1",
            "hands": {
                "player1": {"left": 1, "right": 1},
                "player2": {"left": 1, "thumb": 1},
            },
        },
        {
            "current": "player1",
            "hands": {
                "player1": {"left": 1, "right": 5},
                "player2": {"left": 1, "right": 1},
            },
        },
    ],
)
def test_from_dict_rejects_malformed_data(data):
    with pytest.raises(ValueError):
        GameState.from_dict(data)


def test_adapter_format_uses_names():
    state = GameState(player2=PlayerHands(0, 0))

    data = state.to_adapter_format({Player.PLAYER1: "Alice", Player.PLAYER2: "Bob"})

    assert data["current"] == "player1"
    assert data["current_name"] == "Alice"
    assert data["players"][1] == {
        "id": "player2",
        "name": "Bob",
        "left": 0,
        "right": 0,
        "is_out": True,
    }


def test_adapter_format_default_names():
    data = GameState().to_adapter_format()

    assert [p["name"] for p in data["players"]] == ["Player 1", "Player 2"]
