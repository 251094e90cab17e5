"""
Tests for the dummy adapter and the adapter base class.
"""

import pytest

from chopsticks.adapters import DummyAdapter
from chopsticks.events import EngineEventType
from chopsticks.game import AttackMove, GameState, Hand, Player, SplitMove, get_moves

P1, P2 = Player.PLAYER1, Player.PLAYER2


@pytest.fixture
def moves():
    return get_moves(GameState())


@pytest.mark.asyncio
async def test_scripted_moves_come_first(moves):
    scripted = [SplitMove(left=3, right=3), AttackMove(Hand.LEFT, P2, Hand.LEFT)]
    adapter = DummyAdapter(auto_moves={"player1": scripted})

    # Scripted moves are returned even when they are not legal
    assert await adapter.request_player_action("player1", "Alice", moves) == scripted[0]
    assert await adapter.request_player_action("player1", "Alice", moves) == scripted[1]
    assert await adapter.request_player_action("player1", "Alice", moves) == moves[0]
    assert adapter.move_index == {"player1": 2}


@pytest.mark.asyncio
async def test_strategy_function_used_when_script_runs_out(moves):
    adapter = DummyAdapter(strategy_function=lambda player_id, valid: valid[-1])

    assert await adapter.request_player_action("player2", "Bob", moves) == moves[-1]


@pytest.mark.asyncio
async def test_no_valid_moves_raises():
    adapter = DummyAdapter()

    with pytest.raises(ValueError, match="No valid moves"):
        await adapter.request_player_action("player1", "Alice", [])


@pytest.mark.asyncio
async def test_events_and_states_are_recorded():
    adapter = DummyAdapter()

    await adapter.notify_game_event(EngineEventType.TURN_SWITCHED, {"player_id": "player2"})
    await adapter.notify_game_event("CUSTOM", {"value": 1})
    await adapter.render_game_state({"current": "player1", "players": []})
    assert await adapter.handle_timeout("player1", "Alice") is None

    assert adapter.events[0] == ("TURN_SWITCHED", {"player_id": "player2"})
    assert adapter.get_events_by_type(EngineEventType.TURN_SWITCHED) == [{"player_id": "player2"}]
    assert adapter.get_events_by_type("CUSTOM") == [{"value": 1}]
    assert adapter.rendered_states == [{"current": "player1", "players": []}]
    assert adapter.timeouts == ["player1"]

    adapter.clear()

    assert adapter.events == []
    assert adapter.rendered_states == []
    assert adapter.timeouts == []


@pytest.mark.asyncio
async def test_verbose_output(capsys, moves):
    adapter = DummyAdapter(verbose=True)

    await adapter.render_game_state(
        {
            "current_name": "Alice",
            "players": [{"name": "Alice", "left": 1, "right": 1}],
        }
    )
    await adapter.notify_game_event("ERROR", {"message": "boom"})

    out = capsys.readouterr().out
    assert "Alice: 1 | 1" in out
    assert "To move: Alice" in out
    assert "Event: ERROR" in out
    assert "message: boom" in out

