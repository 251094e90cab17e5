"""
Tests for the console adapter.
"""

import time

import pytest

from chopsticks.adapters import CLIAdapter
from chopsticks.common.io_interface import IOInterface, TestIOInterface
from chopsticks.events import EngineEventType
from chopsticks.game import (
    AttackMove,
    GameState,
    Hand,
    InvalidMoveError,
    Player,
    PlayerHands,
    SplitMove,
    get_moves,
)

P1, P2 = Player.PLAYER1, Player.PLAYER2
NAMES = {P1: "Alice", P2: "Bob"}


class SlowIOInterface(IOInterface):
    def __init__(self, delay=0.3):
        self.delay = delay
        self.reads = 0

    def output(self, message):
        pass

    def input(self, prompt):
        self.reads += 1
        time.sleep(self.delay)
        return "2"


@pytest.fixture
def io():
    return TestIOInterface()


@pytest.fixture
def adapter(io):
    return CLIAdapter(io_interface=io)


@pytest.mark.asyncio
async def test_render_game_state_marks_player_to_move(adapter, io):
    state = GameState(current=P2, player1=PlayerHands(0, 3), player2=PlayerHands(2, 4))

    await adapter.render_game_state(state.to_adapter_format(NAMES))

    assert io.sent_messages == [
        "\n=== Board ===",
        "  Alice: L=0 R=3",
        "* Bob: L=2 R=4",
        "=============\n",
    ]


@pytest.mark.asyncio
async def test_request_by_number(adapter, io):
    moves = get_moves(GameState())
    io.add_input("2")

    move = await adapter.request_player_action("player1", "Alice", moves)

    assert move == moves[1]
    assert "Alice's turn. Valid moves:" in io.sent_messages[0]
    assert io.sent_messages[1:] == [
        "1: A L L",
        "2: A L R",
        "3: A R L",
        "4: A R R",
        "5: T L R",
        "6: T R L",
    ]


@pytest.mark.asyncio
async def test_request_by_notation(adapter, io):
    state = GameState(player1=PlayerHands(0, 4))
    io.add_input(" s 1 3 ")

    move = await adapter.request_player_action("player1", "Alice", get_moves(state))

    assert move == SplitMove(left=1, right=3, player=P1)


@pytest.mark.asyncio
async def test_request_retries_after_bad_entries(adapter, io):
    moves = get_moves(GameState())
    io.add_input("hello")
    io.add_input("S 1 1")
    io.add_input("A R L")

    move = await adapter.request_player_action("player1", "Alice", moves)

    assert move == AttackMove(Hand.RIGHT, P2, Hand.LEFT, P1)
    assert any("Invalid move notation" in m for m in io.sent_messages)
    assert "That move is not legal now. Please try again." in io.sent_messages
    assert len(io.prompts) == 3


@pytest.mark.asyncio
async def test_request_gives_up_after_max_attempts(io):
    adapter = CLIAdapter(io_interface=io, max_attempts=2)
    io.add_input("9")
    io.add_input("nope")

    with pytest.raises(InvalidMoveError, match="Too many invalid entries"):
        await adapter.request_player_action("player1", "Alice", get_moves(GameState()))


@pytest.mark.asyncio
async def test_closed_input_counts_as_timeout(adapter):
    with pytest.raises(TimeoutError):
        await adapter.request_player_action("player1", "Alice", get_moves(GameState()))


@pytest.mark.asyncio
async def test_slow_input_times_out():
    adapter = CLIAdapter(io_interface=SlowIOInterface())

    with pytest.raises(TimeoutError):
        await adapter.request_player_action(
            "player1", "Alice", get_moves(GameState()), timeout_seconds=0.05
        )


@pytest.mark.asyncio
async def test_late_line_answers_next_prompt_without_second_reader():
    io = SlowIOInterface()
    adapter = CLIAdapter(io_interface=io)
    moves = get_moves(GameState())

    with pytest.raises(TimeoutError):
        await adapter.request_player_action(
            "player1", "Alice", moves, timeout_seconds=0.05
        )

    move = await adapter.request_player_action("player1", "Alice", moves)

    assert move == moves[1]
    assert io.reads == 1


@pytest.mark.asyncio
async def test_notify_game_event_messages(adapter, io):
    await adapter.notify_game_event(
        EngineEventType.MOVE_APPLIED,
        {"description": "Alice's left hits Bob's right (1 -> 2)"},
    )
    await adapter.notify_game_event(
        EngineEventType.HAND_DIED, {"player_name": "Bob", "hand": "right"}
    )
    await adapter.notify_game_event("TURN_SWITCHED", {"player_name": "Bob"})
    await adapter.notify_game_event(EngineEventType.GAME_ENDED, {"winner_name": "Alice"})
    await adapter.notify_game_event(EngineEventType.GAME_ENDED, {"winner_name": None})
    await adapter.notify_game_event(EngineEventType.ERROR, {"message": "Cannot target a dead hand"})
    await adapter.notify_game_event(EngineEventType.WARNING, {"player_name": "Alice"})

    assert io.sent_messages == [
        "Alice's left hits Bob's right (1 -> 2)",
        "Bob's right hand is out!",
        "Bob's turn",
        "Alice wins!",
        "Game over, no winner.",
        "Error: Cannot target a dead hand",
        "Alice loses the turn.",
    ]


@pytest.mark.asyncio
async def test_quiet_events_print_nothing(adapter, io):
    await adapter.notify_game_event(EngineEventType.GAME_CREATED, {"game_id": "x"})

    assert io.sent_messages == []


@pytest.mark.asyncio
async def test_handle_timeout_passes_turn(adapter, io):
    assert await adapter.handle_timeout("player2", "Bob") is None
    assert io.sent_messages == ["Bob timed out. Turn passes."]
