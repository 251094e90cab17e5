"""
Tests for the base GameEngine class.

This module contains tests for the GameEngine base class
to ensure it provides the expected interface and behavior.
"""

import pytest
from unittest.mock import patch

from chopsticks.adapters import DummyAdapter
from chopsticks.engine import GameEngine
from chopsticks.events import EventBus


class MockEngine(GameEngine):
    """Minimal GameEngine for testing."""

    async def initialize(self):
        await super().initialize()

    async def shutdown(self):
        await super().shutdown()

    async def start_game(self):
        self.state = "started"

    async def execute_move(self, move):
        return move

    async def render_state(self):
        await self.adapter.render_game_state({"state": self.state})


@pytest.fixture
def engine():
    return MockEngine(DummyAdapter())


def test_initialization(engine):
    """Test that the engine initializes correctly."""
    assert isinstance(engine.adapter, DummyAdapter)
    assert engine.config == {}
    assert engine.event_bus is EventBus.get_instance()
    assert engine.state is None


def test_config():
    """Test that the engine uses the provided config."""
    engine = MockEngine(DummyAdapter(), {"max_turns": 10})
    assert engine.config == {"max_turns": 10}


def test_cannot_instantiate_abstract_engine():
    with pytest.raises(TypeError):
        GameEngine(DummyAdapter())


@pytest.mark.asyncio
@patch.object(DummyAdapter, "initialize")
async def test_initialize(mock_initialize, engine):
    """Test that initialize starts the adapter."""
    await engine.initialize()
    mock_initialize.assert_called_once()


@pytest.mark.asyncio
@patch.object(DummyAdapter, "shutdown")
async def test_shutdown(mock_shutdown, engine):
    """Test that shutdown stops the adapter."""
    await engine.shutdown()
    mock_shutdown.assert_called_once()


@pytest.mark.asyncio
async def test_render_state_goes_to_adapter(engine):
    await engine.start_game()
    await engine.render_state()

    assert engine.adapter.rendered_states == [{"state": "started"}]
