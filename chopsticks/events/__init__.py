"""
Event system for Chopsticks game sessions.

This package provides the publish/subscribe layer used by the game session
to tell adapters and observers what happened.
"""

from chopsticks.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
