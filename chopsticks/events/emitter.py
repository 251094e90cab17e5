"""
Event system for Chopsticks game sessions.

This module lets adapters, loggers and tests observe a running game without
the game knowing about them. Only the session layer emits events; the rules
engine itself stays free of side effects.

Handlers subscribe to one event type with ``on``/``once`` or to every event
with ``on_any``. A handler for one type receives the event data; a handler
for every event receives an ``(event_type, data)`` pair. Event types given as
enums are keyed by their name, so ``EngineEventType.HAND_DIED`` and
``"HAND_DIED"`` are the same event.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger("chopsticks.events")

EventKey = Union[str, Enum]


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


@dataclass(eq=False)
class Subscription:
    """A registered handler."""

    callback: Callable
    priority: EventPriority
    once: bool = False
    # Handlers for every event get (event_type, data) instead of data
    wildcard: bool = False


def _event_name(event_type: EventKey) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Publish/subscribe hub for game events.

    Handlers run in priority order, highest first, and in subscription order
    within a priority. Subscribing and emitting are safe from any thread; the
    handlers themselves are called outside the lock.
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)
        self._wildcards: List[Subscription] = []
        self._lock = threading.RLock()

    def _add(self, bucket: List[Subscription], sub: Subscription) -> Callable[[], None]:
        with self._lock:
            position = len(bucket)
            for i, existing in enumerate(bucket):
                if existing.priority.value < sub.priority.value:
                    position = i
                    break
            bucket.insert(position, sub)

        def unsubscribe() -> None:
            with self._lock:
                if sub in bucket:
                    bucket.remove(sub)

        return unsubscribe

    def on(
        self,
        event_type: EventKey,
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Returns:
            A function that removes the subscription
        """
        bucket = self._subscriptions[_event_name(event_type)]
        return self._add(bucket, Subscription(callback, priority))

    def once(
        self,
        event_type: EventKey,
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable[[], None]:
        """Subscribe to the next occurrence of an event type only."""
        bucket = self._subscriptions[_event_name(event_type)]
        return self._add(bucket, Subscription(callback, priority, once=True))

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable[[], None]:
        """Subscribe to every event; the callback gets ``(event_type, data)``."""
        return self._add(self._wildcards, Subscription(callback, priority, wildcard=True))

    def listener_count(self, event_type: Optional[EventKey] = None) -> int:
        """Number of handlers for an event type, or of every-event handlers."""
        with self._lock:
            if event_type is None:
                return len(self._wildcards)
            return len(self._subscriptions.get(_event_name(event_type), []))

    def emit(self, event_type: EventKey, data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        A failing handler is logged and does not stop the others.
        """
        name = _event_name(event_type)

        with self._lock:
            bucket = self._subscriptions.get(name, [])
            to_call = list(bucket) + list(self._wildcards)
            # Drop one-shot handlers before running them so re-entrant emits skip them
            bucket[:] = [sub for sub in bucket if not sub.once]

        for sub in to_call:
            try:
                sub.callback((name, data) if sub.wildcard else data)
            except Exception as e:
                logger.error(f"Error in event handler for {name}: {e}", exc_info=True)

    def remove_all_listeners(self, event_type: Optional[EventKey] = None) -> None:
        """
        Remove the listeners of one event type, or every listener when no type
        is given.
        """
        with self._lock:
            if event_type is None:
                self._subscriptions.clear()
                self._wildcards.clear()
            else:
                self._subscriptions.pop(_event_name(event_type), None)


class EventBus:
    """
    Process-wide event emitter shared by every game session.
    """

    _instance: Optional[EventEmitter] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """Return the shared emitter, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared emitter and all of its listeners."""
        with cls._lock:
            cls._instance = None


class EngineEventType(Enum):
    """Event types emitted by a Chopsticks game session."""

    # Lifecycle
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"
    GAME_CREATED = "game_created"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"

    # Turns
    MOVE_APPLIED = "move_applied"
    HAND_DIED = "hand_died"
    HANDS_SPLIT = "hands_split"
    TURN_SWITCHED = "turn_switched"
    PLAYER_DECISION_NEEDED = "player_decision_needed"
    PLAYER_TIMEOUT = "player_timeout"

    # ERROR: a move was rejected; WARNING: a turn was passed because of it
    ERROR = "error"
    WARNING = "warning"
