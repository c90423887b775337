"""
Brick Breaker Event Types

Events are what the simulation reports outward after each tick. The
session forwards them to the audio notifier and returns them to the
caller, where renderers use them for cosmetic effects (particles,
flashes) and front-ends for HUD updates.

Events are immutable records; the core never reads them back.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Kinds of events emitted by the simulation."""
    WALL_BOUNCE = "wall_bounce"
    PADDLE_BOUNCE = "paddle_bounce"
    BRICK_HIT = "brick_hit"
    BRICK_DESTROYED = "brick_destroyed"
    POWERUP_SPAWNED = "powerup_spawned"
    POWERUP_COLLECTED = "powerup_collected"
    POWERUP_EXPIRED = "powerup_expired"
    SCORE_CHANGED = "score_changed"
    LIFE_LOST = "life_lost"
    STAGE_CLEARED = "stage_cleared"
    GAME_OVER = "game_over"


class GameEvent(BaseModel):
    """
    A single event produced during a tick.

    Attributes:
        type: What happened
        tick: Session tick counter at emission time
        data: Event-specific payload (brick type, position, points, ...)

    Examples:
        >>> event = GameEvent(type=EventType.BRICK_HIT, tick=12,
        ...                   data={'brick_type': 'STRONG'})
        >>> event.data['brick_type']
        'STRONG'
    """
    type: EventType
    tick: int = Field(default=0, ge=0, description="Session tick at emission")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event payload")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"GameEvent({self.type.value}@{self.tick}, {self.data})"


class EventLog:
    """Collects events emitted during the current tick.

    Shared by the session, physics and power-up system so every event
    carries the same tick stamp.
    """

    def __init__(self) -> None:
        self.tick = 0
        self._events: List[GameEvent] = []

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """Record an event stamped with the current tick."""
        event = GameEvent(type=event_type, tick=self.tick, data=data)
        self._events.append(event)
        return event

    def drain(self) -> List[GameEvent]:
        """Get and clear collected events."""
        events = self._events[:]
        self._events.clear()
        return events

    def __len__(self) -> int:
        return len(self._events)
