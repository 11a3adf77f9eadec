"""Window events and the bounded queue that holds them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

WINDOW_EVENT_CAPACITY = 32


class EventType(IntEnum):
    """Kinds of events a window can report."""

    NONE = 0
    QUIT = 1
    RESIZE = 2
    KEYPRESS = 3
    KEYRELEASE = 4
    MOUSEPRESS = 5
    MOUSE_RELEASE = 6


@dataclass(frozen=True)
class ResizeInfo:
    """Window size before and after a resize."""

    pre_width: int
    pre_height: int
    new_width: int
    new_height: int


@dataclass(frozen=True)
class Event:
    """A single window event."""

    type: EventType = EventType.NONE
    resize: Optional[ResizeInfo] = None


class EventQueue:
    """Bounded event store.

    The most recently pushed event is popped first.  When the queue is
    full, pushing a new event discards the oldest one.
    """

    def __init__(self, capacity: int = WINDOW_EVENT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._events: deque[Event] = deque(maxlen=capacity)

    def push(self, event: Event) -> None:
        """Store an event, dropping the oldest one if the queue is full."""
        self._events.appendleft(event)

    def pop(self) -> Event:
        """Remove and return the newest event, or a NONE event if empty."""
        if self._events:
            return self._events.popleft()
        return Event()

    def pending(self) -> bool:
        """Whether any event is waiting."""
        return bool(self._events)

    def __len__(self) -> int:
        return len(self._events)