"""Top-level windows and the update call that drives them."""

from __future__ import annotations

from typing import Any, Optional

from muikit.backend import Display, get_display
from muikit.events import Event, EventQueue
from muikit.group import Element, Group


class Window:
    """A named window with its own event queue and root group of elements."""

    def __init__(self, name: str, width: int, height: int,
                 display: Optional[Display] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid window size: {width}x{height}")
        self.name = name
        self.width = width
        self.height = height
        self.events = EventQueue()
        self.surface: Optional[Any] = None
        self.closed = False
        self.display = display if display is not None else get_display()
        self.group = Group()
        self.display.attach(self)
        self.group.attach_window(self)

    def add(self, element: Element) -> None:
        """Add a text, image or group to the window."""
        self.group.add(element)

    def push_event(self, event: Event) -> None:
        self.events.push(event)

    def pop_event(self) -> Event:
        return self.events.pop()

    def pending(self) -> bool:
        return self.events.pending()

    def close(self) -> None:
        """Detach the window from its display; closing twice does nothing."""
        if self.closed:
            return
        self.display.detach(self)
        self.closed = True

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def update() -> None:
    """Process pending events of the shared display."""
    get_display().handle_events()