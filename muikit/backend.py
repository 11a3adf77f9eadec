"""The display that owns native windows and turns their events into window events."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

import pygame

from muikit.events import Event, EventType, ResizeInfo

BACKGROUND_COLOUR = (0xCB, 0xCB, 0xCB, 0xFF)

_EXPOSE_EVENTS = frozenset((pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED))


@dataclass
class _Native:
    background: pygame.Surface
    foreground: pygame.Surface


def _create_surfaces(width: int, height: int) -> _Native:
    size = (width, height)
    return _Native(pygame.Surface(size), pygame.Surface(size, pygame.SRCALPHA, 32))


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"invalid window size: {width}x{height}")


class Display:
    """Connection to the screen; the most recently attached window is shown."""

    def __init__(self) -> None:
        self._native: Dict[Any, _Native] = {}
        self._order: List[Any] = []

    @property
    def windows(self) -> Tuple[Any, ...]:
        """Attached windows, most recently attached first."""
        return tuple(self._order)

    @property
    def active(self) -> Optional[Any]:
        """The window shown on screen and receiving events."""
        return self._order[0] if self._order else None

    def _lookup(self, window: Any) -> _Native:
        try:
            return self._native[window]
        except KeyError:
            raise ValueError("window is not attached to this display") from None

    def _show(self, window: Any) -> None:
        pygame.display.set_mode((max(1, window.width), max(1, window.height)), pygame.RESIZABLE)
        pygame.display.set_caption(window.name)

    def attach(self, window: Any) -> None:
        """Create the drawing surfaces for ``window`` and show it."""
        if window in self._native:
            raise ValueError("window is already attached")
        _check_size(window.width, window.height)
        if not pygame.display.get_init():
            pygame.display.init()
        native = _create_surfaces(window.width, window.height)
        self._native[window] = native
        self._order.insert(0, window)
        window.surface = native.background
        self._show(window)

    def detach(self, window: Any) -> None:
        """Release ``window``; the display closes when no window is left."""
        self._lookup(window)
        del self._native[window]
        self._order.remove(window)
        window.surface = None
        if self._order:
            self._show(self._order[0])
        else:
            pygame.display.quit()

    def render(self, window: Any) -> None:
        """Clear the window to its background, draw its elements and present it."""
        native = self._lookup(window)
        native.background.fill(BACKGROUND_COLOUR)
        native.foreground.fill(BACKGROUND_COLOUR)
        native.background.blit(native.foreground, (0, 0))
        window.group.update()
        if window is self.active:
            screen = pygame.display.get_surface()
            if screen is not None:
                screen.blit(native.background, (0, 0))
                pygame.display.flip()

    def resize(self, window: Any, width: int, height: int) -> None:
        """Give ``window`` a new size and fresh surfaces of that size."""
        self._lookup(window)
        _check_size(width, height)
        window.width, window.height = width, height
        native = _create_surfaces(width, height)
        self._native[window] = native
        window.surface = native.background
        if window is self.active:
            self._show(window)

    def handle_events(self) -> None:
        """Process pending native events, queueing window events and redrawing."""
        if not pygame.display.get_init():
            return
        for native_event in pygame.event.get():
            window = self.active
            if window is None:
                continue
            if native_event.type == pygame.QUIT:
                window.push_event(Event(EventType.QUIT))
            elif native_event.type == pygame.VIDEORESIZE:
                width, height = native_event.w, native_event.h
                if (width, height) != (window.width, window.height):
                    info = ResizeInfo(window.width, window.height, width, height)
                    window.push_event(Event(EventType.RESIZE, info))
                    self.resize(window, width, height)
                self.render(window)
            elif native_event.type in _EXPOSE_EVENTS:
                self.render(window)


@lru_cache(maxsize=None)
def get_display() -> Display:
    """The display shared by all windows that are given none."""
    return Display()