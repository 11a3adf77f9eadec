"""Containers that hold texts, images and other groups."""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Union

from muikit.image import Image
from muikit.text import Text

logger = logging.getLogger(__name__)

Element = Union[Text, Image, "Group"]


class Group:
    """An ordered set of elements drawn together onto a window."""

    def __init__(self) -> None:
        self.window: Optional[Any] = None
        self._members: List[Element] = []

    def __iter__(self) -> Iterator[Element]:
        return iter(self._members)

    def __contains__(self, element: object) -> bool:
        return any(member is element for member in self._members)

    def __len__(self) -> int:
        return len(self._members)

    def _attach_member(self, element: Element) -> None:
        if isinstance(element, Group):
            element.attach_window(self.window)
        else:
            element.attach(self.window.surface)

    def add(self, element: Element) -> None:
        """Append an element, attaching it to the group's window if there is one.

        An element that is already a member is skipped.
        """
        if not isinstance(element, (Text, Image, Group)):
            raise TypeError(f"cannot add {type(element).__name__} to a group")
        if element is self:
            raise ValueError("a group cannot contain itself")
        if element in self:
            logger.warning("The element is already a group member. Skipping...")
            return
        if self.window is not None:
            self._attach_member(element)
        self._members.append(element)

    def attach_window(self, window: Any) -> None:
        """Bind the group and every member, nested groups included, to ``window``."""
        self.window = window
        for member in self._members:
            self._attach_member(member)

    def update(self) -> None:
        """Draw every member onto the window's surface, in insertion order."""
        if self.window is None:
            raise RuntimeError("group is not attached to a window")
        surface = self.window.surface
        for member in self._members:
            if isinstance(member, Group):
                member.update()
            else:
                member.draw(surface)