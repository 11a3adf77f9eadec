"""A minimal UI toolkit on pygame: windows, text, images, groups and events."""

__version__ = "0.1.0"
__all__ = ["backend", "demo", "events", "group", "image", "text", "window"]