"""Multi-line text rendered with a shared glyph set."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple, Union

import pygame

DEFAULT_POINT_SIZE = 12
DEFAULT_DPI = 90
FIRST_GLYPH = 32
LAST_GLYPH = 128
PEN_COLOUR = (0, 0, 0, 255)

Glyphs = Union[bytes, bytearray, memoryview, str]


@dataclass
class TextStream:
    """One line of glyphs drawn from the pen position (dx, dy)."""

    glyphs: bytes
    dx: int = 0
    dy: int = 0

    @property
    def count(self) -> int:
        return len(self.glyphs)


class GlyphSet:
    """Printable ASCII glyphs of one font at one size."""

    def __init__(self, path: Optional[str] = None, size: int = DEFAULT_POINT_SIZE,
                 dpi: int = DEFAULT_DPI) -> None:
        pygame.font.init()
        pixels = max(1, round(size * dpi / 72))
        self.font = pygame.font.Font(path, pixels)
        self.ascent = self.font.get_ascent()
        charset = "".join(chr(code) for code in range(FIRST_GLYPH, LAST_GLYPH))
        heights = [maxy - miny for minx, maxx, miny, maxy, advance in
                   (m for m in self.font.metrics(charset) if m is not None)]
        self.height = max(heights, default=self.font.get_height())

    def render(self, glyphs: bytes) -> pygame.Surface:
        """Render a line of glyphs; codes outside the set draw nothing."""
        text = "".join(chr(code) for code in glyphs if FIRST_GLYPH <= code < LAST_GLYPH)
        return self.font.render(text, True, PEN_COLOUR)


@lru_cache(maxsize=None)
def default_glyphset() -> GlyphSet:
    """The glyph set shared by all text that is given none."""
    return GlyphSet()


def split_line(glyphs: bytes, dy: int) -> Tuple[TextStream, int]:
    """Take glyphs up to the first newline as a stream at height ``dy``.

    Returns the stream and the number of glyphs consumed, which counts
    the newline when one was found.
    """
    data = bytes(glyphs)
    end = data.find(b"\n")
    if end < 0:
        return TextStream(data, 0, dy), len(data)
    return TextStream(data[:end], 0, dy), end + 1


def _as_bytes(glyphs: Glyphs) -> bytes:
    if isinstance(glyphs, str):
        return glyphs.encode("latin-1")
    return bytes(glyphs)


class Text:
    """Text made of lines, each placed one glyph-set height below the last."""

    def __init__(self, glyphs: Glyphs = b"", glyphset: Optional[GlyphSet] = None) -> None:
        self.glyphset = glyphset if glyphset is not None else default_glyphset()
        self.streams: List[TextStream] = []
        self.pen: Optional[Tuple[int, int, int, int]] = None
        data = _as_bytes(glyphs)
        if data:
            self.add(data)

    def add(self, glyphs: Glyphs) -> None:
        """Append glyphs, starting a new line at every newline."""
        remaining = _as_bytes(glyphs)
        line = 0
        while True:
            line += 1
            stream, consumed = split_line(remaining, line * self.glyphset.height)
            self.streams.append(stream)
            if not remaining:
                break
            remaining = remaining[consumed:]

    def attach(self, surface: pygame.Surface) -> None:
        """Prepare the pen used to draw onto ``surface``."""
        self.pen = PEN_COLOUR

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every line with its baseline at the line's pen position."""
        if self.pen is None:
            raise RuntimeError("text is not attached to a window")
        for stream in self.streams:
            rendered = self.glyphset.render(stream.glyphs)
            surface.blit(rendered, (stream.dx, stream.dy - self.glyphset.ascent))