"""RGBA images that can be composited onto a window surface."""

from __future__ import annotations

import struct
from functools import lru_cache
from typing import Optional

import pygame

_MAX_DIMENSION = 0xFFFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_channel(value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel out of range: {value}")


@lru_cache(maxsize=65536)
def _scale(channel: int, alpha: int) -> int:
    return int(_f32(_f32(channel / 255) * alpha))


def premultiply(r: int, g: int, b: int, a: int) -> int:
    """Pack a colour into 0xRRGGBBAA with RGB multiplied by alpha."""
    for value in (r, g, b, a):
        _check_channel(value)
    return (_scale(r, a) << 24) | (_scale(g, a) << 16) | (_scale(b, a) << 8) | a


def to_bgra(data: bytes, width: int, height: int) -> bytes:
    """Convert straight RGBA pixel data to premultiplied BGRA."""
    size = width * height * 4
    if len(data) < size:
        raise ValueError(f"expected {size} bytes of pixel data, got {len(data)}")
    view = memoryview(bytes(data[:size]))
    out = bytearray()
    for r, g, b, a in zip(*[iter(view)] * 4):
        rgba = premultiply(r, g, b, a)
        out += bytes(((rgba >> 8) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 24) & 0xFF, a))
    return bytes(out)


class Image:
    """An RGBA image of fixed size."""

    def __init__(self, data: bytes, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if not 0 <= value <= _MAX_DIMENSION:
                raise ValueError(f"{name} out of range: {value}")
        size = width * height * 4
        if len(data) < size:
            raise ValueError(f"expected {size} bytes of pixel data, got {len(data)}")
        self.width = width
        self.height = height
        self.data = bytes(data[:size])
        self.target: Optional[pygame.Surface] = None
        self._pixels: Optional[pygame.Surface] = None

    @property
    def attached(self) -> bool:
        return self._pixels is not None

    def attach(self, surface: pygame.Surface) -> None:
        """Prepare the premultiplied pixels for drawing onto ``surface``."""
        bgra = to_bgra(self.data, self.width, self.height)
        rgba = bytearray(bgra)
        rgba[0::4] = bgra[2::4]
        rgba[2::4] = bgra[0::4]
        self._pixels = pygame.image.frombuffer(bytes(rgba), (self.width, self.height), "RGBA")
        self.target = surface

    def draw(self, surface: pygame.Surface) -> None:
        """Composite the image over ``surface`` at its top-left corner."""
        if self._pixels is None:
            raise RuntimeError("image is not attached to a window")
        surface.blit(self._pixels, (0, 0), special_flags=pygame.BLEND_PREMULTIPLIED)