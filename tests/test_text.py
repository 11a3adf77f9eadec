import pygame
import pytest

from muikit.text import GlyphSet, Text, TextStream, default_glyphset, split_line


@pytest.fixture(scope="module")
def glyphset():
    return GlyphSet()


def test_split_line_stops_after_newline():
    stream, consumed = split_line(b"ab\ncd", 5)
    assert stream == TextStream(b"ab", 0, 5)
    assert consumed == 3


def test_split_line_without_newline_takes_everything():
    stream, consumed = split_line(b"abc", 7)
    assert stream.glyphs == b"abc"
    assert stream.count == 3
    assert consumed == 3


def test_split_line_on_empty_input():
    stream, consumed = split_line(b"", 1)
    assert stream.count == 0
    assert consumed == 0


def test_glyphset_has_height_and_renders(glyphset):
    assert glyphset.height > 0
    assert glyphset.render(b"A").get_width() > 0


def test_render_ignores_codes_outside_set(glyphset):
    assert glyphset.render(b"\x00A\x01").get_size() == glyphset.render(b"A").get_size()


def test_default_glyphset_is_shared():
    first = default_glyphset()
    second = default_glyphset()
    assert first is second
    assert first.height > 0
    assert first.render(b"Hello").get_size() == second.render(b"Hello").get_size()
    assert first.render(b"Hello").get_width() > 0


def test_text_splits_lines_at_growing_heights(glyphset):
    text = Text(b"Hello,\n\nBye", glyphset=glyphset)
    assert [s.glyphs for s in text.streams] == [b"Hello,", b"", b"Bye", b""]
    height = glyphset.height
    assert [s.dy for s in text.streams] == [height * n for n in range(1, 5)]
    assert all(s.dx == 0 for s in text.streams)


def test_text_accepts_str_like_bytes(glyphset):
    from_str = Text("one\ntwo", glyphset=glyphset)
    from_bytes = Text(b"one\ntwo", glyphset=glyphset)
    assert from_str.streams == from_bytes.streams


def test_empty_text_has_no_streams(glyphset):
    assert Text(b"", glyphset=glyphset).streams == []


def test_draw_before_attach_fails(glyphset):
    text = Text(b"Hi", glyphset=glyphset)
    with pytest.raises(RuntimeError):
        text.draw(pygame.Surface((10, 10), 0, 32))


def test_draw_marks_surface(glyphset):
    surface = pygame.Surface((200, 80), 0, 32)
    surface.fill((255, 255, 255))
    text = Text(b"Hello", glyphset=glyphset)
    text.attach(surface)
    text.draw(surface)
    darkened = sum(
        1
        for x in range(surface.get_width())
        for y in range(surface.get_height())
        if tuple(surface.get_at((x, y)))[:3] != (255, 255, 255)
    )
    assert darkened > 0