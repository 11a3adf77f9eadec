# muikit

A small retained-mode UI toolkit built on pygame. It offers windows that
each have a bounded event queue, text elements that are split into lines,
RGBA images composited with premultiplied alpha, and groups that nest
elements and draw them in the order they were added.

## Installation

```
pip install muikit
```

To run the tests:

```
pip install "muikit[test]"
pytest
```

## Usage

```python
from muikit.events import EventType
from muikit.group import Group
from muikit.text import Text
from muikit.window import Window, update

with Window("Groups", 320, 240) as window:
    group = Group()
    group.add(Text("Hello World,\n\nBye World"))
    window.add(group)

    running = True
    while running:
        while window.pending():
            if window.pop_event().type == EventType.QUIT:
                running = False
        update()
```

`update()` processes the pending events of the shared display: closing the
window queues a `QUIT` event, a size change queues a `RESIZE` event whose
`resize` field holds a `ResizeInfo` with the old and new sizes, and the
window is redrawn on resize and expose.

### Events

`muikit.events.EventQueue` keeps events newest first. A window's queue holds
at most 32 of them; when it is full, pushing a new event drops the oldest
one. Popping from an empty queue gives an `Event` of type `EventType.NONE`.

### Text

`Text` takes bytes or a Latin-1 string. Each newline starts a new line,
placed one glyph-set height below the previous one. By default the text is
drawn in black with pygame's default font at 12 points and 90 dpi; pass a
`GlyphSet(path, size, dpi)` to use another font. Only printable ASCII
characters (codes 32 to 127) are drawn. `split_line(glyphs, dy)` exposes the
line splitting on its own.

### Images

`Image` takes raw RGBA bytes, four per pixel, and is drawn at the window's
top-left corner:

```python
from muikit.image import Image

image = Image(rgba_bytes, 200, 200)
window.add(image)
```

`premultiply(r, g, b, a)` packs a colour into `0xRRGGBBAA` with the colour
channels multiplied by alpha, and `to_bgra(data, width, height)` converts a
whole RGBA buffer to premultiplied BGRA.

### Groups

A `Group` holds `Text`, `Image` and other `Group` elements. Adding an
element that is already a member is ignored (a warning is logged); adding
any other kind of object raises `TypeError`, and a group cannot contain
itself.

## Demo

The package ships a demo command with four demos:

```
muikit-demo hello
muikit-demo multiline
muikit-demo group
muikit-demo image 0 --directory path/to/raw/files
```

The image demo shows a 200×200 raw RGBA file: `fish.raw` for `0`, `flag.raw`
for `1`, read from the given directory (the current one by default). Each
demo runs until its window is closed.

## Limitations

- Elements cannot be removed from a window or group once added.
- The `KEYPRESS`, `KEYRELEASE`, `MOUSEPRESS` and `MOUSE_RELEASE` event types
  exist but are never produced; only `QUIT` and `RESIZE` events are queued.
- Only one window is shown on screen at a time: the most recently created
  one still open.