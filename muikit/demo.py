"""Small demo programs: an empty window, multi-line text, grouped text and an image."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from muikit.events import EventType
from muikit.group import Group
from muikit.image import Image
from muikit.text import Text
from muikit.window import Window, update

FRAME_DELAY = 0.01

IMAGE_WIDTH = 200
IMAGE_HEIGHT = 200
IMAGE_FILES = {"0": "fish.raw", "1": "flag.raw"}
IMAGE_USAGE = "Run: `muikit-demo image 0` or `muikit-demo image 1`..."

MULTILINE_MESSAGE = (
    "Hello,\n\n"
    "This is the mui multiline program\n"
    "Created by yours truly\n\n"
    "Goodbye"
)
GROUP_MESSAGE = "Hello World,\n\nBye World"


def load_raw(path: Union[str, Path], width: int, height: int) -> bytes:
    """Read ``width * height`` RGBA pixels from a raw file.

    Extra bytes are ignored; a short file is padded with zero bytes.
    """
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size: {width}x{height}")
    size = width * height * 4
    with open(path, "rb") as stream:
        data = stream.read(size)
    return data.ljust(size, b"\0")


def drain_events(window: Window) -> bool:
    """Pop every pending event; return False if one of them asked to quit."""
    keep_running = True
    while window.pending():
        if window.pop_event().type == EventType.QUIT:
            keep_running = False
    return keep_running


def run(window: Window) -> None:
    """Drive ``window`` until it is asked to quit, then close it."""
    with window:
        running = True
        while running:
            running = drain_events(window)
            update()
            time.sleep(FRAME_DELAY)


def _hello() -> Window:
    return Window("Hello win", 320, 240)


def _multiline() -> Window:
    window = Window("window", 320, 240)
    window.add(Text(MULTILINE_MESSAGE))
    return window


def _group() -> Window:
    window = Window("Groups", 320, 240)
    text = Text(GROUP_MESSAGE)
    group = Group()
    group.add(text)
    window.add(group)
    return window


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="muikit-demo", description="Run a muikit demo.")
    commands = parser.add_subparsers(dest="demo", required=True)
    commands.add_parser("hello", help="an empty window")
    commands.add_parser("multiline", help="a window with multi-line text")
    commands.add_parser("group", help="text placed in a group")
    image = commands.add_parser("image", help="show a raw RGBA image")
    image.add_argument("which", help="0 for fish.raw, 1 for flag.raw")
    image.add_argument("--directory", default=".", help="where the raw files are")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo named on the command line."""
    args = _build_parser().parse_args(argv)
    builders: Dict[str, Callable[[], Window]] = {
        "hello": _hello,
        "multiline": _multiline,
        "group": _group,
    }
    if args.demo == "image":
        name = IMAGE_FILES.get(args.which)
        if name is None:
            print(IMAGE_USAGE)
            return 1
        try:
            pixels = load_raw(Path(args.directory) / name, IMAGE_WIDTH, IMAGE_HEIGHT)
        except OSError:
            print(f"Failed to open {name}")
            return 1
        window = Window("image", IMAGE_WIDTH, IMAGE_HEIGHT)
        window.add(Image(pixels, IMAGE_WIDTH, IMAGE_HEIGHT))
    else:
        window = builders[args.demo]()
    run(window)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())