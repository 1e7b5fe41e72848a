"""The application main loop and the program entry point."""

from __future__ import annotations

import argparse
from typing import Sequence

from .events import WindowResizeEvent
from .testing import AutomaticTestFramework

VERSION = "v0.0.1"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


class Application:
    """Runs the engine's main loop until stopped or a frame limit is reached."""

    def __init__(self, max_frames: int | None = None) -> None:
        self.max_frames = max_frames
        self.running = False
        self.frame_count = 0

    def on_update(self) -> None:
        """Called once per frame; subclasses add their work here."""

    def stop(self) -> None:
        self.running = False

    def run(self) -> None:
        print(WindowResizeEvent(DEFAULT_WIDTH, DEFAULT_HEIGHT))
        self.running = True
        self.frame_count = 0
        while self.running and (self.max_frames is None or self.frame_count < self.max_frames):
            self.on_update()
            self.frame_count += 1
        self.running = False


class TestProject(Application):
    """The sample application started by the command."""

    __test__ = False


def create_application() -> Application:
    return TestProject()


def _frame_limit(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="coldlight")
    parser.add_argument(
        "--max-frames",
        type=_frame_limit,
        default=None,
        help="stop after this many frames (default: run until stopped)",
    )
    args = parser.parse_args(argv)

    print(f"Coldlight Engine, version = {VERSION}")
    AutomaticTestFramework.get().run_all_tests()

    app = create_application()
    app.max_frames = args.max_frames
    app.run()
    return 0