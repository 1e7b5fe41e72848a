"""Measures processor time spent in a block or function."""

from __future__ import annotations

import sys
import time
from contextlib import ContextDecorator
from typing import Callable, TextIO


class FunctionTimer(ContextDecorator):
    """Prints the processor time spent inside the ``with`` block or decorated call."""

    def __init__(
        self,
        clock: Callable[[], float] = time.process_time,
        stream: TextIO | None = None,
    ) -> None:
        self._clock = clock
        self._stream = stream
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> FunctionTimer:
        self._start = self._clock()
        return self

    def __exit__(self, *args: object) -> bool:
        self.elapsed_ms = (self._clock() - self._start) * 1000.0
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"time spanned: {self.elapsed_ms:g} ms", file=stream)
        return False