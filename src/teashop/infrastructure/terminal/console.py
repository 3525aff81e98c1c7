"""Real-world adapters for the input, clock and random ports."""

from __future__ import annotations

import random
import sys
import time
from typing import TextIO

from teashop.application.ports import Clock, InputClosedError, InputSource, RandomSource


class ConsoleInput(InputSource):
    """Reads from *stream*, or from whatever ``sys.stdin`` is at read time."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise InputClosedError("Input stream closed")
        return line.rstrip("\r\n")


class SystemClock(Clock):

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class SeededRandom(RandomSource):
    """RandomSource backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def uniform(self) -> float:
        return self._rng.random()

    def int_below(self, n: int) -> int:
        return self._rng.randrange(n)
