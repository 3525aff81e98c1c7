"""Collaborator interfaces the application layer drives.

The game never touches stdin, stdout, the system clock or the global
``random`` module directly; it is handed one of each of these.  Concrete
terminal implementations live in the infrastructure layer, and the tests
provide scripted fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from teashop.application.dto import Frame


class InputClosedError(Exception):
    """The input stream has no more lines to give."""


class InputSource(ABC):

    @abstractmethod
    def read_line(self) -> str:
        """Block until the player submits a line; raise InputClosedError at EOF."""


class DisplaySink(ABC):

    @abstractmethod
    def present(self, frame: Frame) -> None:
        """Show one complete screen."""


class Clock(ABC):

    @abstractmethod
    def now(self) -> float:
        """Seconds on a monotonic scale, at least decisecond accurate."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block for a presentational delay."""


class RandomSource(ABC):

    @abstractmethod
    def uniform(self) -> float:
        """A float in [0, 1)."""

    @abstractmethod
    def int_below(self, n: int) -> int:
        """An int in [0, n)."""
