"""Exceptions raised by the notification cascade."""

from __future__ import annotations

from typing import Sequence


class StalwartError(Exception):
    """Base class for stalwart errors."""


class CycleDetectedError(StalwartError):
    """A change notification reached a property already on its own chain.

    `cycle` lists the chain from the first notified property to the
    repeated one, e.g. ("a", "c", "b", "a").
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__("Dependency cycle: " + " -> ".join(self.cycle))


class CascadeDepthError(StalwartError):
    """A change notification chain grew longer than max_cascade_depth."""

    def __init__(self, limit: int, chain: Sequence[str]) -> None:
        self.limit = limit
        self.chain = tuple(chain)
        super().__init__(
            f"Cascade exceeded {limit} levels: " + " -> ".join(self.chain)
        )
