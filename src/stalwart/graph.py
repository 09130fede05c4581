"""Dependency graph — which properties support which.

An edge supporter -> dependent means "dependent's computed value may change
when supporter changes". The graph is built lazily by the accessors and
only ever grows.

Cycle prevention here is deliberately narrow: self edges and direct
two-node cycles are refused. Longer cycles are caught later, by the
notification cascade in ViewModel.
"""

from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger("stalwart.graph")


class DependencyGraph:
    """Mapping of supporter name -> set of dependent names."""

    __slots__ = ("_dependents",)

    def __init__(self) -> None:
        self._dependents: dict[str, set[str]] = {}

    def record_edge(self, supporter: str, dependent: str) -> bool:
        """Record that `dependent` relies on `supporter`.

        Returns True only when a new edge was stored. Self edges and edges
        whose reverse already exists are ignored, and re-recording an
        existing edge changes nothing.
        """
        if supporter == dependent:
            return False
        if supporter in self._dependents.get(dependent, ()):
            logger.debug("Rejected %s -> %s: reverse edge exists", supporter, dependent)
            return False

        dependents = self._dependents.setdefault(supporter, set())
        if dependent in dependents:
            return False
        dependents.add(dependent)
        logger.debug("%s supports %s", supporter, dependent)
        return True

    def dependents_of(self, supporter: str) -> frozenset[str]:
        """Snapshot of the dependents of `supporter` (empty if none).

        A snapshot, so callers may iterate while the graph keeps growing.
        """
        return frozenset(self._dependents.get(supporter, ()))

    def supporters_of(self, dependent: str) -> frozenset[str]:
        return frozenset(
            supporter
            for supporter, dependents in self._dependents.items()
            if dependent in dependents
        )

    def has_edge(self, supporter: str, dependent: str) -> bool:
        return dependent in self._dependents.get(supporter, ())

    def edges(self) -> Iterator[tuple[str, str]]:
        for supporter, dependents in self._dependents.items():
            for dependent in dependents:
                yield supporter, dependent

    def __len__(self) -> int:
        return sum(len(dependents) for dependents in self._dependents.values())

    def __repr__(self) -> str:
        return f"DependencyGraph({len(self)} edges)"
