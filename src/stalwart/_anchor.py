"""Data anchor — plain Python structures that hold one view model's reactive state.

Each ViewModel owns exactly one Anchor. Nothing here is shared between
instances: two view models never see each other's stack, graph or registry.
Separating data from behavior keeps the ViewModel methods stateless.
"""

from __future__ import annotations

from typing import Callable

from stalwart._tracking import EvaluationStack
from stalwart.graph import DependencyGraph

Handler = Callable[[object, str], None]


class Anchor:
    __slots__ = ("stack", "graph", "configured", "subscribers")

    def __init__(self) -> None:
        # Computed properties currently being evaluated, innermost last.
        self.stack = EvaluationStack()
        # supporter -> dependents
        self.graph = DependencyGraph()
        # Computed properties whose dependencies have been discovered. Only grows.
        self.configured: set[str] = set()
        # Change-signal handlers, invoked in registration order.
        self.subscribers: list[Handler] = []
