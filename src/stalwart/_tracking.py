"""Evaluation stack — which computed property is being evaluated right now.

While a computed property runs its computation for the first time, its name
sits on top of the stack. Any property read during that time registers
itself as a supporter of the top entry, building the dependency graph
without static analysis.

Nested computed reads push on top of each other, so the stack is LIFO.
Pushes and pops are strictly paired: evaluating() releases its slot even
when the computation raises, otherwise a stale entry would take credit
for every later read.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class EvaluationStack:
    """Per-instance LIFO of property names under evaluation."""

    __slots__ = ("_names",)

    def __init__(self) -> None:
        self._names: list[str] = []

    def enter(self, name: str) -> None:
        self._names.append(name)

    def exit(self) -> str:
        """Pop and return the most recently entered name."""
        return self._names.pop()

    @property
    def top(self) -> str | None:
        """The innermost name under evaluation, or None at rest."""
        return self._names[-1] if self._names else None

    @contextmanager
    def evaluating(self, name: str) -> Iterator[None]:
        """Scope an evaluation of `name`. The slot is released on any exit.

        Usage:
            with stack.evaluating("full_name"):
                value = fn()
        """
        self.enter(name)
        try:
            yield
        finally:
            self.exit()

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"EvaluationStack({self._names!r})"
