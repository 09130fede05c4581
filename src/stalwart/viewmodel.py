"""ViewModel — base class for objects with self-wiring computed properties.

A computed property's getter routes through compute(name, fn). The first
time it runs, every property read inside fn (through get() or compute())
registers itself as a supporter. Later, notify_changed(supporter) raises a
change signal for the supporter and, transitively, for every dependent.

Values are never cached: fn runs on every read. Only the dependency edges
are discovered once, on a property's first evaluation.

All state lives in the instance's Anchor — the methods here hold none.
Not thread-safe: one view model belongs to one thread, typically the UI's.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, MutableSequence, TypeVar

from stalwart._anchor import Anchor, Handler
from stalwart.errors import CascadeDepthError, CycleDetectedError

logger = logging.getLogger("stalwart.viewmodel")

T = TypeVar("T")

Disposer = Callable[[], None]

_UNSET = object()


class ViewModel:
    """Base class for view models with implicit dependency tracking.

    Usage:
        class Person(ViewModel):
            def __init__(self):
                super().__init__()
                self._first = "J"
                self._last = "D"

            @property
            def first(self):
                return self.get("first", self._first)

            @first.setter
            def first(self, value):
                self._first = value
                self.notify_changed("first")

            @property
            def full_name(self):
                return self.compute("full_name", lambda: f"{self.first} {self.last}")

    stalwart.properties.stored and stalwart.properties.computed generate
    these accessors from a declaration.
    """

    # Longest supporter -> dependent chain one notification may walk.
    # None turns the limit off; cycles are still detected.
    max_cascade_depth: int | None = 200

    def __init__(self, *, max_cascade_depth: int | None | object = _UNSET) -> None:
        self._anchor = Anchor()
        if max_cascade_depth is not _UNSET:
            self.max_cascade_depth = max_cascade_depth

    # --- Accessors ---

    def get(self, name: str, value: T) -> T:
        """Return `value`, registering `name` as a supporter if inside a computation."""
        self._capture(name)
        return value

    def compute(self, name: str, fn: Callable[[], T]) -> T:
        """Run `fn` and return its result, discovering dependencies on first use.

        A computed property can itself support an outer computed property,
        so `name` is captured like any plain read first.
        """
        self._capture(name)

        anchor = self._anchor
        if name in anchor.configured:
            # Already wired. Reads inside fn are credited to whatever outer
            # computation is on the stack, not to `name`.
            return fn()

        anchor.configured.add(name)
        logger.debug("Configuring %s on %s", name, type(self).__name__)
        with anchor.stack.evaluating(name):
            return fn()

    def depends_upon(self, name: str) -> None:
        """Declare, from inside a computation, that it relies on `name`.

        For supporters the accessors can't observe: another object's
        property, a collection item, or a read inside a branch that may
        not run on the first evaluation.
        """
        self._capture(name)

    def _capture(self, name: str) -> None:
        top = self._anchor.stack.top
        if top is not None and top != name:
            self._anchor.graph.record_edge(name, top)

    # --- Notification ---

    def notify_changed(self, name: str) -> None:
        """Raise the change signal for `name`, then for all of its dependents."""
        self._notify(name, ())

    def notify_dependents(self, name: str) -> None:
        """Raise the change signal for every property that `name` supports."""
        self._notify_dependents(name, (name,))

    def _notify(self, name: str, chain: tuple[str, ...]) -> None:
        for handler in list(self._anchor.subscribers):
            handler(self, name)
        self._notify_dependents(name, chain + (name,))

    def _notify_dependents(self, name: str, chain: tuple[str, ...]) -> None:
        limit = self.max_cascade_depth
        for dependent in self._anchor.graph.dependents_of(name):
            if dependent in chain:
                cycle = chain[chain.index(dependent):] + (dependent,)
                logger.error("Dependency cycle on %s: %s", type(self).__name__, " -> ".join(cycle))
                raise CycleDetectedError(cycle)
            if limit is not None and len(chain) >= limit:
                logger.error("Cascade on %s exceeded %d levels", type(self).__name__, limit)
                raise CascadeDepthError(limit, chain + (dependent,))
            self._notify(dependent, chain)

    # --- Subscription ---

    def subscribe(self, handler: Handler) -> Disposer:
        """Register handler(source, name) for change signals. Returns a function that removes it."""
        self._anchor.subscribers.append(handler)

        def _unsubscribe() -> None:
            self.unsubscribe(handler)

        return _unsubscribe

    def unsubscribe(self, handler: Handler) -> None:
        try:
            self._anchor.subscribers.remove(handler)
        except ValueError:
            pass  # already removed

    # --- Introspection ---

    def dependents_of(self, name: str) -> frozenset[str]:
        return self._anchor.graph.dependents_of(name)

    def supporters_of(self, name: str) -> frozenset[str]:
        return self._anchor.graph.supporters_of(name)

    def is_configured(self, name: str) -> bool:
        """True once `name`'s computed accessor has discovered its dependencies."""
        return name in self._anchor.configured

    # --- Helpers ---

    def copy_to_list(self, target: MutableSequence[T] | None, source: Iterable[T] | None) -> None:
        """Replace the contents of `target` with the items of `source`.

        No-op when either is None.
        """
        if target is None or source is None:
            return
        items = list(source)
        target.clear()
        for item in items:
            target.append(item)
