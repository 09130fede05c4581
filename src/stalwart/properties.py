"""Declarative properties — descriptors that route through the ViewModel accessors.

stored() is a plain value that notifies on assignment. computed() is a
derived value re-evaluated on every read. The property name used in the
dependency graph and in change signals is the attribute name, so a typo
fails as an AttributeError instead of silently wiring the wrong edge.

Usage:
    class Person(ViewModel):
        first = stored("J")
        last = stored("D")

        @computed
        def full_name(self):
            return f"{self.first} {self.last}"

    p = Person()
    p.full_name         # "J D" — first and last now support full_name
    p.last = "S"        # signals "last", then "full_name"
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, overload

from stalwart.viewmodel import ViewModel

T = TypeVar("T")


class StoredProperty(Generic[T]):
    """A stored value that supports computed properties and notifies on change.

    The default is shared by every instance until assigned, so prefer
    immutable defaults.
    """

    __slots__ = ("_name", "_default")

    def __init__(self, default: T) -> None:
        self._name = ""
        self._default = default

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @overload
    def __get__(self, instance: None, owner: type) -> StoredProperty[T]: ...

    @overload
    def __get__(self, instance: ViewModel, owner: type) -> T: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        value = instance.__dict__.get(self._name, self._default)
        return instance.get(self._name, value)

    def __set__(self, instance: ViewModel, value: T) -> None:
        old = instance.__dict__.get(self._name, self._default)
        if old is not value and old != value:
            instance.__dict__[self._name] = value
            instance.notify_changed(self._name)

    def __repr__(self) -> str:
        return f"StoredProperty({self._name}, default={self._default!r})"


class ComputedProperty(Generic[T]):
    """A read-only property computed from other properties on every read."""

    __slots__ = ("_name", "_fn")

    def __init__(self, fn: Callable[[Any], T]) -> None:
        self._name = fn.__name__
        self._fn = fn

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @overload
    def __get__(self, instance: None, owner: type) -> ComputedProperty[T]: ...

    @overload
    def __get__(self, instance: ViewModel, owner: type) -> T: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.compute(self._name, lambda: self._fn(instance))

    def __set__(self, instance: ViewModel, value: T) -> None:
        raise AttributeError(f"computed property {self._name!r} is read-only")

    def __repr__(self) -> str:
        return f"ComputedProperty({self._name})"


def stored(default: T) -> StoredProperty[T]:
    """Declare a stored property with a default value."""
    return StoredProperty(default)


def computed(fn: Callable[[Any], T]) -> ComputedProperty[T]:
    """Decorator: declare a computed property.

    Usage:
        class Order(ViewModel):
            qty = stored(2)
            price = stored(5)

            @computed
            def total(self):
                return self.qty * self.price
    """
    return ComputedProperty(fn)
