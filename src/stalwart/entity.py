"""EntityViewModel — a view model that mirrors a plain data-holder object.

bind_entity() pulls values from the entity into the view model, and
to_entity() pushes them back. Both are one-way copies of the names listed
in `fields`; assignments go through the stored properties, so pulling a
changed value raises change signals like any other write.

Code-generated subclasses hook in through customize_bind_entity() and
customize_to_entity() rather than overriding the copy methods.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, ClassVar, Generic, TypeVar

from stalwart.viewmodel import ViewModel

E = TypeVar("E")


class EntityViewModel(ViewModel, Generic[E]):
    """View model bound to an entity of type E.

    Usage:
        @dataclass
        class PersonRecord:
            first: str = ""
            last: str = ""

        class PersonVM(EntityViewModel[PersonRecord]):
            fields = ("first", "last")
            entity_factory = PersonRecord

            first = stored("")
            last = stored("")

            @computed
            def full_name(self):
                return f"{self.first} {self.last}"

        vm = PersonVM(PersonRecord("J", "D"))
        vm.last = "S"
        vm.to_entity()  # PersonRecord(first="J", last="S") — same instance
    """

    # Stored attribute names copied 1:1 between entity and view model.
    fields: ClassVar[tuple[str, ...]] = ()
    # Builds the entity for to_entity() when none was bound.
    entity_factory: ClassVar[Callable[[], Any]] = SimpleNamespace

    def __init__(self, entity: E | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._entity: E | None = None
        if entity is not None:
            self.bind_entity(entity)

    @property
    def entity(self) -> E | None:
        """The entity last bound or produced, if any."""
        return self._entity

    def bind_entity(self, entity: E) -> None:
        """Populate this view model from `entity` and remember it."""
        self._entity = entity
        for field in self.fields:
            setattr(self, field, getattr(entity, field))
        self.customize_bind_entity(entity)

    def to_entity(self) -> E:
        """Write current values to the bound entity and return it.

        If nothing was bound, a new entity is built with entity_factory
        and bound; later calls update that same instance.
        """
        if self._entity is None:
            self._entity = type(self).entity_factory()
        entity = self._entity
        for field in self.fields:
            setattr(entity, field, getattr(self, field))
        self.customize_to_entity(entity)
        return entity

    def customize_bind_entity(self, entity: E) -> None:
        """Extension point run at the end of bind_entity()."""

    def customize_to_entity(self, entity: E) -> None:
        """Extension point run at the end of to_entity(), before returning."""
