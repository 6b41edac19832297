"""Storage protocol for swappable backends.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from ecsbench.core.identity import EntityId

T = TypeVar("T")


class Storage(Protocol):
    """Abstract storage interface. Implementations hold the actual records."""

    def create_entity(self) -> EntityId:
        """Allocate new entity."""
        ...

    def destroy_entity(self, entity: EntityId) -> None:
        """Remove entity and all its components."""
        ...

    def reserve_entity(self, entity: EntityId) -> None:
        """Make a reserved entity exist without going through allocation."""
        ...

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get component from entity, optionally as a deep copy."""
        ...

    def get_mut(self, entity: EntityId, component_type: type[T]) -> T:
        """Get the stored component instance for in-place mutation.

        Raises NotFound when the entity or component is missing.
        """
        ...

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set/update component on entity."""
        ...

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components."""
        ...

    def column(self, component_type: type[T]) -> dict[EntityId, T]:
        """Live entity-to-component mapping for one type. Callers must not resize it."""
        ...
