"""Local in-memory storage implementation.

Dict-based storage for single-process use. Components are kept twice: per
entity for structural queries and per type ("columns") so that single-type
lookup and iteration are one dict access away.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any, TypeVar

from ecsbench.core.errors import NotFound
from ecsbench.core.identity import EntityId
from ecsbench.storage.allocator import EntityAllocator

T = TypeVar("T")


class LocalStorage:
    """Simple in-memory storage using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance
        _columns[component_type][entity] = component_instance

    Column order is insertion order, so queries visit entities in the order
    their component was first set.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._columns: dict[type, dict[EntityId, Any]] = {}

    def create_entity(self) -> EntityId:
        """Create a new entity and return its ID."""
        entity = self._allocator.allocate()
        self._components[entity] = {}
        return entity

    def reserve_entity(self, entity: EntityId) -> None:
        """Make a reserved entity exist. Idempotent."""
        self._components.setdefault(entity, {})

    def destroy_entity(self, entity: EntityId) -> None:
        """Destroy an entity and remove all its components.

        Args:
            entity: Entity to destroy. Unknown entities are ignored.
        """
        if entity not in self._components:
            return
        self._allocator.deallocate(entity)
        for component_type in self._components.pop(entity):
            del self._columns[component_type][entity]

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.
            copy: Whether to return a deep copy of the component (default True).

        Returns:
            Component instance or None if not present.
        """
        component = self._components.get(entity, {}).get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else component

    def get_mut(self, entity: EntityId, component_type: type[T]) -> T:
        """Get the stored component instance for in-place mutation.

        Raises:
            NotFound: If the entity is dead, stale, or lacks the component.
        """
        try:
            return self._columns[component_type][entity]  # type: ignore[no-any-return]
        except KeyError:
            raise NotFound(entity, component_type) from None

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set or replace a component on an entity.

        Raises:
            NotFound: If the entity does not exist.
        """
        components = self._components.get(entity)
        if components is None:
            raise NotFound(entity, type(component))
        component_type = type(component)
        components[component_type] = component
        self._columns.setdefault(component_type, {})[entity] = component

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components.

        Scans the smallest matching column, in that column's insertion order.

        Yields:
            Tuples of (entity, (component1, component2, ...)) with live instances.
        """
        if not component_types:
            return
        columns = [self._columns.get(t, {}) for t in component_types]
        driver = min(columns, key=len)
        for entity in driver:
            try:
                yield entity, tuple(column[entity] for column in columns)
            except KeyError:
                continue

    def column(self, component_type: type[T]) -> dict[EntityId, T]:
        """Live column for one component type, created empty if absent."""
        return self._columns.setdefault(component_type, {})
