"""World access scoped to a system's declared component types.

Usage:
    # Read view over referrers, mutable view over points
    for entity, refs in access(PointEntities):
        ...
    points = access.query_mut(Point)
    points.get_mut(entity).bump()

    # Traverse every point in place
    access.query_mut(Point).for_each_mut(Point.bump)

    # World-level resources
    arena = access.singleton(SharedArena)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from ecsbench.core.errors import NotFound
from ecsbench.core.identity import EntityId, SystemEntity
from ecsbench.core.system import SystemDescriptor

if TYPE_CHECKING:
    from ecsbench.storage.protocol import Storage

T = TypeVar("T")


class AccessViolationError(Exception):
    """Raised when system accesses undeclared components."""

    pass


class QueryView:
    """Live view over entities holding a set of component types.

    Components are the stored instances, not copies. Single-type views keep a
    direct reference to the storage column so lookup is one dict access.

    Args:
        storage: Storage backend to read from.
        component_types: Component types the view covers.
        mutable: Whether get_mut and for_each_mut are permitted.
    """

    __slots__ = ("_storage", "_types", "_mutable", "_column")

    def __init__(
        self,
        storage: Storage,
        component_types: tuple[type, ...],
        mutable: bool = False,
    ):
        if not component_types:
            raise ValueError("QueryView needs at least one component type")
        self._storage = storage
        self._types = component_types
        self._mutable = mutable
        self._column: dict[EntityId, Any] | None = (
            storage.column(component_types[0]) if len(component_types) == 1 else None
        )

    @property
    def is_mutable(self) -> bool:
        return self._mutable

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        """Iterate yielding (entity, comp1, comp2, ...) with flat unpacking."""
        for entity, components in self._storage.query(*self._types):
            yield (entity, *components)

    def values(self) -> Iterator[Any]:
        """Iterate components only: the instance for single-type views, else tuples."""
        if self._column is not None:
            return iter(self._column.values())
        return (components for _, components in self._storage.query(*self._types))

    def get(self, entity: EntityId) -> Any:
        """Look up one entity's components.

        Raises:
            NotFound: If the entity does not match the view.
        """
        if self._column is not None:
            try:
                return self._column[entity]
            except KeyError:
                raise NotFound(entity, self._types[0]) from None
        return tuple(self._storage.get_mut(entity, t) for t in self._types)

    def get_mut(self, entity: EntityId) -> Any:
        """Look up one entity's components for in-place mutation.

        Raises:
            AccessViolationError: If the view is read-only.
            NotFound: If the entity does not match the view.
        """
        if not self._mutable:
            raise AccessViolationError(
                f"Query over {_type_names(self._types)} is read-only; use query_mut()"
            )
        return self.get(entity)

    def for_each_mut(self, fn: Callable[[Any], object]) -> None:
        """Call fn on every matching component (or component tuple) in place."""
        if not self._mutable:
            raise AccessViolationError(
                f"Query over {_type_names(self._types)} is read-only; use query_mut()"
            )
        if self._column is not None:
            for component in self._column.values():
                fn(component)
            return
        for _, components in self._storage.query(*self._types):
            fn(components)


def _type_names(types: tuple[type, ...]) -> str:
    return ", ".join(t.__name__ for t in types)


class ScopedAccess:
    """World access scoped to a system's declared patterns.

    Unlike a snapshot, systems mutate stored instances directly; the
    scheduler keeps writers of the same type out of each other's way.

    Gotcha: access checks happen when a view is created, not per element.
    """

    def __init__(self, storage: Storage, descriptor: SystemDescriptor):
        self._storage = storage
        self._descriptor = descriptor

    def _check_readable(self, *types: type) -> None:
        if self._descriptor.is_dev_mode():
            return
        for t in types:
            if not self._descriptor.can_read_type(t):
                raise AccessViolationError(
                    f"System '{self._descriptor.name}' cannot read {t.__name__}: "
                    f"not in readable types"
                )

    def _check_writable(self, *types: type) -> None:
        if self._descriptor.is_dev_mode():
            return
        for t in types:
            if self._descriptor.can_write_type(t):
                continue
            if self._descriptor.can_read_type(t):
                raise AccessViolationError(
                    f"System '{self._descriptor.name}' cannot write {t.__name__}: "
                    f"declared as read-only"
                )
            raise AccessViolationError(
                f"System '{self._descriptor.name}': {t.__name__}: not in writable types"
            )

    def __call__(self, *component_types: type) -> QueryView:
        """Read view: access(Position, Velocity)."""
        return self.query(*component_types)

    def query(self, *component_types: type) -> QueryView:
        """Read view over entities with all component types."""
        self._check_readable(*component_types)
        return QueryView(self._storage, component_types)

    def query_mut(self, *component_types: type) -> QueryView:
        """Mutable view over entities with all component types."""
        self._check_writable(*component_types)
        return QueryView(self._storage, component_types, mutable=True)

    def get_mut(self, entity: EntityId, component_type: type[T]) -> T:
        """Get the stored instance for in-place mutation.

        Raises:
            NotFound: If the entity lacks the component.
        """
        self._check_writable(component_type)
        return self._storage.get_mut(entity, component_type)

    def singleton(self, component_type: type[T]) -> T:
        """Get a world-level resource stored on the WORLD entity.

        Raises:
            NotFound: If no resource of that type was set.
        """
        self._check_readable(component_type)
        return self._storage.get_mut(SystemEntity.WORLD, component_type)
