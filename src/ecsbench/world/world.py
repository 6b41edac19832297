"""World: central coordinator for entities, components, and systems.

Usage:
    world = World()

    # Spawn entities
    target = world.spawn(Point(0, 0))
    world.spawn(PointEntities((target,) * 10))

    # Register and run systems
    world.register_system(resolve_point_entities)
    world.tick()
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from ecsbench.core.identity import EntityId, SystemEntity
from ecsbench.core.system import SystemDescriptor
from ecsbench.storage.local import LocalStorage
from ecsbench.storage.protocol import Storage
from ecsbench.world.access import QueryView, ScopedAccess

if TYPE_CHECKING:
    from ecsbench.core.system import ExecutionStrategy

logger = logging.getLogger(__name__)

ComponentT = TypeVar("ComponentT")


class World:
    """Central world state and system execution coordinator.

    Owns the storage backend and the execution strategy. Systems interact
    through ScopedAccess, not World directly.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        execution: ExecutionStrategy | None = None,
    ):
        self._storage = storage or LocalStorage()
        # Import here to avoid circular dependency at module level
        if execution is None:
            from ecsbench.scheduling import SequentialScheduler

            execution = SequentialScheduler()
        self._execution = execution
        self._storage.reserve_entity(SystemEntity.WORLD)

    @property
    def storage(self) -> Storage:
        return self._storage

    def spawn(self, *components: Any) -> EntityId:
        """Create entity with components. For use outside systems."""
        entity = self._storage.create_entity()
        seen_types: set[type] = set()
        for comp in components:
            comp_type = type(comp)
            if comp_type in seen_types:
                warnings.warn(
                    f"spawn() received multiple components of type {comp_type.__name__}. "
                    f"Only the last one will be kept.",
                    stacklevel=2,
                )
            seen_types.add(comp_type)
            self._storage.set_component(entity, comp)
        return entity

    def destroy(self, entity: EntityId) -> None:
        """Destroy entity. For use outside systems."""
        self._storage.destroy_entity(entity)

    def get_copy(
        self, entity: EntityId, component_type: type[ComponentT]
    ) -> ComponentT | None:
        """Get a deep copy of a component, or None. For use outside systems."""
        return self._storage.get_component(entity, component_type, copy=True)

    def get_mut(self, entity: EntityId, component_type: type[ComponentT]) -> ComponentT:
        """Get the stored instance for in-place mutation.

        Raises:
            NotFound: If the entity lacks the component.
        """
        return self._storage.get_mut(entity, component_type)

    def singleton(self, component_type: type[ComponentT]) -> ComponentT:
        """Get a world-level resource from the WORLD entity."""
        return self._storage.get_mut(SystemEntity.WORLD, component_type)

    def set_singleton(self, resource: Any) -> None:
        """Store a world-level resource on the WORLD entity."""
        self._storage.set_component(SystemEntity.WORLD, resource)

    def query(self, *component_types: type) -> Iterator[tuple[Any, ...]]:
        """Iterate (entity, component1, ...) with live instances. For use outside systems."""
        return iter(QueryView(self._storage, component_types))

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register system for execution. Delegates to the execution strategy."""
        logger.debug("Registering system %s", descriptor.name)
        self._execution.register_system(descriptor)

    def execute_system(self, descriptor: SystemDescriptor) -> None:
        """Run one system against this world with access scoped to its declaration."""
        descriptor.run(ScopedAccess(self._storage, descriptor))

    def tick(self) -> None:
        """Execute all registered systems once.

        Returns only after every system has finished. Exceptions raised by a
        system propagate to the caller.
        """
        self._execution.tick(self)
