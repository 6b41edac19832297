"""Entity allocation service."""

from __future__ import annotations

from ecsbench.core.identity import EntityId, SystemEntity


class EntityAllocator:
    """Hands out entity IDs and recycles freed slots with a bumped generation.

    Indices below the reserved range are never handed out; reserved entities
    are treated as permanently alive.
    """

    def __init__(self) -> None:
        self._next_index = SystemEntity._RESERVED_COUNT
        self._free_list: list[int] = []
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate an entity ID, preferring recycled slots."""
        if self._free_list:
            index = self._free_list.pop()
            return EntityId(index=index, generation=self._generations[index])

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Free an entity's slot so later allocations reuse it.

        Raises:
            ValueError: If the entity is reserved or already dead.
        """
        if entity.index < SystemEntity._RESERVED_COUNT:
            raise ValueError(f"Cannot deallocate reserved entity {entity}")
        if not self.is_alive(entity):
            raise ValueError(f"Entity {entity} is not alive")

        self._generations[entity.index] = entity.generation + 1
        self._free_list.append(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """Check whether an ID still names a live entity (not recycled)."""
        if entity.index < SystemEntity._RESERVED_COUNT:
            return entity.generation == 0
        return self._generations.get(entity.index, -1) == entity.generation
