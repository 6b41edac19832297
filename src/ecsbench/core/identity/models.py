"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
    world_entity = SystemEntity.WORLD
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque entity handle with a generation for stale-handle detection.

    Handles are only ever compared and hashed. A handle whose generation no
    longer matches its slot refers to a destroyed entity.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __repr__(self) -> str:
        return f"EntityId({self.index}v{self.generation})"


class SystemEntity:
    """Reserved entity IDs for world-level resources."""

    WORLD = EntityId(index=0, generation=0)

    _RESERVED_COUNT = 16  # Allocation starts after reserved indices
