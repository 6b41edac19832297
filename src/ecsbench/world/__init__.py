"""World state and access management.

Architecture Note:
    world/ is a stateful service layer that coordinates entities, components,
    and systems. Unlike core/, world/ maintains runtime state and drives
    system execution.
"""

from ecsbench.world.access import AccessViolationError, QueryView, ScopedAccess
from ecsbench.world.world import World

__all__ = [
    "ScopedAccess",
    "QueryView",
    "AccessViolationError",
    "World",
]
