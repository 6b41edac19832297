"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains stateless building blocks with no runtime state mutation.
    For stateful services, see world/, storage/, and scheduling/.
"""

from ecsbench.core.component import ComponentRegistry, Owned, component, get_registry
from ecsbench.core.errors import BenchmarkError, InvariantViolation, LockPoisoned, NotFound
from ecsbench.core.identity import EntityId, SystemEntity
from ecsbench.core.query import (
    AccessPattern,
    AllAccess,
    NoAccess,
    TypeAccess,
    normalize_access,
)
from ecsbench.core.system import ExecutionStrategy, SystemDescriptor, system

__all__ = [
    # Errors
    "BenchmarkError",
    "NotFound",
    "LockPoisoned",
    "InvariantViolation",
    # Identity
    "EntityId",
    "SystemEntity",
    # Component
    "component",
    "get_registry",
    "ComponentRegistry",
    "Owned",
    # System
    "system",
    "SystemDescriptor",
    "ExecutionStrategy",
    # Query
    "AccessPattern",
    "AllAccess",
    "NoAccess",
    "TypeAccess",
    "normalize_access",
]
