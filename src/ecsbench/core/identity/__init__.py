"""Entity identity: lightweight IDs and reserved entities."""

from ecsbench.core.identity.models import EntityId, SystemEntity

__all__ = [
    "EntityId",
    "SystemEntity",
]
