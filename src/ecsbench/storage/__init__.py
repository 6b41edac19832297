"""Storage backends."""

from ecsbench.storage.allocator import EntityAllocator
from ecsbench.storage.local import LocalStorage
from ecsbench.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "EntityAllocator",
]
