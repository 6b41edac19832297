"""System functionality: decorator and descriptors."""

from ecsbench.core.system.core import system
from ecsbench.core.system.models import ExecutionStrategy, SystemDescriptor

__all__ = [
    "SystemDescriptor",
    "ExecutionStrategy",
    "system",
]
