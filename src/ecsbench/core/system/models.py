"""System models: descriptors and the execution strategy protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ecsbench.core.query.models import AllAccess, NoAccess, TypeAccess
from ecsbench.core.query.operations import patterns_overlap

if TYPE_CHECKING:
    from ecsbench.core.query import AccessPattern


@dataclass(frozen=True)
class SystemDescriptor:
    """Metadata about a registered system."""

    name: str
    run: Callable[..., Any]
    reads: AccessPattern
    writes: AccessPattern
    runs_alone: bool = False  # If True, runs in its own execution group (dev mode)

    def readable_types(self) -> frozenset[type]:
        """Declared readable types. Write access implies read access."""
        return self._extract_types(self.reads) | self._extract_types(self.writes)

    def _extract_types(self, pattern: AccessPattern) -> frozenset[type]:
        if isinstance(pattern, TypeAccess):
            return pattern.types
        return frozenset()

    def can_read_type(self, component_type: type) -> bool:
        if isinstance(self.reads, AllAccess) or isinstance(self.writes, AllAccess):
            return True
        return component_type in self.readable_types()

    def can_write_type(self, component_type: type) -> bool:
        if isinstance(self.writes, AllAccess):
            return True
        if isinstance(self.writes, NoAccess):
            return False
        return component_type in self.writes.types

    def is_dev_mode(self) -> bool:
        """Check if system should run in isolation with unrestricted access."""
        return self.runs_alone

    def conflicts_with(self, other: SystemDescriptor) -> bool:
        """Check whether two systems may not run at the same time.

        Systems conflict when either runs alone, or when one writes a type the
        other reads or writes.
        """
        if self.runs_alone or other.runs_alone:
            return True
        return (
            patterns_overlap(self.writes, other.writes)
            or patterns_overlap(self.writes, other.reads)
            or patterns_overlap(other.writes, self.reads)
        )


@runtime_checkable
class ExecutionStrategy(Protocol):
    """Protocol for pluggable system execution strategies.

    The strategy is injected into World and handles system registration and
    execution order.
    """

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register a system for execution."""
        ...

    def tick(self, world: Any) -> None:
        """Execute all registered systems once, returning when all have finished."""
        ...
