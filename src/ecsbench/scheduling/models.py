"""Scheduling models and configuration.

Types for execution planning and scheduler configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ecsbench.core.system import SystemDescriptor


@dataclass
class ExecutionGroup:
    """Group of systems that may execute at the same time.

    No two systems in a group conflict, so at most one of them writes any
    given component type.
    """

    systems: list[SystemDescriptor] = field(default_factory=list)


# Type alias for execution plans
ExecutionPlan = list[ExecutionGroup]
"""Ordered list of execution groups. Groups run sequentially, systems within concurrently."""


@dataclass
class SchedulerConfig:
    """Configuration for scheduler behavior."""

    max_workers: int = 1
    """Worker threads per execution group. 1 runs every system inline (default)."""

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")


@runtime_checkable
class ExecutionGroupBuilder(Protocol):
    """Protocol for building execution plans from registered systems.

    Groups execute sequentially; systems within a group may execute
    concurrently.
    """

    def build(self, systems: list[SystemDescriptor]) -> ExecutionPlan:
        """Build execution plan from systems in registration order."""
        ...


class AccessGroupBuilder:
    """Default builder: groups systems by declared access.

    Each system lands in the group right after the last group holding a
    system it conflicts with. Conflicting systems therefore never share a
    group and keep their registration order; non-conflicting systems are
    packed as early as possible.
    """

    def build(self, systems: list[SystemDescriptor]) -> ExecutionPlan:
        groups: ExecutionPlan = []
        for system in systems:
            target = 0
            for index, group in enumerate(groups):
                if any(system.conflicts_with(other) for other in group.systems):
                    target = index + 1
            if target == len(groups):
                groups.append(ExecutionGroup())
            groups[target].systems.append(system)
        return groups
