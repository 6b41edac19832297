"""System scheduler with access-based grouping and optional worker threads.

Usage:
    # Default: one system at a time, in registration order within groups
    scheduler = SequentialScheduler()

    # Run non-conflicting systems on worker threads
    scheduler = SimpleScheduler(config=SchedulerConfig(max_workers=4))
    world = World(execution=scheduler)
    world.tick()
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from ecsbench.core.system import SystemDescriptor
from ecsbench.scheduling.models import (
    AccessGroupBuilder,
    ExecutionGroup,
    ExecutionGroupBuilder,
    ExecutionPlan,
    SchedulerConfig,
)

if TYPE_CHECKING:
    from ecsbench.world.world import World

logger = logging.getLogger(__name__)


class SimpleScheduler:
    """Scheduler running execution groups in order.

    Within a group, systems run inline when ``max_workers`` is 1 and on a
    thread pool otherwise. Because grouping keeps writers of a type apart,
    in-place mutation from worker threads never has two writers on the same
    component type at once.

    Args:
        config: Scheduler configuration.
        group_builder: Strategy for building execution groups from systems.
            Defaults to AccessGroupBuilder.
    """

    def __init__(
        self,
        config: SchedulerConfig | None = None,
        group_builder: ExecutionGroupBuilder | None = None,
    ) -> None:
        self._config = config or SchedulerConfig()
        self._group_builder = group_builder or AccessGroupBuilder()
        self._systems: list[SystemDescriptor] = []
        self._execution_plan: ExecutionPlan | None = None

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register system for execution. Invalidates cached execution plan."""
        self._systems.append(descriptor)
        self._execution_plan = None

    def build_execution_plan(self) -> ExecutionPlan:
        plan = self._group_builder.build(self._systems)
        logger.debug("Built execution plan with %d group(s)", len(plan))
        return plan

    def tick(self, world: World) -> None:
        """Execute all systems once. Returns after the last group finishes."""
        if self._execution_plan is None:
            self._execution_plan = self.build_execution_plan()

        for group in self._execution_plan:
            self._execute_group(world, group)

    def _execute_group(self, world: World, group: ExecutionGroup) -> None:
        if not group.systems:
            return
        workers = min(self._config.max_workers, len(group.systems))
        if workers == 1:
            for system in group.systems:
                world.execute_system(system)
            return

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ecsbench") as pool:
            futures = [pool.submit(world.execute_system, system) for system in group.systems]
            # Raises the first failure in registration order
            for future in futures:
                future.result()


# Alias for sequential execution (max_workers=1)
def SequentialScheduler() -> SimpleScheduler:  # noqa: N802
    """Create a scheduler that executes systems one at a time."""
    return SimpleScheduler(config=SchedulerConfig(max_workers=1))
