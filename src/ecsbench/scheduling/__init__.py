"""System scheduling and execution."""

from ecsbench.scheduling.models import (
    AccessGroupBuilder,
    ExecutionGroup,
    ExecutionGroupBuilder,
    ExecutionPlan,
    SchedulerConfig,
)
from ecsbench.scheduling.scheduler import SequentialScheduler, SimpleScheduler

__all__ = [
    # Schedulers
    "SimpleScheduler",
    "SequentialScheduler",
    # Models
    "ExecutionGroup",
    "ExecutionPlan",
    "SchedulerConfig",
    # Group Builders
    "ExecutionGroupBuilder",
    "AccessGroupBuilder",
]
