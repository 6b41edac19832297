"""Fatal benchmark errors.

None of these are retried. Each one means a fixture was built wrong or an
external exclusivity guarantee was broken, so the current run is aborted.
"""

from __future__ import annotations

from typing import Any


class BenchmarkError(Exception):
    """Base class for errors that abort a benchmark run."""


class NotFound(BenchmarkError, LookupError):
    """A handle resolved to a record that does not exist."""

    def __init__(self, entity: Any, component_type: type) -> None:
        self.entity = entity
        self.component_type = component_type
        super().__init__(f"Entity {entity} has no component {component_type.__name__}")


class LockPoisoned(BenchmarkError):
    """A previous lock holder failed while holding the lock."""


class InvariantViolation(BenchmarkError):
    """Two writers held the same unchecked shared record at once."""
