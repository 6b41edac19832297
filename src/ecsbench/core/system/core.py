"""System decorator.

Usage:
    # System with declared access (validated at runtime)
    @system(reads=(PointEntities,), writes=(Point,))
    def resolve_point_entities(access: ScopedAccess) -> None:
        ...

    # Dev mode - unrestricted access, runs in its own execution group
    @system.dev()
    def debug_inspector(access: ScopedAccess) -> None:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ecsbench.core.query import AllAccess, normalize_reads_and_writes
from ecsbench.core.query.operations import AccessSpec
from ecsbench.core.system.models import SystemDescriptor


class _SystemDecorator:
    """System decorator factory. Used as @system(...) or @system.dev()."""

    def __call__(
        self,
        reads: AccessSpec = None,
        writes: AccessSpec = None,
    ) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Declare a system with optional access patterns.

        If both reads and writes are None, the system has full access but is
        still scheduled alongside others. If either is given, the other
        defaults to no access.

        Args:
            reads: Component types the system reads.
            writes: Component types the system writes.

        Returns:
            Decorator turning the function into a SystemDescriptor.
        """

        def decorator(fn: Callable[..., Any]) -> SystemDescriptor:
            reads_access, writes_access = normalize_reads_and_writes(reads, writes)
            return SystemDescriptor(
                name=fn.__name__,
                run=fn,
                reads=reads_access,
                writes=writes_access,
            )

        return decorator

    def dev(self) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Dev mode: unrestricted access, runs in isolation.

        Usage:
            @system.dev()
            def debug_system(access): ...
        """

        def decorator(fn: Callable[..., Any]) -> SystemDescriptor:
            return SystemDescriptor(
                name=fn.__name__,
                run=fn,
                reads=AllAccess(),
                writes=AllAccess(),
                runs_alone=True,
            )

        return decorator


system = _SystemDecorator()
