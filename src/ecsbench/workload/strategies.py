"""Ownership strategies: four ways to resolve a handle and mutate its target.

Every strategy honours the same contract: after ``resolve_and_mutate(handle)``
the record the handle reaches has ``x`` and ``y`` incremented by exactly one,
and nothing else changed.

- RegistryResolved: ``EntityId`` looked up through a mutable Point view.
- ExclusiveOwned: ``Owned[Point]`` dereferenced with an attribute read.
- SharedLocked: ``LockedCell[Point]`` entered through its scoped mutex.
- SharedUnchecked: ``int`` index into a SharedArena, optionally writer-checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TypeVar

from ecsbench.core.component import Owned
from ecsbench.core.identity import EntityId
from ecsbench.workload.handles import LockedCell, SharedArena
from ecsbench.workload.point import Point

if TYPE_CHECKING:
    from ecsbench.workload.referrers import Referrer
    from ecsbench.world.access import QueryView

H = TypeVar("H")


class OwnershipStrategy(Protocol[H]):
    """Resolves one handle kind to a Point and bumps it."""

    def resolve_and_mutate(self, handle: H) -> None: ...

    def peek(self, handle: H) -> Point:
        """Resolve without mutating. For verification outside measured passes."""
        ...


class RegistryResolved:
    """Handles are entity IDs resolved through the registry.

    Args:
        points: Mutable single-type view over Point.

    Raises:
        NotFound: From resolve_and_mutate, if an entity has no Point.
    """

    __slots__ = ("_points",)

    def __init__(self, points: QueryView) -> None:
        if not points.is_mutable:
            raise ValueError("RegistryResolved needs a mutable Point view")
        self._points = points

    def resolve_and_mutate(self, handle: EntityId) -> None:
        self._points.get_mut(handle).bump()

    def peek(self, handle: EntityId) -> Point:
        return self._points.get(handle)  # type: ignore[no-any-return]


class ExclusiveOwned:
    """Handles own their Point outright; resolution is a dereference."""

    __slots__ = ()

    def resolve_and_mutate(self, handle: Owned[Point]) -> None:
        handle.value.bump()

    def peek(self, handle: Owned[Point]) -> Point:
        return handle.value


class SharedLocked:
    """Handles share a Point behind a mutex.

    Raises:
        LockPoisoned: From resolve_and_mutate, if the cell was poisoned.
    """

    __slots__ = ()

    def resolve_and_mutate(self, handle: LockedCell[Point]) -> None:
        with handle.lock() as point:
            point.bump()

    def peek(self, handle: LockedCell[Point]) -> Point:
        with handle.lock() as point:
            return point


class SharedUnchecked:
    """Handles are indices into a shared arena, mutated without a lock.

    Safe only while the scheduler guarantees one writer per record. When the
    arena checks exclusivity, an overlapping write raises InvariantViolation.
    """

    __slots__ = ("_arena",)

    def __init__(self, arena: SharedArena[Point]) -> None:
        self._arena = arena

    @property
    def arena(self) -> SharedArena[Point]:
        return self._arena

    def resolve_and_mutate(self, handle: int) -> None:
        arena = self._arena
        if arena.check_exclusive:
            with arena.borrow_mut(handle) as point:
                point.bump()
        else:
            arena.get_unchecked(handle).bump()

    def peek(self, handle: int) -> Point:
        return self._arena.get_unchecked(handle)


def mutate_referrers(referrers: Iterable[Referrer[H]], strategy: OwnershipStrategy[H]) -> int:
    """Run one mutation pass over every handle of every referrer, in order.

    Every handle is resolved. A handle equal to an earlier one of the same
    referrer reaches a target already bumped in this pass, so it is resolved
    with ``peek`` instead. Each distinct target therefore gains exactly one
    per pass, whether a referrer's handles alias one record or not. The
    choice follows the referrer's precomputed ``fresh`` mask.

    Returns:
        Number of targets mutated.
    """
    resolve_and_mutate = strategy.resolve_and_mutate
    peek = strategy.peek
    mutated = 0
    for referrer in referrers:
        for handle, fresh in zip(referrer.handles, referrer.fresh):
            if fresh:
                resolve_and_mutate(handle)
                mutated += 1
            else:
                peek(handle)
    return mutated
