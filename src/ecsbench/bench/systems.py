"""Per-strategy mutation systems.

Each system walks every referrer of its kind and resolves every handle
through the matching ownership strategy.
"""

from __future__ import annotations

from ecsbench.core.system import system
from ecsbench.workload.handles import SharedArena
from ecsbench.workload.point import Point
from ecsbench.workload.referrers import PointBoxes, PointEntities, PointLocks, PointSlots
from ecsbench.workload.strategies import (
    ExclusiveOwned,
    RegistryResolved,
    SharedLocked,
    SharedUnchecked,
    mutate_referrers,
)
from ecsbench.world import ScopedAccess

_EXCLUSIVE_OWNED = ExclusiveOwned()
_SHARED_LOCKED = SharedLocked()


@system(reads=(PointEntities,), writes=(Point,))
def resolve_point_entities(access: ScopedAccess) -> None:
    strategy = RegistryResolved(access.query_mut(Point))
    mutate_referrers(access(PointEntities).values(), strategy)


@system(writes=(PointBoxes,))
def mutate_point_boxes(access: ScopedAccess) -> None:
    mutate_referrers(access.query_mut(PointBoxes).values(), _EXCLUSIVE_OWNED)


@system(writes=(PointLocks,))
def lock_point_cells(access: ScopedAccess) -> None:
    mutate_referrers(access.query_mut(PointLocks).values(), _SHARED_LOCKED)


@system(reads=(PointSlots,), writes=(SharedArena,))
def mutate_point_slots(access: ScopedAccess) -> None:
    strategy = SharedUnchecked(access.singleton(SharedArena))
    mutate_referrers(access(PointSlots).values(), strategy)
