"""Named benchmark scenarios and the fixtures they build.

Two groups:

- ``entity_get``: N referrers, each with K handles, one mutation pass per
  world tick. ``entity``, ``locked`` and ``unchecked`` alias one target per
  referrer K times. ``owned`` gives every handle its own target, so it
  performs K independent bumps where the others resolve one record K times
  and bump it once. Each scenario carries this as its ``aliasing`` label.
- ``entity_iter``: one pass bumps every element of a large collection.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ecsbench.bench.systems import (
    lock_point_cells,
    mutate_point_boxes,
    mutate_point_slots,
    resolve_point_entities,
)
from ecsbench.config import BenchSettings
from ecsbench.core.component import Owned
from ecsbench.core.identity import EntityId
from ecsbench.scheduling import SchedulerConfig, SimpleScheduler
from ecsbench.workload.handles import LockedCell, SharedArena
from ecsbench.workload.iteration import FlatDirect, FlatIndirect, RegistryIterated
from ecsbench.workload.point import Point, seeded_point
from ecsbench.workload.referrers import (
    Aliasing,
    PointBoxes,
    PointEntities,
    PointLocks,
    PointSlots,
    Referrer,
    ReferrerBuilder,
)
from ecsbench.workload.strategies import (
    ExclusiveOwned,
    OwnershipStrategy,
    RegistryResolved,
    SharedLocked,
    SharedUnchecked,
)
from ecsbench.world import QueryView, World

ENTITY_GET = "entity_get"
ENTITY_ITER = "entity_iter"


class Fixture(Protocol):
    def run_pass(self) -> None:
        """Run one full pass over the already-built dataset."""
        ...


@dataclass
class MutationFixture:
    """Built dataset for one ownership strategy.

    Attributes:
        world: World holding the referrers and the registered pass system.
        aliasing: Whether a referrer's handles share one target.
        referrer_type: Referrer component the pass walks.
        resolver: Strategy used to read targets back without mutating them.
    """

    world: World
    aliasing: Aliasing
    referrer_type: type[Referrer[Any]]
    resolver: OwnershipStrategy[Any]

    def run_pass(self) -> None:
        self.world.tick()

    def referrers(self) -> list[Referrer[Any]]:
        return [referrer for _, referrer in self.world.query(self.referrer_type)]

    def resolved_targets(self) -> list[list[Point]]:
        """For each referrer, the record each of its handles reaches."""
        peek = self.resolver.peek
        return [[peek(handle) for handle in referrer.handles] for referrer in self.referrers()]


@dataclass(frozen=True)
class Scenario:
    """A named benchmark entry point.

    Attributes:
        name: Unique scenario name.
        group: Benchmark group the scenario belongs to.
        description: One line on what a pass does.
        build: Builds a fresh fixture from settings. Not timed.
        aliasing: Handle aliasing for mutation scenarios, None for iteration.
    """

    name: str
    group: str
    description: str
    build: Callable[[BenchSettings], Fixture]
    aliasing: Aliasing | None = None


def new_world(settings: BenchSettings) -> World:
    """Empty world whose scheduler uses the configured worker count."""
    config = SchedulerConfig(max_workers=settings.max_workers)
    return World(execution=SimpleScheduler(config=config))


def build_entity(settings: BenchSettings) -> MutationFixture:
    world = new_world(settings)
    builder = ReferrerBuilder[EntityId](settings.points_count)
    for i in range(settings.entities_count):
        target = world.spawn(seeded_point(i))
        world.spawn(builder.fill(target).build(PointEntities))
    world.register_system(resolve_point_entities)
    points = QueryView(world.storage, (Point,), mutable=True)
    return MutationFixture(world, Aliasing.ALIASED, PointEntities, RegistryResolved(points))


def build_owned(settings: BenchSettings) -> MutationFixture:
    world = new_world(settings)
    builder = ReferrerBuilder[Owned[Point]](settings.points_count)
    for i in range(settings.entities_count):
        for _ in range(settings.points_count):
            builder.push(Owned(seeded_point(i)))
        world.spawn(builder.build(PointBoxes))
    world.register_system(mutate_point_boxes)
    return MutationFixture(world, Aliasing.INDEPENDENT, PointBoxes, ExclusiveOwned())


def build_locked(settings: BenchSettings) -> MutationFixture:
    world = new_world(settings)
    builder = ReferrerBuilder[LockedCell[Point]](settings.points_count)
    for i in range(settings.entities_count):
        cell = LockedCell(seeded_point(i))
        world.spawn(builder.fill(cell).build(PointLocks))
    world.register_system(lock_point_cells)
    return MutationFixture(world, Aliasing.ALIASED, PointLocks, SharedLocked())


def build_unchecked(settings: BenchSettings) -> MutationFixture:
    world = new_world(settings)
    arena = SharedArena[Point](check_exclusive=settings.debug_assertions)
    world.set_singleton(arena)
    builder = ReferrerBuilder[int](settings.points_count)
    for i in range(settings.entities_count):
        slot = arena.push(seeded_point(i))
        world.spawn(builder.fill(slot).build(PointSlots))
    world.register_system(mutate_point_slots)
    return MutationFixture(world, Aliasing.ALIASED, PointSlots, SharedUnchecked(arena))


def build_entity_iter(settings: BenchSettings) -> RegistryIterated:
    return RegistryIterated.build(settings.iter_entities_count, "iter", world=new_world(settings))


def build_entity_for_each(settings: BenchSettings) -> RegistryIterated:
    return RegistryIterated.build(
        settings.iter_entities_count, "for_each", world=new_world(settings)
    )


def build_flat_iter(settings: BenchSettings) -> FlatDirect:
    return FlatDirect.build(settings.iter_entities_count)


def build_flat_boxed_iter(settings: BenchSettings) -> FlatIndirect:
    return FlatIndirect.build(settings.iter_entities_count)


SCENARIOS: dict[str, Scenario] = {
    s.name: s
    for s in (
        Scenario(
            "entity",
            ENTITY_GET,
            "entity IDs resolved through the registry",
            build_entity,
            Aliasing.ALIASED,
        ),
        Scenario(
            "owned",
            ENTITY_GET,
            "exclusively owned boxes, one independent target per handle",
            build_owned,
            Aliasing.INDEPENDENT,
        ),
        Scenario(
            "locked",
            ENTITY_GET,
            "mutex-guarded shared cells",
            build_locked,
            Aliasing.ALIASED,
        ),
        Scenario(
            "unchecked",
            ENTITY_GET,
            "shared arena indices mutated without a lock",
            build_unchecked,
            Aliasing.ALIASED,
        ),
        Scenario(
            "entity_iter",
            ENTITY_ITER,
            "registry iteration over every Point",
            build_entity_iter,
        ),
        Scenario(
            "entity_for_each",
            ENTITY_ITER,
            "registry callback traversal over every Point",
            build_entity_for_each,
        ),
        Scenario(
            "flat_iter",
            ENTITY_ITER,
            "plain list of Points",
            build_flat_iter,
        ),
        Scenario(
            "flat_boxed_iter",
            ENTITY_ITER,
            "plain list of boxed Points",
            build_flat_boxed_iter,
        ),
    )
}


def get_scenario(name: str) -> Scenario:
    """Look up a scenario by name.

    Raises:
        KeyError: If no scenario has that name.
    """
    try:
        return SCENARIOS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario {name!r}; known: {', '.join(SCENARIOS)}") from None


def scenarios_in_group(group: str) -> list[Scenario]:
    """Scenarios of one group, in registration order.

    Raises:
        KeyError: If the group has no scenarios.
    """
    found = [s for s in SCENARIOS.values() if s.group == group]
    if not found:
        groups = sorted({s.group for s in SCENARIOS.values()})
        raise KeyError(f"Unknown group {group!r}; known: {', '.join(groups)}")
    return found
