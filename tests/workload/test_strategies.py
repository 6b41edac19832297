"""Tests for ownership strategies.

Each strategy must bump exactly the record its handle reaches, by one.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ecsbench import NotFound, Owned, ScopedAccess, World, system
from ecsbench.workload import (
    ExclusiveOwned,
    LockedCell,
    Point,
    PointBoxes,
    PointEntities,
    PointLocks,
    PointSlots,
    RegistryResolved,
    SharedArena,
    SharedLocked,
    SharedUnchecked,
    mutate_referrers,
)


def run_with_points(world: World, body) -> None:
    """Run body(view) inside a system holding a mutable Point view."""

    @system(writes=(Point,))
    def with_points(access: ScopedAccess) -> None:
        body(access.query_mut(Point))

    world.execute_system(with_points)


def test_registry_resolved_bumps_target(world: World):
    entity = world.spawn(Point(7, 7))
    run_with_points(world, lambda view: RegistryResolved(view).resolve_and_mutate(entity))
    assert world.get_mut(entity, Point) == Point(8, 8)


def test_registry_resolved_needs_mutable_view(world: World):
    @system(reads=(Point,))
    def read_only(access: ScopedAccess) -> None:
        RegistryResolved(access(Point))

    with pytest.raises(ValueError, match="mutable"):
        world.execute_system(read_only)


def test_registry_resolved_destroyed_target_raises(world: World):
    entity = world.spawn(Point())
    world.destroy(entity)

    with pytest.raises(NotFound):
        run_with_points(world, lambda view: RegistryResolved(view).resolve_and_mutate(entity))


def test_exclusive_owned_bumps_box():
    box = Owned(Point(1, 2))
    ExclusiveOwned().resolve_and_mutate(box)
    assert box.unwrap() == Point(2, 3)


def test_shared_locked_bumps_and_releases():
    cell = LockedCell(Point())
    strategy = SharedLocked()
    strategy.resolve_and_mutate(cell)
    strategy.resolve_and_mutate(cell)
    assert strategy.peek(cell) == Point(2, 2)


@pytest.mark.parametrize("check_exclusive", [True, False])
def test_shared_unchecked_bumps_slot(check_exclusive):
    arena = SharedArena[Point](check_exclusive=check_exclusive)
    slot = arena.push(Point(4, 4))
    strategy = SharedUnchecked(arena)

    strategy.resolve_and_mutate(slot)

    assert strategy.peek(slot) == Point(5, 5)
    assert arena.active_writers() == 0


def test_bump_wraps_at_u32():
    point = Point(0xFFFF_FFFF, 0xFFFF_FFFF)
    ExclusiveOwned().resolve_and_mutate(Owned(point))
    assert point == Point(0, 0)


def test_mutate_referrers_visits_every_handle_in_order(world: World):
    entities = [world.spawn(Point(i, i)) for i in range(3)]
    referrers = [PointEntities(tuple(entities)), PointEntities((entities[0],))]
    counts = []

    run_with_points(
        world, lambda view: counts.append(mutate_referrers(referrers, RegistryResolved(view)))
    )

    assert counts == [4]
    assert [world.get_mut(e, Point).x for e in entities] == [2, 2, 3]


def test_mutate_referrers_with_owned_boxes():
    referrers = [PointBoxes((Owned(Point()), Owned(Point()))) for _ in range(2)]
    assert mutate_referrers(referrers, ExclusiveOwned()) == 4
    assert all(box.value == Point(1, 1) for r in referrers for box in r.handles)


def test_aliased_handles_bump_target_once_per_pass(world: World):
    target = world.spawn(Point(3, 3))
    referrers = [PointEntities((target,) * 5)]
    counts = []

    for _ in range(2):
        run_with_points(
            world, lambda view: counts.append(mutate_referrers(referrers, RegistryResolved(view)))
        )

    assert counts == [1, 1]
    assert world.get_mut(target, Point) == Point(5, 5)


def test_aliased_resolution_still_fails_for_missing_target(world: World):
    live = world.spawn(Point())
    gone = world.spawn(Point())
    world.destroy(gone)
    referrers = [PointEntities((live, live, gone))]

    with pytest.raises(NotFound):
        run_with_points(world, lambda view: mutate_referrers(referrers, RegistryResolved(view)))


def test_aliased_locked_cell_bumped_once():
    cell = LockedCell(Point())
    referrers = [PointLocks((cell, cell, cell))]
    assert mutate_referrers(referrers, SharedLocked()) == 1
    assert SharedLocked().peek(cell) == Point(1, 1)


@given(
    referrers=st.lists(
        st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=6),
        max_size=5,
    )
)
def test_each_target_bumped_once_per_referrer(referrers):
    """PROPERTY: A pass bumps each target once for every referrer reaching it."""
    arena = SharedArena[Point](check_exclusive=True)
    for _ in range(5):
        arena.push(Point())

    mutated = mutate_referrers([PointSlots(tuple(r)) for r in referrers], SharedUnchecked(arena))

    assert mutated == sum(len(set(r)) for r in referrers)
    for slot, point in enumerate(arena):
        expected = sum(1 for r in referrers if slot in r)
        assert point == Point(expected, expected)
