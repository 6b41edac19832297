"""Property tests for access patterns and system conflicts.

Conflict detection decides which systems may share an execution group, so a
missed conflict means two writers on one component type at once.
"""

from dataclasses import dataclass

from hypothesis import given
from hypothesis import strategies as st

from ecsbench.core.query import (
    AllAccess,
    NoAccess,
    TypeAccess,
    normalize_reads_and_writes,
    patterns_overlap,
)
from ecsbench.core.system import SystemDescriptor
from ecsbench.scheduling import AccessGroupBuilder


@dataclass
class CompA:
    value: int


@dataclass
class CompB:
    value: int


@dataclass
class CompC:
    value: int


component_types = [CompA, CompB, CompC]

type_sets = st.none() | st.lists(st.sampled_from(component_types), unique=True).map(tuple)


@st.composite
def descriptor_strategy(draw):
    """Generate a system with random declared reads and writes."""
    reads, writes = normalize_reads_and_writes(draw(type_sets), draw(type_sets))
    name = draw(st.text(alphabet="abcdef", min_size=1, max_size=6))
    return SystemDescriptor(
        name=name,
        run=lambda access: None,
        reads=reads,
        writes=writes,
        runs_alone=draw(st.booleans()),
    )


def touches(pattern, component_type) -> bool:
    if isinstance(pattern, AllAccess):
        return True
    if isinstance(pattern, NoAccess):
        return False
    return component_type in pattern.types


def test_no_access_never_overlaps():
    assert not patterns_overlap(NoAccess(), AllAccess())
    assert not patterns_overlap(TypeAccess(frozenset({CompA})), NoAccess())


def test_all_access_overlaps_types():
    assert patterns_overlap(AllAccess(), TypeAccess(frozenset({CompB})))


@given(a=descriptor_strategy(), b=descriptor_strategy())
def test_conflicts_are_symmetric(a, b):
    """PROPERTY: conflicts_with does not depend on argument order."""
    assert a.conflicts_with(b) == b.conflicts_with(a)


@given(a=descriptor_strategy(), b=descriptor_strategy())
def test_conflict_soundness(a, b):
    """PROPERTY: Non-conflicting systems never write what the other touches.

    False negative = two writers on one component type.
    """
    if a.conflicts_with(b):
        return

    for component_type in component_types:
        a_writes = touches(a.writes, component_type)
        b_writes = touches(b.writes, component_type)
        a_touches = a_writes or touches(a.reads, component_type)
        b_touches = b_writes or touches(b.reads, component_type)
        assert not (a_writes and b_touches), f"{a.name} writes {component_type.__name__}"
        assert not (b_writes and a_touches), f"{b.name} writes {component_type.__name__}"


@given(systems=st.lists(descriptor_strategy(), max_size=8))
def test_groups_never_hold_conflicts(systems):
    """PROPERTY: Every system is planned once and groups are conflict-free."""
    plan = AccessGroupBuilder().build(systems)

    planned = [s for group in plan for s in group.systems]
    assert sorted(map(id, planned)) == sorted(map(id, systems))
    for group in plan:
        for i, left in enumerate(group.systems):
            for right in group.systems[i + 1 :]:
                assert not left.conflicts_with(right)


@given(systems=st.lists(descriptor_strategy(), max_size=8))
def test_conflicting_systems_keep_registration_order(systems):
    """PROPERTY: A system never runs before an earlier system it conflicts with."""
    plan = AccessGroupBuilder().build(systems)
    group_of = {id(s): index for index, group in enumerate(plan) for s in group.systems}

    for i, earlier in enumerate(systems):
        for later in systems[i + 1 :]:
            if earlier.conflicts_with(later):
                assert group_of[id(earlier)] < group_of[id(later)]
