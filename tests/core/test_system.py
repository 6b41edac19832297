"""Tests for system declarations and conflict detection."""

from dataclasses import dataclass

import pytest

from ecsbench.core.query import AllAccess, NoAccess, TypeAccess, normalize_access
from ecsbench.core.system import system


@dataclass
class A:
    pass


@dataclass
class B:
    pass


def test_no_declarations_means_full_access():
    @system()
    def anything(access):
        pass

    assert anything.reads == AllAccess()
    assert anything.writes == AllAccess()
    assert anything.can_write_type(A)


def test_writes_only_defaults_reads_to_none():
    @system(writes=(A,))
    def writer(access):
        pass

    assert writer.reads == NoAccess()
    assert writer.can_read_type(A), "write implies read"
    assert not writer.can_read_type(B)


def test_normalize_access_rejects_garbage():
    with pytest.raises(TypeError):
        normalize_access(("not a type",))  # type: ignore[arg-type]
    assert normalize_access(()) == TypeAccess(frozenset())


def test_writers_of_same_type_conflict():
    @system(writes=(A,))
    def first(access):
        pass

    @system(writes=(A,))
    def second(access):
        pass

    assert first.conflicts_with(second)


def test_writer_conflicts_with_reader():
    @system(writes=(A,))
    def writer(access):
        pass

    @system(reads=(A,))
    def reader(access):
        pass

    assert writer.conflicts_with(reader)
    assert reader.conflicts_with(writer)


def test_disjoint_writers_do_not_conflict():
    @system(writes=(A,))
    def write_a(access):
        pass

    @system(writes=(B,))
    def write_b(access):
        pass

    assert not write_a.conflicts_with(write_b)


def test_readers_never_conflict():
    @system(reads=(A,))
    def first(access):
        pass

    @system(reads=(A, B))
    def second(access):
        pass

    assert not first.conflicts_with(second)


def test_reading_what_another_writes_conflicts():
    @system(reads=(B,), writes=(A,))
    def left(access):
        pass

    @system(writes=(B,))
    def right(access):
        pass

    assert left.conflicts_with(right)


def test_dev_systems_conflict_with_everything():
    @system.dev()
    def inspector(access):
        pass

    @system(reads=(A,))
    def reader(access):
        pass

    assert inspector.conflicts_with(reader)
