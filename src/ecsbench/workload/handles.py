"""Shared-ownership handle kinds.

Two ways of letting many referrers reach one record:

- ``LockedCell``: the record lives behind a mutex and is only reachable
  through a scoped accessor that always releases.
- ``SharedArena``: records live in one centrally owned list and referrers
  hold plain indices. Writers are kept apart by the scheduler; with
  ``check_exclusive`` on, overlapping writes are flagged instead of silently
  racing.

Usage:
    cell = LockedCell(Point(0, 0))
    with cell.lock() as point:
        point.bump()

    arena = SharedArena[Point]()
    slot = arena.push(Point(0, 0))
    with arena.borrow_mut(slot) as point:
        point.bump()
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from ecsbench.core.errors import InvariantViolation, LockPoisoned

T = TypeVar("T")


class LockedCell(Generic[T]):
    """Value guarded by a mutex, with poisoning.

    If code holding the lock raises, the cell is marked poisoned and every
    later ``lock()`` raises LockPoisoned. Poisoning is never cleared.
    """

    __slots__ = ("_value", "_mutex", "_poisoned")

    def __init__(self, value: T) -> None:
        self._value = value
        self._mutex = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def lock(self) -> Iterator[T]:
        """Hold the mutex for the duration of the block and yield the value.

        Blocks while another holder has the lock.

        Raises:
            LockPoisoned: If a previous holder failed inside its block.
        """
        with self._mutex:
            if self._poisoned:
                raise LockPoisoned(f"{type(self._value).__name__} cell is poisoned")
            try:
                yield self._value
            except BaseException:
                self._poisoned = True
                raise

    def __repr__(self) -> str:
        state = "poisoned" if self._poisoned else "ok"
        return f"LockedCell({self._value!r}, {state})"


class SharedArena(Generic[T]):
    """Centrally owned records addressed by stable indices.

    Sharing a record means holding the same index. The arena never removes
    or reorders slots, so indices stay valid for its lifetime.

    Args:
        check_exclusive: Track writers per index and raise InvariantViolation
            when two writers overlap.
    """

    def __init__(self, check_exclusive: bool = __debug__) -> None:
        self.check_exclusive = check_exclusive
        self._slots: list[T] = []
        self._writers: dict[int, object] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)

    def push(self, value: T) -> int:
        """Append a record and return its index."""
        self._slots.append(value)
        return len(self._slots) - 1

    def get_unchecked(self, index: int) -> T:
        """Return the record at index with no exclusivity tracking."""
        return self._slots[index]

    @contextmanager
    def borrow_mut(self, index: int) -> Iterator[T]:
        """Claim the record at index as its only writer for the block.

        Raises:
            InvariantViolation: If the index is already claimed, whether by
                another thread or by an enclosing borrow.
            IndexError: If index is out of range.
        """
        value = self._slots[index]
        if not self.check_exclusive:
            yield value
            return

        token = object()
        if self._writers.setdefault(index, token) is not token:
            raise InvariantViolation(f"Slot {index} already has a writer")
        try:
            yield value
        finally:
            del self._writers[index]

    def active_writers(self) -> int:
        """Number of currently claimed slots."""
        return len(self._writers)
