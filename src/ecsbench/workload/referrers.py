"""Referrer components: fixed-size lists of handles mutated every pass.

Usage:
    builder = ReferrerBuilder[EntityId](size=10)
    referrer = builder.fill(target).build(PointEntities)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Self, TypeVar

from ecsbench.core.component import Owned, component
from ecsbench.core.identity import EntityId
from ecsbench.workload.handles import LockedCell
from ecsbench.workload.point import Point

H = TypeVar("H")
R = TypeVar("R", bound="Referrer")  # type: ignore[type-arg]


class Aliasing(Enum):
    """How the handles of one referrer relate to each other."""

    ALIASED = "aliased"
    """All handles reach one shared target: a pass resolves it K times and bumps it once."""

    INDEPENDENT = "independent"
    """Each handle owns a distinct target: a pass applies one bump to each of K targets."""


@dataclass(slots=True)
class Referrer(Generic[H]):
    """Ordered, fixed-size tuple of handles.

    ``fresh`` marks, per position, whether the handle is the first of its
    referrer to reach its target. It is computed once at construction so a
    pass never hashes handles.
    """

    handles: tuple[H, ...]
    fresh: tuple[bool, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.handles = tuple(self.handles)
        if not self.handles:
            raise ValueError(f"{type(self).__name__} needs at least one handle")
        seen: set[H] = set()
        fresh = []
        for handle in self.handles:
            fresh.append(handle not in seen)
            seen.add(handle)
        self.fresh = tuple(fresh)

    def __len__(self) -> int:
        return len(self.handles)

    @property
    def target_count(self) -> int:
        """Number of distinct targets the handles reach."""
        return sum(self.fresh)


@component
@dataclass(slots=True)
class PointEntities(Referrer[EntityId]):
    """Entity IDs of Points, resolved through the registry."""


@component
@dataclass(slots=True)
class PointBoxes(Referrer[Owned[Point]]):
    """Exclusively owned Points, one box per handle."""


@component
@dataclass(slots=True)
class PointLocks(Referrer[LockedCell[Point]]):
    """Mutex-guarded shared Points."""


@component
@dataclass(slots=True)
class PointSlots(Referrer[int]):
    """Indices into the world's SharedArena of Points."""


class ReferrerBuilder(Generic[H]):
    """Collects exactly ``size`` handles, then freezes them into a referrer.

    Args:
        size: Number of handles every built referrer holds.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Referrer size must be positive, got {size}")
        self._size = size
        self._handles: list[H] = []

    @property
    def remaining(self) -> int:
        return self._size - len(self._handles)

    def push(self, handle: H) -> Self:
        """Append one handle.

        Raises:
            ValueError: If the builder already holds ``size`` handles.
        """
        if not self.remaining:
            raise ValueError(f"Referrer already holds {self._size} handles")
        self._handles.append(handle)
        return self

    def fill(self, handle: H) -> Self:
        """Push copies of one handle until the builder is full."""
        self._handles.extend([handle] * self.remaining)
        return self

    def build(self, referrer_type: type[R]) -> R:  # type: ignore[type-arg]
        """Freeze the handles into a referrer and reset the builder.

        Raises:
            ValueError: If fewer than ``size`` handles were pushed.
        """
        if self.remaining:
            raise ValueError(
                f"{referrer_type.__name__} needs {self._size} handles, got {len(self._handles)}"
            )
        handles, self._handles = tuple(self._handles), []
        return referrer_type(handles)
