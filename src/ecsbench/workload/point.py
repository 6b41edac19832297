"""The mutated payload shared by every scenario."""

from __future__ import annotations

from dataclasses import dataclass

from ecsbench.core.component import component

U32_MASK = 0xFFFF_FFFF


@component
@dataclass(slots=True)
class Point:
    """Two unsigned 32-bit counters."""

    x: int = 0
    y: int = 0

    def bump(self) -> None:
        """Increment both counters by one, wrapping at 2**32."""
        self.x = (self.x + 1) & U32_MASK
        self.y = (self.y + 1) & U32_MASK


def seeded_point(i: int) -> Point:
    """Point for target ``i`` of a dataset: ``x = y = i``."""
    value = i & U32_MASK
    return Point(value, value)
