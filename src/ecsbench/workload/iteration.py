"""Iteration strategies: one pass bumps every element of a large collection.

RegistryIterated goes through the world's scheduler and a mutable Point
view; FlatDirect and FlatIndirect walk plain lists, the latter through one
box per element.
"""

from __future__ import annotations

from typing import Literal, Protocol

from ecsbench.core.component import Owned
from ecsbench.core.system import SystemDescriptor, system
from ecsbench.world import ScopedAccess, World
from ecsbench.workload.point import Point, seeded_point

TraversalStyle = Literal["iter", "for_each"]


class IterationStrategy(Protocol):
    def run_pass(self) -> None:
        """Bump every element exactly once."""
        ...

    def records(self) -> list[Point]:
        """Elements in traversal order."""
        ...


@system(writes=(Point,))
def iterate_points(access: ScopedAccess) -> None:
    for point in access.query_mut(Point).values():
        point.bump()


@system(writes=(Point,))
def for_each_point(access: ScopedAccess) -> None:
    access.query_mut(Point).for_each_mut(Point.bump)


_TRAVERSALS: dict[str, SystemDescriptor] = {
    "iter": iterate_points,
    "for_each": for_each_point,
}


class RegistryIterated:
    """Points stored as entities; a pass is one world tick.

    Args:
        world: World already holding the Point entities.
        style: "iter" walks the view explicitly, "for_each" hands each
            Point to a callback.
    """

    def __init__(self, world: World, style: TraversalStyle = "iter") -> None:
        if style not in _TRAVERSALS:
            raise ValueError(
                f"Unknown traversal style {style!r}, expected one of {list(_TRAVERSALS)}"
            )
        self.world = world
        self.style = style
        world.register_system(_TRAVERSALS[style])

    @classmethod
    def build(
        cls, count: int, style: TraversalStyle = "iter", world: World | None = None
    ) -> RegistryIterated:
        world = world or World()
        for i in range(count):
            world.spawn(seeded_point(i))
        return cls(world, style)

    def run_pass(self) -> None:
        self.world.tick()

    def records(self) -> list[Point]:
        return [point for _, point in self.world.query(Point)]


class FlatDirect:
    """Points held directly in one list."""

    def __init__(self, points: list[Point]) -> None:
        self.points = points

    @classmethod
    def build(cls, count: int) -> FlatDirect:
        points: list[Point] = []
        for i in range(count):
            points.append(seeded_point(i))
        return cls(points)

    def run_pass(self) -> None:
        for point in self.points:
            point.bump()

    def records(self) -> list[Point]:
        return list(self.points)


class FlatIndirect:
    """Points held through one exclusively owned box per element."""

    def __init__(self, boxes: list[Owned[Point]]) -> None:
        self.boxes = boxes

    @classmethod
    def build(cls, count: int) -> FlatIndirect:
        boxes: list[Owned[Point]] = []
        for i in range(count):
            boxes.append(Owned(seeded_point(i)))
        return cls(boxes)

    def run_pass(self) -> None:
        for box in self.boxes:
            box.value.bump()

    def records(self) -> list[Point]:
        return [box.value for box in self.boxes]
