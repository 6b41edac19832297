"""Access pattern models.

Usage:
    @system(reads=(PointEntities,), writes=(Point,))
    @system(reads=AllAccess(), writes=AllAccess())
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AllAccess:
    """Unrestricted component access."""

    pass


@dataclass(frozen=True)
class NoAccess:
    """No component access."""

    pass


@dataclass(frozen=True)
class TypeAccess:
    """Access to all entities with certain component types."""

    types: frozenset[type]

    def __init__(self, types: tuple[type, ...] | frozenset[type]):
        object.__setattr__(self, "types", frozenset(types))


AccessPattern = AllAccess | TypeAccess | NoAccess
