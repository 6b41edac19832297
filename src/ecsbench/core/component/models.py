"""Component metadata models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComponentTypeMeta:
    """Registration record attached to every component class."""

    component_type_id: int
    type_name: str
