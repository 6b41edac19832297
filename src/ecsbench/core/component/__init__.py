"""Component functionality: registry, decorator, and value wrappers."""

from ecsbench.core.component.core import ComponentRegistry, component, get_registry
from ecsbench.core.component.models import ComponentTypeMeta
from ecsbench.core.component.wrapper import Owned

__all__ = [
    "ComponentTypeMeta",
    "ComponentRegistry",
    "component",
    "get_registry",
    "Owned",
]
