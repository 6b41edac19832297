"""Query functionality: access patterns and their operations."""

from ecsbench.core.query.models import AccessPattern, AllAccess, NoAccess, TypeAccess
from ecsbench.core.query.operations import (
    normalize_access,
    normalize_reads_and_writes,
    patterns_overlap,
)

__all__ = [
    # Models
    "AccessPattern",
    "AllAccess",
    "NoAccess",
    "TypeAccess",
    # Operations
    "normalize_access",
    "normalize_reads_and_writes",
    "patterns_overlap",
]
