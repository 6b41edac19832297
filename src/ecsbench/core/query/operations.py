"""Access pattern normalization and conflict checks."""

from __future__ import annotations

from ecsbench.core.query.models import AccessPattern, AllAccess, NoAccess, TypeAccess

AccessSpec = tuple[type, ...] | AllAccess | NoAccess | None


def normalize_access(spec: AccessSpec) -> AccessPattern:
    """Convert an access specification to a normalized AccessPattern.

    - None or empty tuple -> TypeAccess with no types
    - AllAccess / NoAccess -> passthrough
    - Tuple of types -> TypeAccess

    Raises:
        TypeError: If spec is not a recognized access specification format.
    """
    if spec is None or spec == ():
        return TypeAccess(frozenset())
    if isinstance(spec, AllAccess | NoAccess):
        return spec
    if isinstance(spec, tuple) and all(isinstance(t, type) for t in spec):
        return TypeAccess(spec)
    raise TypeError(f"Invalid access specification: {spec}")


def normalize_reads_and_writes(
    reads: AccessSpec,
    writes: AccessSpec,
) -> tuple[AccessPattern, AccessPattern]:
    """Normalize a (reads, writes) pair.

    Both None means full access. If only one side is given, the other side
    defaults to no access.
    """
    if reads is None and writes is None:
        return AllAccess(), AllAccess()
    reads_access = NoAccess() if reads is None else normalize_access(reads)
    writes_access = NoAccess() if writes is None else normalize_access(writes)
    return reads_access, writes_access


def patterns_overlap(a: AccessPattern, b: AccessPattern) -> bool:
    """Check whether two access patterns can touch the same component type."""
    if isinstance(a, NoAccess) or isinstance(b, NoAccess):
        return False
    if isinstance(a, AllAccess) or isinstance(b, AllAccess):
        return True
    return not a.types.isdisjoint(b.types)
