"""Box-style wrappers around a single value."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Owned(Generic[T]):
    """Exclusively owned indirection to one value.

    The box is the only holder of its value; dereferencing is a plain
    attribute read.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def unwrap(self) -> T:
        """Return the boxed value."""
        return self.value

    def __repr__(self) -> str:
        return f"Owned({self.value!r})"
