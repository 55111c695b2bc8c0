"""Mapper protocol.

All mappers implement this interface. The result decorators accept any
object satisfying it.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, source: Any) -> T:
        """Map a single source item to a target object."""
        ...

    def map_many(self, sources: list[Any]) -> list[T]:
        """Map multiple source items to a list of target objects."""
        ...

    def __call__(self, data: Any) -> Any:
        """Map an item or a collection; None passes through."""
        ...
