"""
TapCount Persistence Layer - Memory Backend

In-memory counter persistence for development and testing.
Data is lost when the application restarts.
"""

from typing import Optional

from .base import CounterStore


class MemoryStore(CounterStore):
    """In-memory counter store with the same semantics as the file backend."""

    def __init__(self, initial: Optional[int] = None):
        self._count: Optional[int] = None
        if initial is not None:
            self.write(initial)

    def read(self) -> int:
        return self._count or 0

    def write(self, count: int) -> None:
        self._count = self._validate(count)

    def exists(self) -> bool:
        return self._count is not None

    def __repr__(self) -> str:
        return f"MemoryStore(count={self._count!r})"
