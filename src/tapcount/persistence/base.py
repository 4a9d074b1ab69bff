"""
TapCount Persistence Layer - Base Classes

This module provides the abstract interface for counter persistence backends.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for counter store operations"""
    pass


class StoreWriteError(StoreError):
    """Raised when the counter cannot be persisted"""
    pass


class CounterStore(ABC):
    """
    Abstract base class for counter persistence backends.

    Implementations hold a single non-negative integer. Reads are tolerant:
    anything that cannot be decoded reads as 0. Writes overwrite the whole
    stored value and propagate failures as ``StoreWriteError``.
    """

    @abstractmethod
    def read(self) -> int:
        """
        Read the current count.

        Returns:
            The stored count, or 0 if it is missing or unreadable
        """
        pass

    @abstractmethod
    def write(self, count: int) -> None:
        """
        Overwrite the stored count.

        Args:
            count: New non-negative count

        Raises:
            ValueError: if count is negative or not an integer
            StoreWriteError: if the backend cannot persist the value
        """
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check whether the backend already holds a value."""
        pass

    def ensure(self) -> None:
        """Initialize the backend with a zero count if nothing is stored yet."""
        if not self.exists():
            logger.info(f"{self.__class__.__name__}: initializing empty counter")
            self.write(0)

    @staticmethod
    def _validate(count: int) -> int:
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"count must be an integer, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return count
