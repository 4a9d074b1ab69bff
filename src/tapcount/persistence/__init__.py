"""
TapCount Persistence Module

Storage backends for the shared counter.
"""

from .base import CounterStore, StoreError, StoreWriteError
from .json_file import JsonFileStore
from .memory import MemoryStore

__all__ = [
    "CounterStore",
    "StoreError",
    "StoreWriteError",
    "JsonFileStore",
    "MemoryStore",
]
