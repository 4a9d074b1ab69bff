"""
TapCount - a persistent click counter served over HTTP

A FastHTML application that serves one interactive page and a small JSON API
for reading and incrementing a counter stored in a JSON file.
"""

from .app import CounterService, create_app
from .config import AppConfig, Environment, LoggingConfig
from .core import Counter
from .persistence import CounterStore, JsonFileStore, MemoryStore, StoreError, StoreWriteError

__version__ = "0.1.0"

__all__ = [
    # Core
    "Counter",

    # Persistence
    "CounterStore",
    "JsonFileStore",
    "MemoryStore",
    "StoreError",
    "StoreWriteError",

    # Application
    "CounterService",
    "create_app",

    # Configuration
    "AppConfig",
    "Environment",
    "LoggingConfig",
]
