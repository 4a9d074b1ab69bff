"""
TapCount Application Layer

HTTP routes, middleware and the service that coordinates counter updates.
"""

from .configurator import create_app
from .middleware import CORS_HEADERS, PermissiveCORSMiddleware
from .service import CounterService

__all__ = [
    "create_app",
    "CounterService",
    "PermissiveCORSMiddleware",
    "CORS_HEADERS",
]
