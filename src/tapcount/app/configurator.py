"""
Application Configurator

Builds the FastHTML application: store, service, routes, middleware and
error handlers, in that order.
"""

import logging
import secrets
from typing import Optional

from fasthtml.common import FastHTML

from ..config import AppConfig
from ..persistence import CounterStore, JsonFileStore
from .middleware import setup_cors_middleware
from .routes import EXCEPTION_HANDLERS, register_routes
from .service import CounterService

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, store: Optional[CounterStore] = None) -> FastHTML:
    """
    Create the TapCount application.

    Args:
        config: Application configuration; loaded from the environment if omitted
        store: Counter store to use; defaults to a JsonFileStore at config.data_path

    Returns:
        The configured FastHTML app. The data file is created on startup.

    Example:
        ```python
        from tapcount import AppConfig, create_app

        app = create_app(AppConfig.from_env())
        ```
    """
    config = config or AppConfig.from_env()
    store = store or JsonFileStore(config.data_path)
    service = CounterService(store, serialize_increments=config.serialize_increments)

    async def lifespan(app):
        await service.startup()
        yield

    app = FastHTML(
        exception_handlers=dict(EXCEPTION_HANDLERS),
        lifespan=lifespan,
        default_hdrs=False,
        # sessions are unused; a per-process key avoids writing a key file
        secret_key=secrets.token_hex(32),
    )
    app.state.config = config
    app.state.counter_service = service
    app.state.data_name = store.path.name if isinstance(store, JsonFileStore) else "memory"

    register_routes(app)
    setup_cors_middleware(app)

    logger.debug(f"Application configured with {store!r}")
    return app
