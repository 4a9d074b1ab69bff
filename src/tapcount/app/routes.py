"""
HTTP Routes

Three endpoints over the shared counter plus the JSON error handlers that
replace the framework's default HTML error pages.
"""

import logging

from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse

from ..ui.page import render_page
from .middleware import CORS_HEADERS
from .service import CounterService

logger = logging.getLogger(__name__)


def _service(req: Request) -> CounterService:
    return req.app.state.counter_service


async def index(req: Request):
    """Serve the click-counter page."""
    return HTMLResponse(render_page(data_name=req.app.state.data_name))


async def get_count(req: Request):
    count = await _service(req).get_count()
    return JSONResponse({"count": count})


async def increment(req: Request):
    count = await _service(req).increment()
    return JSONResponse({"count": count})


ROUTES = [
    ("/", "GET", index),
    ("/api/count", "GET", get_count),
    ("/api/increment", "POST", increment),
]


def register_routes(app) -> None:
    """Register every counter route on a FastHTML app."""
    for path, method, handler in ROUTES:
        app.route(path, methods=[method])(handler)


# Error handlers ---------------------------------------------------------- #

async def not_found(req: Request, exc: Exception):
    return JSONResponse({"error": "Not found"}, status_code=404)


async def server_error(req: Request, exc: Exception):
    # ServerErrorMiddleware wraps the CORS middleware; add the headers here.
    logger.error(f"Unhandled error on {req.method} {req.url.path}", exc_info=exc)
    return JSONResponse({"error": "Server error"}, status_code=500, headers=CORS_HEADERS)


# A known path with the wrong method is reported as a plain 404.
EXCEPTION_HANDLERS = {
    404: not_found,
    405: not_found,
    500: server_error,
}
