"""
FastAPI Application Module

Wires the four routes to RequestHandlers and shapes the error responses.

Routes:
    GET /entry/{key}          -> show_entry
    GET /list                 -> list_entries
    PUT /entry/{key}/{value}  -> update_entry
    GET /                     -> welcome

Unmatched paths answer 404 "404 page not found", a known path with the
wrong method answers 405 with an Allow header. Requests announcing a
body larger than settings.MAX_BODY_SIZE are refused with 413 before any
handler runs.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config.settings import settings
from ..handlers import RequestHandlers
from ..store.store import KeyValueStore

logger = logging.getLogger(__name__)


async def http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render routing errors as plain text."""
    if exc.status_code == HTTPStatus.NOT_FOUND:
        body = "404 page not found\n"
    else:
        body = f"{HTTPStatus(exc.status_code).phrase}\n"
    return PlainTextResponse(body, status_code=exc.status_code, headers=exc.headers)


async def limit_body_size(request: Request, call_next):
    """Refuse requests whose Content-Length exceeds MAX_BODY_SIZE."""
    length = request.headers.get("content-length")
    if length is not None and length.isdigit() and int(length) > settings.MAX_BODY_SIZE:
        logger.debug(f"Refusing {request.method} {request.url.path}: body of {length} bytes")
        return PlainTextResponse(
            "413 Request Entity Too Large\n",
            status_code=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
            headers={"Connection": "close"},
        )
    return await call_next(request)


def create_app(store: KeyValueStore = None) -> FastAPI:
    """
    Build the service's FastAPI application.

    Args:
        store: KeyValueStore to serve (creates new one if not provided)

    Returns:
        The application; its store is reachable as app.state.store
    """
    handlers = RequestHandlers(store if store is not None else KeyValueStore())

    app = FastAPI(
        title="restservice",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = handlers.store

    app.add_exception_handler(StarletteHTTPException, http_error)
    app.middleware("http")(limit_body_size)

    # Sync endpoints run on FastAPI's thread pool, so handlers execute in parallel
    app.add_api_route("/entry/{key}", handlers.show_entry, methods=["GET"],
                      response_class=PlainTextResponse)
    app.add_api_route("/list", handlers.list_entries, methods=["GET"],
                      response_class=PlainTextResponse)
    app.add_api_route("/entry/{key}/{value}", handlers.update_entry, methods=["PUT"],
                      response_class=PlainTextResponse)
    app.add_api_route("/", handlers.welcome, methods=["GET"],
                      response_class=HTMLResponse)
    return app
