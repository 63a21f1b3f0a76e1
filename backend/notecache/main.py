"""
notecache — FastAPI Application Factory
========================================

What:  Builds and configures the FastAPI application for one cache directory.
How:   create_app(options) wires middleware, exception handlers, routers and
       a NoteStore on app.state. The CLI passes the result to uvicorn.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /notes /write│ │ /Upload… │ │ GET /health     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers (text/plain bodies):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Invalid/Exists→400 │ NotFound→404 │ else→500 │   │
    │  │ HTTPException→its own status                 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the cache directory if missing
    Shutdown: log only (no pooled resources to release)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notecache import __version__
from notecache.config import ServerOptions, Settings
from notecache.exceptions import NoteCacheError
from notecache.middleware.logging import RequestLoggingMiddleware
from notecache.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    current_request_id,
)
from notecache.routes import health, notes, static
from notecache.services.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called from the lifespan hook, once per server start.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # notecache.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    options: ServerOptions = app.state.options
    settings: Settings = app.state.settings

    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("notecache starting up...")

    cache_dir = options.cache_dir
    cache_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Cache directory: %s", cache_dir.resolve())

    logger.info("Server is running on http://%s:%d", options.host, options.port)
    logger.info("API docs: http://%s:%d/docs", options.host, options.port)
    logger.info("=" * 60)

    yield

    logger.info("notecache shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to plain-text responses.

    Handler hierarchy:
        NoteCacheError (and subclasses) → exc.status_code, exc.message
        RequestValidationError          → 400 (malformed path/query input)
        HTTPException (framework)       → exc.status_code, exc.detail
                                          (unknown route, bad multipart body)
        Exception (fallback)            → 500, generic message

    The fallback runs outside the middleware stack, so it sets
    X-Request-ID itself.

    Context dicts and stack traces are logged, never sent to the client.
    """

    @app.exception_handler(NoteCacheError)
    async def handle_notecache_error(request: Request, exc: NoteCacheError):
        rid = current_request_id(request)
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.debug("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = current_request_id(request)
        logger.warning("[%s] Request validation error: %s", rid, exc.errors())
        return PlainTextResponse("Invalid request", status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        rid = current_request_id(request)
        logger.debug("[%s] HTTP %d: %s", rid, exc.status_code, exc.detail)
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = current_request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse(
            "An unexpected error occurred.",
            status_code=500,
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(options: ServerOptions, settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        options:  Validated host/port/cache directory from the command line.
        settings: Ambient settings; read from the environment when omitted.

    Returns: Configured FastAPI instance serving notes from options.cache_dir.
    """
    app = FastAPI(
        title="notecache API",
        description=(
            "CRUD over plain-text notes stored as <name>.txt files "
            "in a cache directory."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.options = options
    app.state.settings = settings or Settings()
    app.state.note_store = NoteStore(options.cache_dir)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(static.router)
    app.include_router(health.router)

    return app
