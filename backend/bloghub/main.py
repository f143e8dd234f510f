"""
BlogHub Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error rendering
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn bloghub.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain (outermost first):                     │
    │  CORS → Request ID → Logging → GZip → Auth Gate          │
    │                                                          │
    │  Routes:                                                 │
    │  ┌────────────┐ ┌─────────────────┐ ┌────────────┐       │
    │  │ /api/users │ │ /api/categories │ │ /api/blogs │       │
    │  └────────────┘ └─────────────────┘ └────────────┘       │
    │  ┌────────────┐                                          │
    │  │ GET /health│  (outside the auth gate)                 │
    │  └────────────┘                                          │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ Unauthorized→401 │ NotFound→404 │      │
    │  Operation→500 {message, detail}                         │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (logged, not fatal)

    The store is NOT connected at startup; the first request that needs it
    connects lazily, so the server comes up even while the database is down.

    Shutdown:
    1. Dispose the store engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from bloghub import __version__
from bloghub.config import settings
from bloghub.database import store
from bloghub.exceptions import (
    BlogHubError,
    NotFoundError,
    OperationError,
    UnauthorizedError,
    ValidationError,
)
from bloghub.middleware.auth import AuthGateMiddleware
from bloghub.middleware.logging import RequestLoggingMiddleware
from bloghub.middleware.request_id import RequestIDMiddleware, request_id_var
from bloghub.routes import blogs, categories, health, users
from bloghub.services.token_verifier import TokenVerifier

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Access lines come from the "bloghub.access" logger (see
    middleware/logging.py); uvicorn's own access log is turned down so each
    request is logged once.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("BlogHub Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health reports the store as disconnected
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API prefix: %s", settings.api_prefix)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("BlogHub Backend shutting down...")
    await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError        → 400 {"message"}
        UnauthorizedError      → 401 {"message"}
        NotFoundError          → 404 {"message"}
        OperationError         → 500 {"message", "detail"}
        RequestValidationError → 500 {"message", "detail"} (bad page/limit)
        BlogHubError (base)    → 500 {"message"}
        Exception (fallback)   → 500 {"message", "detail"}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return JSONResponse(status_code=401, content={"message": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info(
            "[%s] Not found: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(OperationError)
    async def handle_operation_error(request: Request, exc: OperationError):
        logger.error(
            "[%s] Operation failed: %s | Detail: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.detail, exc.context,
        )
        return JSONResponse(
            status_code=500,
            content={"message": exc.message, "detail": exc.detail},
        )

    # Unparseable query parameters (page=0, limit=abc) fail the route like any
    # other handler error, under that route's failure message
    list_failures = {
        f"{settings.api_prefix}/categories": "Error in fetching category!",
        f"{settings.api_prefix}/blogs": "Error in fetching blogs!",
    }

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = list_failures.get(request.url.path, "Invalid request parameters")
        logger.warning("[%s] Invalid request: %s", request_id_var.get(""), exc.errors())
        return JSONResponse(
            status_code=500,
            content={"message": message, "detail": str(exc)},
        )

    @app.exception_handler(BlogHubError)
    async def handle_bloghub_error(request: Request, exc: BlogHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "detail": str(exc)},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(token_verifier: Optional[TokenVerifier] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        token_verifier: Policy for bearer tokens on API routes. Defaults to
                        AcceptAnyTokenVerifier (any non-empty token passes).

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="BlogHub API",
        description=(
            "REST API for users, their categories, and the blogs filed under "
            "each category. Every /api route requires an Authorization: Bearer token."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost).
    # Added: AuthGate → GZip → Logging → RequestID → CORS
    # Runs:  CORS → RequestID → Logging → GZip → AuthGate → route

    # Innermost: rejected requests still get a request ID and an access log line
    app.add_middleware(AuthGateMiddleware, verifier=token_verifier)

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # Outermost so preflight OPTIONS requests never reach the auth gate
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(categories.router)
    app.include_router(blogs.router)
    app.include_router(health.router)

    return app


# uvicorn expects `bloghub.main:app` to be importable
app = create_app()
