"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Routers:
- auth, channels, messages, dm, users (all under /api)
- /metrics (Prometheus) and /health
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.config.logging_config import NO_CORRELATION_ID, correlation_id_var, setup_logging
from src.config.settings import get_config
from src.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    InvalidCredentialError,
    StorageError,
    UnauthenticatedError,
    ValidationFailedError,
)
from src.observability.metrics import (
    UNMATCHED_ROUTE,
    increment_error,
    observe_request_latency,
)
from src.presentation.api import (
    auth_router,
    channels_router,
    dm_router,
    messages_router,
    metrics_router,
    users_router,
)
from src.setup.ioc.container import create_container

# Settings class for APP_ENV (development, testing, production)
config = get_config()

# Setup logging
setup_logging(config.LOG_LEVEL, config.LOG_PATH)

logger = logging.getLogger("src.fastapi_app")

# Most specific first: LoginRequiredError is matched through AccessDeniedError
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationFailedError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialError, status.HTTP_403_FORBIDDEN),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def validation_reasons(errors: list[dict]) -> list[str]:
    """One short reason per failed rule; custom validator messages are kept verbatim."""
    reasons = []
    for error in errors:
        ctx_error = (error.get("ctx") or {}).get("error")
        reasons.append(str(ctx_error) if ctx_error else error.get("msg", "Invalid input"))
    return reasons


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    """Records method, route, status and latency of every request in Prometheus."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        # Route template ("/api/dm/{username}"), not the raw path, to bound label cardinality
        route = request.scope.get("route")
        route_path = getattr(route, "path", UNMATCHED_ROUTE)
        observe_request_latency(request.method, route_path, response.status_code, duration)
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration * 1000:.1f} ms)"
        )
        return response


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use. A new one built from the settings is
            created when omitted, so every app gets its own store.

    Returns:
        FastAPI application instance
    """
    # Dishka adds middleware, so the container must exist before the app starts
    container = container or create_container(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Chat API",
        description="Channels, direct messages and accounts for the chat client",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    # Starlette runs the last-added middleware first: correlation ID is set before metrics
    app.add_middleware(RequestMetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        reasons = validation_reasons(exc.errors())
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {reasons}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": reasons},
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code = status_for(exc)
        increment_error(type(exc).__name__)
        if status_code >= 500:
            logger.error(f"[DOMAIN ERROR {status_code}] {exc.message}")
        else:
            logger.info(f"[DOMAIN ERROR {status_code}] {exc.message}")
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Global exception handler; the exception text stays in the log
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(channels_router)
    app.include_router(messages_router)
    app.include_router(dm_router)
    app.include_router(users_router)
    app.include_router(metrics_router)

    # Prebuilt browser client, mounted last so /api routes win
    if config.STATIC_DIR and Path(config.STATIC_DIR).is_dir():
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="client")

    return app


# Create the app instance
app = create_fastapi_app()
