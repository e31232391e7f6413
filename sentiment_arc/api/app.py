"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sentiment_arc import __version__
from sentiment_arc.api.dependencies import get_lexicon
from sentiment_arc.api.routes import analyze, health
from sentiment_arc.config.settings import get_settings
from sentiment_arc.observability.logging import bind_context, clear_context
from sentiment_arc.observability.metrics import get_metrics

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Sentiment API starting up", version=__version__)

    settings = get_settings()
    if settings.metrics_enabled:
        metrics = get_metrics()
        metrics.start_server(settings.metrics_port)
        metrics.set_lexicon_sizes(get_lexicon().summary())

    yield

    logger.info("Sentiment API shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    openapi_tags = [
        {"name": "health", "description": "Service health checks"},
        {"name": "analysis", "description": "Lexical and contextual sentiment analysis"},
    ]

    app = FastAPI(
        title="Sentiment Arc API",
        description="""
Lexicon-based French sentiment analysis.

## Analyzers

- **Lexical**: word, idiom, and emoji polarity with negation and modifiers
- **Contextual**: lexical score adjusted for progression, conclusion,
  transitions, and narrative arc

## Authentication

Requires `X-API-KEY` header when API keys are configured, except `/health`.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=openapi_tags,
    )

    # CORS (origins from CORS_ORIGINS env var, comma-separated)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Request logging and correlation ID middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Correlation ID: use incoming header or generate a new one
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )

        # Bind to structlog contextvars for automatic log correlation
        bind_context(request_id=request_id)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            clear_context()

    # Exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error_type": "internal"},
        )

    # Include routers
    app.include_router(analyze.router, tags=["analysis"])
    app.include_router(health.router, tags=["health"])

    # Root endpoint
    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": "Sentiment Arc API",
            "version": __version__,
            "docs": "/docs",
        }

    return app
