"""
Confluence Bridge - HTTP Application Entry Point

FastAPI app exposing the tool registry over HTTP:
- uvicorn confluence_bridge.main:app

Patterns Applied:
- Lifespan context manager
- One-time configure_logging() at startup
- Pooled httpx.AsyncClient created at startup, closed at shutdown

Anti-Patterns Avoided:
- Deprecated @app.on_event - using modern lifespan pattern
- New httpx.AsyncClient per request
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from confluence_bridge.api.health import router as health_router
from confluence_bridge.api.tools import tools_router
from confluence_bridge.core.config import get_settings
from confluence_bridge.core.logging import configure_logging, get_logger
from confluence_bridge.core.tracing import configure_tracing
from confluence_bridge.tools.confluence_search import build_http_client

settings = get_settings()

configure_logging(
    log_level=settings.log_level,
    json_output=settings.log_json,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager for startup/shutdown events."""
    # =========================================================================
    # STARTUP
    # =========================================================================
    logger.info(
        "startup",
        service=settings.service_name,
        version=settings.version,
        environment=settings.environment,
    )

    if settings.tracing_enabled:
        configure_tracing(
            service_name=settings.service_name,
            console_export=settings.tracing_console_export,
        )
        logger.info("tracing_configured")

    app.state.http_client = build_http_client(settings)

    yield

    # =========================================================================
    # SHUTDOWN
    # =========================================================================
    logger.info("shutdown", service=settings.service_name)
    await app.state.http_client.aclose()
    app.state.http_client = None


app = FastAPI(
    title="Confluence-Bridge",
    description="Confluence search-and-aggregate tool for calling agents",
    version=settings.version,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(tools_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint pointing at the docs."""
    return {
        "service": settings.service_name,
        "version": settings.version,
        "docs": "/docs",
    }
