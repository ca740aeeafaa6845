"""
Confluence Bridge - Health API Routes

Patterns Applied:
- Health Check Pattern with a HealthService class
- Pydantic response models

Readiness means the service can actually call Confluence, i.e. a bearer
token is configured.
"""

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from confluence_bridge import __version__
from confluence_bridge.core.config import Settings, get_settings
from confluence_bridge.core.logging import get_logger

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


# =============================================================================
# Response Models
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    version: str
    service: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    status: str
    checks: dict[str, bool]


# =============================================================================
# Health Service
# =============================================================================


class HealthService:
    """Service class for health check operations."""

    def __init__(self, version: str = __version__, service: str = "confluence-bridge"):
        self._version = version
        self._service = service

    def check_health(self) -> dict[str, Any]:
        """Check basic service health.

        Returns:
            Health status dictionary with status, version, service
        """
        return {
            "status": "healthy",
            "version": self._version,
            "service": self._service,
        }

    def check_readiness(self, settings: Settings) -> tuple[dict[str, Any], bool]:
        """Check if service is ready to accept requests.

        Args:
            settings: Current settings

        Returns:
            Tuple of (readiness dict, is_ready bool)
        """
        checks = {
            "credentials_configured": settings.credentials() is not None,
        }

        is_ready = all(checks.values())
        result: dict[str, Any] = {
            "status": "ready" if is_ready else "not_ready",
            "checks": checks,
        }
        return result, is_ready


_health_service = HealthService()


def get_health_service() -> HealthService:
    """Get health service instance."""
    return _health_service


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Basic health check endpoint for liveness probe",
)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    service = get_health_service()
    data = service.check_health()
    logger.debug("health_check", status=data["status"])
    return HealthResponse(**data)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={
        200: {"description": "Service is ready"},
        503: {"description": "No Confluence credential configured"},
    },
    summary="Readiness Check",
    description="Readiness check endpoint for readiness probe",
)
async def readiness_check() -> JSONResponse:
    """Readiness check endpoint.

    Returns:
        200 if a bearer token is configured, 503 otherwise
    """
    service = get_health_service()
    data, is_ready = service.check_readiness(get_settings())

    status_code = status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE

    logger.debug("readiness_check", status=data["status"], is_ready=is_ready)
    return JSONResponse(content=data, status_code=status_code)
