"""Health & Readiness: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 200 once settings load; the service has no backing stores
"""

import logging
from fastapi import APIRouter, status

from mapcatalog.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "mapcatalog-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check: configuration loaded."""
    settings = get_settings()
    return {
        "status": "ready",
        "checks": {"config": "loaded"},
        "catalog_max_bytes": settings.catalog_max_bytes,
    }
