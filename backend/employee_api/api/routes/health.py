"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the upstream client is not initialized
    - Neither probe calls the upstream (would spend its rate-limit budget)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import employee_api.infrastructure.employee_client as client_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "employee-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: the upstream client must be initialized."""
    if client_module.employee_client is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "upstream_client_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"upstream_client": "initialized"}}
