"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /healthz always returns 200 if process is up (liveness)

Design Decisions:
    - No readiness dependency: the webhook has no backing store to wait for
"""

from fastapi import APIRouter, Depends, status

from vpcadmission.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.service_name,
    }
