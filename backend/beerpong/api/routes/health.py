"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the cache is absent/unreachable or
      the policy client was not constructed (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from beerpong.api.dependencies import get_cache, get_policy_client
from beerpong.core.repository_protocols import PolicyDecisionClient, ThrowCache

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "beerpong-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    cache: ThrowCache | None = Depends(get_cache),
    policy_client: PolicyDecisionClient | None = Depends(get_policy_client),
):
    """Readiness probe: cache connectivity and policy client presence."""
    cache_ok = await cache.ping() if cache else False
    checks = {
        "cache": "healthy" if cache_ok else "unavailable",
        "policy": "configured" if policy_client else "unavailable",
    }
    if not cache_ok or policy_client is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
