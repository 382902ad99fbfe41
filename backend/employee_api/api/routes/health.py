"""Service Health — liveness at the prefix itself, readiness with per-check status.

Invariants:
    - GET /api/v1/health answers 200 while the process serves requests
    - GET /api/v1/health/ready answers 200 only when every check is "healthy",
      503 otherwise; both bodies list each check by name
    - No database manager (startup incomplete) counts as "unavailable"
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from employee_api.infrastructure import database

SERVICE_NAME = "employee-records-api"

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_check() -> str:
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return "unavailable"
    return "healthy"


@router.get("", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    checks = {"database": await _database_check()}
    failing = sorted(name for name, state in checks.items() if state != "healthy")
    if failing:
        logger.warning(f"Not ready, failing checks: {', '.join(failing)}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": f"{failing[0]}_unavailable",
                "checks": checks,
            },
        )
    return {"status": "ready", "checks": checks}
