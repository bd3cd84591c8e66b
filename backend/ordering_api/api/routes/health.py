"""Health Routes — liveness and readiness probes.

Invariants:
    - GET /api/health/ answers 200 whenever the process can serve requests
    - GET /api/health/ready answers 503 until the database accepts queries
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ordering_api.infrastructure import database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness():
    """Ready only when the database round-trips a query."""
    manager = database.db_manager
    database_ok = manager is not None and await manager.health_check()
    checks = {"database": "healthy" if database_ok else "unavailable"}
    if not database_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
