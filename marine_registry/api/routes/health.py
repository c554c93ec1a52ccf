"""Health Routes - liveness and registry readiness.

Invariants:
    - GET /health/ always returns 200 while the process is up
    - GET /health/ready returns 503 until the database answers and both store
      tables (taxonomies, marine_species) exist
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import marine_registry.infrastructure.database as db_module

router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str, **details) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **details},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "marine-registry-api"}


@router.get("/ready")
async def readiness_check():
    """Ready once the taxonomy and marine specie stores can be served."""
    manager = db_module.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")
    missing = await manager.missing_tables()
    if missing:
        return _not_ready("schema_missing", missing_tables=missing)
    return {
        "status": "ready",
        "checks": {
            "database": "healthy",
            "stores": ["marine_species", "taxonomies"],
        },
    }
