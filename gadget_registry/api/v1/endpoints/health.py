"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; database check for readiness.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from gadget_registry.config import get_settings
from gadget_registry.db.session import Database, get_database

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(database: Database = Depends(get_database)):
    """Readiness: can the storage map be reached?"""
    if not await database.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ready"}
