# app/routers/health.py
"""
System health check endpoint.
Returns status of the API and of the storage backing.
"""

from fastapi import APIRouter, Depends
from datetime import datetime

from app.dependencies import get_storage
from app.services.storage_service import Storage

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(storage: Storage = Depends(get_storage)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "storage": storage.backend.name,
        "database": "unknown",
    }

    try:
        storage.backend.ping()
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
