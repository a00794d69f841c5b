# app/routers/dashboard.py
"""Admin dashboard: aggregate counts and the recent activity feed."""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.dependencies import get_storage, require_admin
from app.schemas.activity import ActivityOut, StatsOut
from app.services.storage_service import Storage

router = APIRouter(dependencies=[Depends(require_admin)])

DEFAULT_ACTIVITY_LIMIT = 10


def _parse_limit(raw: Optional[str]) -> int:
    """Positive integer from the query string; anything else means the default."""
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_ACTIVITY_LIMIT
    return limit if limit > 0 else DEFAULT_ACTIVITY_LIMIT


@router.get("/stats", response_model=StatsOut, summary="Dashboard counters")
def get_stats(storage: Storage = Depends(get_storage)):
    return storage.count_stats()


@router.get("/activities", response_model=list[ActivityOut], summary="Recent activity feed")
def get_activities(limit: Optional[str] = Query(None), storage: Storage = Depends(get_storage)):
    return storage.get_recent_activities(_parse_limit(limit))
