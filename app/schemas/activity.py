# app/schemas/activity.py
from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class ActivityOut(CamelModel):
    id: int
    type: str
    title: str
    description: Optional[str]
    timestamp: datetime
    user_id: Optional[int] = None
    entity_type: Optional[str]
    entity_id: Optional[int]


class StatsOut(CamelModel):
    drivers_count: int
    vehicles_count: int
    feedbacks_count: int
    issues_count: int
