# app/schemas/feedback.py
from pydantic import Field
from datetime import datetime
from typing import Literal, Optional

from app.schemas.base import CamelModel

FeedbackType = Literal["compliment", "suggestion", "complaint", "report"]


class FeedbackCreate(CamelModel):
    passenger_name: str = Field(min_length=1)
    passenger_email: Optional[str] = None
    plate_number: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    feedback_type: FeedbackType
    message: str = Field(min_length=1)


class FeedbackResolve(CamelModel):
    resolved: bool


class FeedbackOut(CamelModel):
    id: int
    passenger_name: str
    passenger_email: Optional[str]
    plate_number: str
    rating: int
    feedback_type: str
    message: str
    created_at: Optional[datetime]
    resolved: bool
