# app/routers/feedbacks.py
"""
Passenger feedback.
POST is public (passengers); listing and resolving are admin only.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from app.dependencies import get_storage, require_admin
from app.schemas.feedback import FeedbackCreate, FeedbackOut, FeedbackResolve
from app.services import integrity
from app.services.storage_service import Storage

router = APIRouter()


@router.get("/feedbacks", response_model=list[FeedbackOut], dependencies=[Depends(require_admin)],
            summary="List feedback, optionally for one plate")
def list_feedbacks(
    plate_number: Optional[str] = Query(None, alias="plateNumber"),
    storage: Storage = Depends(get_storage),
):
    if plate_number:
        return storage.get_feedbacks_by_plate_number(plate_number)
    return storage.get_all_feedbacks()


@router.post("/feedbacks", response_model=FeedbackOut, status_code=201, summary="Submit ride feedback")
def submit_feedback(body: FeedbackCreate, storage: Storage = Depends(get_storage)):
    """Only plates registered with the park accept feedback."""
    integrity.ensure_plate_registered(storage, body.plate_number)

    feedback = storage.create_feedback(body.model_dump())
    storage.log_activity({
        "type": "feedback_created",
        "title": "New Feedback Submitted",
        "description": f"Feedback submitted for vehicle {feedback.plate_number} by {feedback.passenger_name}",
        "entity_type": "feedback",
        "entity_id": feedback.id,
    })
    return feedback


@router.put("/feedbacks/{feedback_id}/resolve", response_model=FeedbackOut, dependencies=[Depends(require_admin)],
            summary="Mark feedback resolved or unresolved")
def resolve_feedback(feedback_id: int, body: FeedbackResolve, storage: Storage = Depends(get_storage)):
    feedback = storage.resolve_feedback(feedback_id, body.resolved)
    if feedback is None:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return feedback
