"""
Coach insight endpoints.

CRUD for coaching notes. Listing returns pinned insights first.
"""

import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.coach_insight import CoachInsightCreate, CoachInsightResponse, CoachInsightUpdate
from app.services.coach_insight_service import CoachInsightService

router = APIRouter()


@router.get("", summary="List insights (pinned first, then most recently updated).",
            response_model=list[CoachInsightResponse], )
def list_insights(db: Session = Depends(get_db)):
    return CoachInsightService(db).get_all()


@router.get("/{insight_id}", summary="Get an insight.", response_model=CoachInsightResponse, )
def get_insight(insight_id: uuid.UUID, db: Session = Depends(get_db)):
    return CoachInsightService(db).get_by_id(insight_id)


@router.post("", summary="Create an insight.", response_model=CoachInsightResponse,
             status_code=status.HTTP_201_CREATED, )
def create_insight(data: CoachInsightCreate, db: Session = Depends(get_db)):
    return CoachInsightService(db).create(data)


@router.put("/{insight_id}", summary="Replace an insight.", response_model=CoachInsightResponse, )
def update_insight(insight_id: uuid.UUID, data: CoachInsightUpdate, db: Session = Depends(get_db)):
    return CoachInsightService(db).update(insight_id, data)


@router.delete("/{insight_id}", summary="Delete an insight.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_insight(insight_id: uuid.UUID, db: Session = Depends(get_db)):
    CoachInsightService(db).delete(insight_id)
