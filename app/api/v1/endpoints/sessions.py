"""
Climbing session endpoints.

CRUD for recorded sessions.
"""

import datetime
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.climbing_session import (ClimbingSessionCreate, ClimbingSessionResponse, ClimbingSessionUpdate, )
from app.services.climbing_session_service import ClimbingSessionService

router = APIRouter()


@router.get("", summary="List sessions, most recent first.", response_model=list[ClimbingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), ):
    service = ClimbingSessionService(db)
    return service.get_all(start, end)


@router.get("/{session_id}", summary="Get a session.", response_model=ClimbingSessionResponse, )
def get_session(session_id: uuid.UUID, db: Session = Depends(get_db), ):
    service = ClimbingSessionService(db)
    return service.get_by_id(session_id)


@router.post("", summary="Record a session.", response_model=ClimbingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: ClimbingSessionCreate, db: Session = Depends(get_db), ):
    service = ClimbingSessionService(db)
    return service.create(data)


@router.put("/{session_id}", summary="Replace a session.", response_model=ClimbingSessionResponse, )
def update_session(session_id: uuid.UUID, data: ClimbingSessionUpdate, db: Session = Depends(get_db), ):
    service = ClimbingSessionService(db)
    return service.update(session_id, data)


@router.delete("/{session_id}", summary="Delete a session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: uuid.UUID, db: Session = Depends(get_db), ):
    service = ClimbingSessionService(db)
    service.delete(session_id)
