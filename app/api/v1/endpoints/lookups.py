"""
Lookup endpoints.

Distinct venues and injury locations seen in past sessions, sorted.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.services.lookup_service import LookupService

router = APIRouter()


@router.get("/venues", summary="Distinct venues, sorted.", response_model=list[str], tags=["Venues"])
def list_venues(db: Session = Depends(get_db)):
    return LookupService(db).venues()


@router.get("/injury-locations", summary="Distinct injury locations, sorted.", response_model=list[str],
            tags=["Injury locations"])
def list_injury_locations(db: Session = Depends(get_db)):
    return LookupService(db).injury_locations()
