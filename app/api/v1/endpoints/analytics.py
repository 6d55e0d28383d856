"""
Analytics endpoint: weekly counts, streaks, pain flags and trends.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.ledger.analytics import compute_analytics
from app.schemas.analytics import AnalyticsResponse

router = APIRouter()


@router.get(
    "",
    summary="Get the training analytics bundle.",
    response_model=AnalyticsResponse,
)
def get_analytics(
    today: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    db: Session = Depends(get_db),
):
    return compute_analytics(db, today or datetime.date.today())
