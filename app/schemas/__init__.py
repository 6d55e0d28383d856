"""Pydantic schemas for request/response validation."""

from app.schemas.analytics import AnalyticsResponse, PainFlagCount, WeeklySessionCount, WeeklyTrend
from app.schemas.climbing_session import (
    ClimbingSessionCreate,
    ClimbingSessionResponse,
    ClimbingSessionUpdate,
    InjuryData,
    InjuryResponse,
)
from app.schemas.coach_insight import CoachInsightCreate, CoachInsightResponse, CoachInsightUpdate

__all__ = [
    "AnalyticsResponse",
    "PainFlagCount",
    "WeeklySessionCount",
    "WeeklyTrend",
    "ClimbingSessionCreate",
    "ClimbingSessionResponse",
    "ClimbingSessionUpdate",
    "InjuryData",
    "InjuryResponse",
    "CoachInsightCreate",
    "CoachInsightResponse",
    "CoachInsightUpdate",
]
