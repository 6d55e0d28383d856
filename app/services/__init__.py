"""Business logic services."""

from app.services.climbing_session_service import ClimbingSessionService
from app.services.coach_insight_service import CoachInsightService
from app.services.lookup_service import LookupService

__all__ = [
    "ClimbingSessionService",
    "CoachInsightService",
    "LookupService",
]
