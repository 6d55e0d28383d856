"""Database repositories."""

from app.db.repositories.climbing_session import ClimbingSessionRepository
from app.db.repositories.coach_insight import CoachInsightRepository

__all__ = [
    "ClimbingSessionRepository",
    "CoachInsightRepository",
]
