"""SQLModel database models."""

from app.models.climbing_session import ClimbingSession, SessionInjury
from app.models.coach_insight import CoachInsight

__all__ = [
    "ClimbingSession",
    "SessionInjury",
    "CoachInsight",
]
