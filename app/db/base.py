"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.climbing_session import ClimbingSession, SessionInjury  # noqa: F401
from app.models.coach_insight import CoachInsight  # noqa: F401
