"""
Analytics bundle schemas.

Every field is derived from the stored sessions on each request;
nothing here is persisted.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class PainFlagCount(CamelModel):
    """Number of distinct sessions reporting a pain location."""

    location: str
    count: int


class WeeklySessionCount(CamelModel):
    """Distinct training days within one Monday-based week."""

    week_start: datetime.date
    count: int


class WeeklyTrend(CamelModel):
    """Mean of a 1..3 scale across a week's sessions (``None`` if no sessions)."""

    week_start: datetime.date
    average: Optional[float] = None


class AnalyticsResponse(CamelModel):
    """Complete analytics bundle returned by ``GET /analytics``."""

    sessions_this_week: int = Field(..., description="Sessions in the Monday..Sunday week containing today")
    hard_sessions_last_7_days: int = Field(..., alias="hardSessionsLast7Days",
                                           description="Hard sessions in [today-6, today]")
    days_since_last_rest_day: int = Field(..., description="Consecutive training days ending today")
    pain_flags_last_30_days: list[PainFlagCount] = Field(..., alias="painFlagsLast30Days")
    weekly_session_counts: list[WeeklySessionCount]
    performance_trend: list[WeeklyTrend]
    productivity_trend: list[WeeklyTrend]
