"""
Training analytics over the session log.

Every metric is recomputed from the stored sessions on each request.
:func:`compute_analytics` issues a handful of independent range queries
and folds the results in memory; the folding helpers below take plain
values and do no I/O, so they can be tested without a database.

Conventions
-----------

1. **Inclusive windows** on both ends: "last 7 days" is ``[today-6, today]``.
2. **Weeks start on Monday**, regardless of locale.
3. **Weekly session counts count days, not rows**: two sessions on the
   same date add 1.
4. **Trend scale**: ``weak/low = 1``, ``normal = 2``, ``strong/high = 3``.
   Unknown stored values count as 2 so malformed history never breaks
   the bundle. A week without sessions has no average (``None``), not 0.
5. **Streak lookback is bounded**: a streak longer than the lookback
   window is reported as the window length.

The queries are not wrapped in one transaction; concurrent writes may
land between them.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, Field
from sqlmodel import Session

from app.db.repositories.climbing_session import ClimbingSessionRepository
from app.models.climbing_session import ClimbingSession
from app.schemas.analytics import (AnalyticsResponse, PainFlagCount, WeeklySessionCount, WeeklyTrend, )

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================


class AnalyticsConfig(BaseModel):
    """Window sizes for the analytics bundle."""

    trend_weeks: int = Field(8, ge=1, le=52)
    hard_window_days: int = Field(7, ge=1)
    pain_window_days: int = Field(30, ge=1)
    streak_lookback_days: int = Field(365, ge=1)
    hard_intensity: str = "hard"


DEFAULT_CONFIG = AnalyticsConfig()

PERFORMANCE_SCALE: dict[str, int] = {"weak": 1, "normal": 2, "strong": 3}
PRODUCTIVITY_SCALE: dict[str, int] = {"low": 1, "normal": 2, "high": 3}

# Value used for anything missing from a scale
_SCALE_MIDPOINT = 2

# ======================================================================
# Week arithmetic
# ======================================================================


def week_start(day: datetime.date) -> datetime.date:
    """Monday on or before ``day``."""
    return day - datetime.timedelta(days=day.weekday())


def week_starts(today: datetime.date, weeks: int) -> list[datetime.date]:
    """Monday of each of the last ``weeks`` weeks, oldest first, ending with today's week."""
    current = week_start(today)
    return [current - datetime.timedelta(weeks=i) for i in range(weeks - 1, -1, -1)]


def _in_week(day: datetime.date, monday: datetime.date) -> bool:
    return monday <= day <= monday + datetime.timedelta(days=6)


# ======================================================================
# Folding helpers (pure)
# ======================================================================


def days_since_last_rest_day(session_dates: Iterable[datetime.date], today: datetime.date,
                              lookback_days: int = 365, ) -> int:
    """Length of the unbroken run of session days ending at ``today``.

    Walks back from ``today`` one day at a time and stops at the first day
    without a session. The walk never goes past ``lookback_days`` days, so
    longer streaks are reported as ``lookback_days``.
    """
    dates = set(session_dates)
    lookback_start = today - datetime.timedelta(days=lookback_days)

    days = 0
    check_date = today
    while check_date > lookback_start:
        if check_date not in dates:
            return days
        days += 1
        check_date -= datetime.timedelta(days=1)
    return days


def weekly_session_counts(session_dates: Iterable[datetime.date],
                           starts: list[datetime.date], ) -> list[WeeklySessionCount]:
    """Distinct session dates per week."""
    dates = set(session_dates)
    return [WeeklySessionCount(week_start=ws, count=sum(1 for d in dates if _in_week(d, ws)))
            for ws in starts]


def _scale_value(value: Optional[str], scale: dict[str, int]) -> int:
    return scale.get(value or "", _SCALE_MIDPOINT)


def weekly_trend(sessions: Iterable[ClimbingSession], starts: list[datetime.date],
                  value_of: Callable[[ClimbingSession], Optional[str]],
                  scale: dict[str, int], ) -> list[WeeklyTrend]:
    """Average scale value of ``value_of(session)`` per week."""
    sessions = list(sessions)
    trends: list[WeeklyTrend] = []
    for ws in starts:
        values = [_scale_value(value_of(s), scale) for s in sessions if _in_week(s.date, ws)]
        average = sum(values) / len(values) if values else None
        trends.append(WeeklyTrend(week_start=ws, average=average))
    return trends


# ======================================================================
# Main entry point
# ======================================================================


def compute_analytics(session: Session, today: Optional[datetime.date] = None,
                      config: Optional[AnalyticsConfig] = None, ) -> AnalyticsResponse:
    """Compute the analytics bundle as of ``today``.

    Args:
        session: Database session.
        today: Reference date (defaults to the current date).
        config: Optional :class:`AnalyticsConfig` override (uses
            ``DEFAULT_CONFIG`` if ``None``).

    Returns:
        :class:`AnalyticsResponse` with counts, streak, pain flags and
        weekly series.
    """
    cfg = config or DEFAULT_CONFIG
    today = today or datetime.date.today()
    repo = ClimbingSessionRepository(session)
    logger.debug("Computing analytics as of %s", today)

    # --- This week ---
    this_monday = week_start(today)
    this_sunday = this_monday + datetime.timedelta(days=6)
    sessions_this_week = repo.count_by_date_range(this_monday, this_sunday)

    # --- Hard sessions ---
    hard_start = today - datetime.timedelta(days=cfg.hard_window_days - 1)
    hard_sessions = repo.count_by_intensity_and_date_range(cfg.hard_intensity, hard_start, today)

    # --- Rest-day streak ---
    lookback_start = today - datetime.timedelta(days=cfg.streak_lookback_days)
    streak_dates = repo.distinct_dates_by_date_range(lookback_start, today)
    days_since_rest = days_since_last_rest_day(streak_dates, today, cfg.streak_lookback_days)

    # --- Pain flags ---
    pain_start = today - datetime.timedelta(days=cfg.pain_window_days - 1)
    pain_flags = [PainFlagCount(location=location, count=count)
                  for location, count in repo.count_injury_locations_by_date_range(pain_start, today)]

    # --- Weekly series ---
    series_starts = week_starts(today, cfg.trend_weeks)
    series_end = series_starts[-1] + datetime.timedelta(days=6)
    weekly_dates = repo.distinct_dates_by_date_range(series_starts[0], series_end)
    weekly_counts = weekly_session_counts(weekly_dates, series_starts)

    trend_sessions = repo.get_by_date_range(series_starts[0], series_end)
    performance_trend = weekly_trend(trend_sessions, series_starts, lambda s: s.performance, PERFORMANCE_SCALE)
    productivity_trend = weekly_trend(trend_sessions, series_starts, lambda s: s.productivity, PRODUCTIVITY_SCALE)

    return AnalyticsResponse(sessions_this_week=sessions_this_week, hard_sessions_last_7_days=hard_sessions,
                             days_since_last_rest_day=days_since_rest, pain_flags_last_30_days=pain_flags,
                             weekly_session_counts=weekly_counts, performance_trend=performance_trend,
                             productivity_trend=productivity_trend, )
