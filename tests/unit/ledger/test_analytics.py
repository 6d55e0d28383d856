"""Tests for the analytics folding helpers.

These are *pure unit tests*: the helpers receive plain dates and
session-like objects, no database is involved.
"""

import datetime
from types import SimpleNamespace

import pytest

from app.ledger.analytics import (
    DEFAULT_CONFIG,
    PERFORMANCE_SCALE,
    PRODUCTIVITY_SCALE,
    AnalyticsConfig,
    days_since_last_rest_day,
    week_start,
    week_starts,
    weekly_session_counts,
    weekly_trend,
)

TODAY = datetime.date(2026, 1, 28)  # Wednesday
WEEK_START = datetime.date(2026, 1, 26)


def _days_ago(n: int) -> datetime.date:
    return TODAY - datetime.timedelta(days=n)


def _session(date: datetime.date, performance: str = "normal", productivity: str = "normal"):
    return SimpleNamespace(date=date, performance=performance, productivity=productivity)


# ======================================================================
# AnalyticsConfig
# ======================================================================


class TestAnalyticsConfig:
    def test_default_values(self):
        assert DEFAULT_CONFIG.trend_weeks == 8
        assert DEFAULT_CONFIG.hard_window_days == 7
        assert DEFAULT_CONFIG.pain_window_days == 30
        assert DEFAULT_CONFIG.streak_lookback_days == 365
        assert DEFAULT_CONFIG.hard_intensity == "hard"

    def test_override(self):
        cfg = AnalyticsConfig(trend_weeks=4)
        assert cfg.trend_weeks == 4
        assert cfg.pain_window_days == 30


# ======================================================================
# Week arithmetic
# ======================================================================


class TestWeekStart:
    @pytest.mark.parametrize(
        "day, expected",
        [
            (datetime.date(2026, 1, 26), datetime.date(2026, 1, 26)),  # Monday
            (datetime.date(2026, 1, 28), datetime.date(2026, 1, 26)),  # Wednesday
            (datetime.date(2026, 2, 1), datetime.date(2026, 1, 26)),   # Sunday
            (datetime.date(2026, 1, 1), datetime.date(2025, 12, 29)),  # across a year
        ],
    )
    def test_monday_on_or_before(self, day, expected):
        assert week_start(day) == expected

    def test_eight_weeks_oldest_first(self):
        starts = week_starts(TODAY, 8)
        assert len(starts) == 8
        assert starts[-1] == WEEK_START
        assert starts[0] == datetime.date(2025, 12, 8)
        assert all(b - a == datetime.timedelta(weeks=1) for a, b in zip(starts, starts[1:]))

    def test_every_weekday_anchors_to_monday(self):
        for offset in range(7):
            day = WEEK_START + datetime.timedelta(days=offset)
            assert week_starts(day, 8)[-1] == WEEK_START


# ======================================================================
# Rest-day streak
# ======================================================================


class TestDaysSinceLastRestDay:
    def test_zero_when_today_has_no_session(self):
        assert days_since_last_rest_day([_days_ago(1), _days_ago(2)], TODAY) == 0

    def test_zero_with_no_sessions(self):
        assert days_since_last_rest_day([], TODAY) == 0

    def test_counts_consecutive_days(self):
        dates = [TODAY, _days_ago(1), _days_ago(2), _days_ago(4)]
        assert days_since_last_rest_day(dates, TODAY) == 3

    def test_single_day(self):
        assert days_since_last_rest_day([TODAY], TODAY) == 1

    def test_duplicate_dates_do_not_extend_streak(self):
        assert days_since_last_rest_day([TODAY, TODAY, _days_ago(1)], TODAY) == 2

    def test_streak_capped_at_lookback(self):
        dates = [_days_ago(n) for n in range(400)]
        assert days_since_last_rest_day(dates, TODAY, 365) == 365

    def test_custom_lookback(self):
        dates = [_days_ago(n) for n in range(10)]
        assert days_since_last_rest_day(dates, TODAY, 5) == 5


# ======================================================================
# Weekly session counts
# ======================================================================


class TestWeeklySessionCounts:
    def test_counts_distinct_dates_per_week(self):
        dates = [
            datetime.date(2026, 1, 26),
            datetime.date(2026, 1, 27),
            datetime.date(2026, 1, 23),  # previous week (Friday)
        ]
        counts = weekly_session_counts(dates, week_starts(TODAY, 8))
        assert counts[7].week_start == WEEK_START
        assert counts[7].count == 2
        assert counts[6].count == 1
        assert counts[5].count == 0

    def test_same_day_counts_once(self):
        dates = [WEEK_START, WEEK_START, WEEK_START]
        counts = weekly_session_counts(dates, week_starts(TODAY, 8))
        assert counts[7].count == 1

    def test_sunday_belongs_to_its_monday(self):
        sunday = datetime.date(2026, 1, 25)
        counts = weekly_session_counts([sunday], week_starts(TODAY, 8))
        assert counts[6].count == 1
        assert counts[7].count == 0

    def test_empty_log(self):
        counts = weekly_session_counts([], week_starts(TODAY, 8))
        assert [c.count for c in counts] == [0] * 8


# ======================================================================
# Weekly trends
# ======================================================================


class TestWeeklyTrend:
    def _performance(self, sessions):
        return weekly_trend(sessions, week_starts(TODAY, 8), lambda s: s.performance, PERFORMANCE_SCALE)

    def _productivity(self, sessions):
        return weekly_trend(sessions, week_starts(TODAY, 8), lambda s: s.productivity, PRODUCTIVITY_SCALE)

    def test_eight_entries_on_week_boundaries(self):
        trend = self._performance([])
        assert len(trend) == 8
        assert trend[7].week_start == WEEK_START
        assert trend[0].week_start == WEEK_START - datetime.timedelta(weeks=7)

    def test_empty_weeks_have_no_average(self):
        for entry in self._performance([]):
            assert entry.average is None

    def test_performance_averages(self):
        sessions = [
            _session(WEEK_START, performance="weak"),
            _session(TODAY, performance="strong"),
            _session(datetime.date(2026, 1, 20), performance="normal"),
        ]
        trend = self._performance(sessions)
        assert trend[7].average == pytest.approx(2.0)  # (1 + 3) / 2
        assert trend[6].average == pytest.approx(2.0)
        assert trend[5].average is None

    def test_productivity_averages(self):
        sessions = [
            _session(WEEK_START, productivity="low"),
            _session(TODAY, productivity="high"),
            _session(datetime.date(2026, 1, 20), productivity="high"),
        ]
        trend = self._productivity(sessions)
        assert trend[7].average == pytest.approx(2.0)
        assert trend[6].average == pytest.approx(3.0)

    def test_all_scale_values(self):
        sessions = [_session(TODAY, performance=p) for p in ("weak", "normal", "strong")]
        assert self._performance(sessions)[7].average == pytest.approx(2.0)

    def test_unknown_values_count_as_midpoint(self):
        sessions = [_session(TODAY, performance="legendary"), _session(TODAY, performance="strong")]
        assert self._performance(sessions)[7].average == pytest.approx(2.5)

    def test_sessions_outside_series_ignored(self):
        sessions = [_session(datetime.date(2025, 12, 7), performance="strong")]
        assert all(entry.average is None for entry in self._performance(sessions))
