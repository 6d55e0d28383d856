"""
Climbing session repository.

Handles database operations for :class:`ClimbingSession`.
Includes the range and aggregate queries used by the analytics engine
and the venue / injury-location lookups.
"""

import datetime
import uuid
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.climbing_session import ClimbingSession, SessionInjury


class ClimbingSessionRepository:
    """Repository for ClimbingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: ClimbingSession) -> ClimbingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: uuid.UUID) -> Optional[ClimbingSession]:
        return self.session.get(ClimbingSession, entry_id)

    def get_all(self) -> list[ClimbingSession]:
        """All sessions, most recent date first."""
        statement = select(ClimbingSession).order_by(ClimbingSession.date.desc(), ClimbingSession.created_at.desc())
        return list(self.session.exec(statement).all())

    def get_by_date_range(self, start: datetime.date, end: datetime.date, ) -> list[ClimbingSession]:
        """Sessions dated within ``[start, end]``, most recent first."""
        statement = (select(ClimbingSession).where(ClimbingSession.date >= start, ClimbingSession.date <= end, )
                     .order_by(ClimbingSession.date.desc(), ClimbingSession.created_at.desc()))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Aggregation queries for analytics
    # ------------------------------------------------------------------

    def count_by_date_range(self, start: datetime.date, end: datetime.date, ) -> int:
        statement = (select(func.count()).select_from(ClimbingSession).where(ClimbingSession.date >= start,
                                                                             ClimbingSession.date <= end, ))
        return self.session.exec(statement).first() or 0

    def count_by_intensity_and_date_range(self, intensity: str, start: datetime.date, end: datetime.date, ) -> int:
        statement = (select(func.count()).select_from(ClimbingSession).where(ClimbingSession.intensity == intensity,
                                                                             ClimbingSession.date >= start,
                                                                             ClimbingSession.date <= end, ))
        return self.session.exec(statement).first() or 0

    def distinct_dates_by_date_range(self, start: datetime.date, end: datetime.date, ) -> list[datetime.date]:
        """Dates with at least one session in ``[start, end]``, descending."""
        statement = (select(ClimbingSession.date).where(ClimbingSession.date >= start, ClimbingSession.date <= end, )
                     .distinct().order_by(ClimbingSession.date.desc()))
        return list(self.session.exec(statement).all())

    def count_injury_locations_by_date_range(self, start: datetime.date, end: datetime.date, ) -> list[tuple[str, int]]:
        """Number of distinct sessions reporting each injury location.

        A session listing the same location twice is counted once.
        Rows are ordered by location.
        """
        statement = (select(SessionInjury.location, func.count(SessionInjury.session_id.distinct()))
                     .join(ClimbingSession, SessionInjury.session_id == ClimbingSession.id)
                     .where(ClimbingSession.date >= start, ClimbingSession.date <= end, )
                     .group_by(SessionInjury.location).order_by(SessionInjury.location))
        return [(location, int(count)) for location, count in self.session.exec(statement).all()]

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def distinct_venues(self) -> list[str]:
        statement = (select(ClimbingSession.venue).where(ClimbingSession.venue.is_not(None)).distinct()
                     .order_by(ClimbingSession.venue))
        return list(self.session.exec(statement).all())

    def distinct_injury_locations(self) -> list[str]:
        statement = select(SessionInjury.location).distinct().order_by(SessionInjury.location)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: ClimbingSession) -> ClimbingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: uuid.UUID) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
