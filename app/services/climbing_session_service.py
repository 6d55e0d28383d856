"""
Climbing session service.

Checks the payload against the session vocabularies before anything is
written, maps schemas onto the database model (injuries are replaced as
a whole on update) and turns missing rows into :class:`NotFoundError`.
"""

import datetime
import logging
import uuid
from typing import Optional

from sqlmodel import Session

from app.core.clock import utcnow
from app.core.exceptions import InvalidInputError, NotFoundError
from app.db.repositories.climbing_session import ClimbingSessionRepository
from app.ledger.validation import validate_session
from app.models.climbing_session import ClimbingSession, SessionInjury
from app.schemas.climbing_session import (ClimbingSessionBase, ClimbingSessionCreate, ClimbingSessionResponse,
                                          ClimbingSessionUpdate, )

logger = logging.getLogger(__name__)


class ClimbingSessionService:
    """Service for climbing session business logic."""

    def __init__(self, session: Session):
        self.repository = ClimbingSessionRepository(session)

    def create(self, data: ClimbingSessionCreate) -> ClimbingSessionResponse:
        self._validate(data)
        entry = ClimbingSession()
        self._apply(data, entry)
        entry = self.repository.create(entry)
        logger.info("Created session %s on %s", entry.id, entry.date)
        return self._to_response(entry)

    def get_by_id(self, entry_id: uuid.UUID) -> ClimbingSessionResponse:
        return self._to_response(self._get_entry(entry_id))

    def get_all(self, start: Optional[datetime.date] = None,
                end: Optional[datetime.date] = None, ) -> list[ClimbingSessionResponse]:
        """All sessions, most recent first; optionally restricted to ``[start, end]``."""
        if start or end:
            entries = self.repository.get_by_date_range(start or datetime.date.min, end or datetime.date.max)
        else:
            entries = self.repository.get_all()
        return [self._to_response(e) for e in entries]

    def update(self, entry_id: uuid.UUID, data: ClimbingSessionUpdate) -> ClimbingSessionResponse:
        self._validate(data)
        entry = self._get_entry(entry_id)
        self._apply(data, entry)
        entry.updated_at = utcnow()
        entry = self.repository.update(entry)
        logger.info("Updated session %s", entry.id)
        return self._to_response(entry)

    def delete(self, entry_id: uuid.UUID) -> None:
        if not self.repository.delete(entry_id):
            raise NotFoundError("Session", entry_id)
        logger.info("Deleted session %s", entry_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, entry_id: uuid.UUID) -> ClimbingSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Session", entry_id)
        return entry

    @staticmethod
    def _validate(data: ClimbingSessionBase) -> None:
        violations = validate_session(data)
        if violations:
            raise InvalidInputError(violations)

    @staticmethod
    def _apply(data: ClimbingSessionBase, entry: ClimbingSession) -> None:
        """Copy every mutable field from the payload onto the entry."""
        entry.date = data.date
        entry.types = sorted(set(data.types))
        entry.intensity = data.intensity
        entry.performance = data.performance
        entry.productivity = data.productivity
        entry.duration_minutes = data.duration_minutes
        entry.notes = data.notes
        entry.max_grade = data.max_grade
        entry.hard_attempts = data.hard_attempts
        entry.venue = data.venue

        # Owned collection: replace wholesale, orphans are deleted
        entry.injuries = [SessionInjury(position=i, location=injury.location, note=injury.note,
                                        severity=injury.severity, ) for i, injury in enumerate(data.injuries)]

    @staticmethod
    def _to_response(entry: ClimbingSession) -> ClimbingSessionResponse:
        return ClimbingSessionResponse.model_validate(entry)
