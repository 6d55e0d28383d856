"""
Coach insight service.

Plain create / read / replace / delete over coaching notes.
"""

import logging
import uuid

from sqlmodel import Session

from app.core.clock import utcnow
from app.core.exceptions import NotFoundError
from app.db.repositories.coach_insight import CoachInsightRepository
from app.models.coach_insight import CoachInsight
from app.schemas.coach_insight import CoachInsightCreate, CoachInsightResponse, CoachInsightUpdate

logger = logging.getLogger(__name__)


class CoachInsightService:
    """Service for coach insight business logic."""

    def __init__(self, session: Session):
        self.repository = CoachInsightRepository(session)

    def create(self, data: CoachInsightCreate) -> CoachInsightResponse:
        entry = CoachInsight(content=data.content, pinned=data.pinned)
        entry = self.repository.create(entry)
        logger.info("Created insight %s", entry.id)
        return CoachInsightResponse.model_validate(entry)

    def get_by_id(self, entry_id: uuid.UUID) -> CoachInsightResponse:
        return CoachInsightResponse.model_validate(self._get_entry(entry_id))

    def get_all(self) -> list[CoachInsightResponse]:
        return [CoachInsightResponse.model_validate(e) for e in self.repository.get_all()]

    def update(self, entry_id: uuid.UUID, data: CoachInsightUpdate) -> CoachInsightResponse:
        entry = self._get_entry(entry_id)
        entry.content = data.content
        entry.pinned = data.pinned
        entry.updated_at = utcnow()
        entry = self.repository.update(entry)
        logger.info("Updated insight %s", entry.id)
        return CoachInsightResponse.model_validate(entry)

    def delete(self, entry_id: uuid.UUID) -> None:
        if not self.repository.delete(entry_id):
            raise NotFoundError("Insight", entry_id)
        logger.info("Deleted insight %s", entry_id)

    def _get_entry(self, entry_id: uuid.UUID) -> CoachInsight:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Insight", entry_id)
        return entry
