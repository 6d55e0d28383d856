"""
Coach insight repository.

Handles database operations for :class:`CoachInsight`.
"""

import uuid
from typing import Optional

from sqlmodel import Session, select

from app.models.coach_insight import CoachInsight


class CoachInsightRepository:
    """Repository for CoachInsight database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: CoachInsight) -> CoachInsight:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: uuid.UUID) -> Optional[CoachInsight]:
        return self.session.get(CoachInsight, entry_id)

    def get_all(self) -> list[CoachInsight]:
        """Pinned insights first, then most recently updated."""
        statement = select(CoachInsight).order_by(CoachInsight.pinned.desc(), CoachInsight.updated_at.desc())
        return list(self.session.exec(statement).all())

    def update(self, entry: CoachInsight) -> CoachInsight:
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
