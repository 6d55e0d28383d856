"""
Coach insight database model.

Free-text coaching notes; pinned insights are listed first.
"""

import datetime
import uuid

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel

from app.core.clock import utcnow


class CoachInsight(SQLModel, table=True):
    """A free-text coaching insight."""

    __tablename__ = "coach_insights"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    pinned: bool = Field(default=False, nullable=False, index=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
