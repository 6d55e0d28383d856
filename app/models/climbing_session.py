"""
Climbing session database models.

A session stores its type tags as JSON and owns an ordered list of
injury rows. Injuries live in their own table so that pain-location
frequencies can be aggregated in SQL, but they are never addressed on
their own: they are created, replaced and deleted through the parent.
"""

import datetime
import uuid
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import utcnow


class ClimbingSession(SQLModel, table=True):
    """A single recorded climbing or training session."""

    __tablename__ = "sessions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Non-empty list of tags from the session type vocabulary
    types: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    intensity: str = Field(nullable=False, max_length=20, index=True)
    performance: str = Field(nullable=False, max_length=20)
    productivity: str = Field(nullable=False, max_length=20)

    duration_minutes: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    max_grade: Optional[str] = Field(default=None, max_length=20)
    hard_attempts: Optional[int] = Field(default=None)
    venue: Optional[str] = Field(default=None, max_length=255, index=True)

    injuries: List["SessionInjury"] = Relationship(
        back_populates="session",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "SessionInjury.position",
            "lazy": "selectin",
        },
    )

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))


class SessionInjury(SQLModel, table=True):
    """A pain or injury location reported for one session."""

    __tablename__ = "session_injuries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    session_id: uuid.UUID = Field(foreign_key="sessions.id", nullable=False, index=True, ondelete="CASCADE")

    # Order of the injury within the session's list
    position: int = Field(default=0, nullable=False)

    location: str = Field(nullable=False, max_length=255, index=True)
    note: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    severity: Optional[int] = Field(default=None)

    session: Optional[ClimbingSession] = Relationship(back_populates="injuries")
