"""
Climbing session API schemas.

Structural checks (required fields, non-empty ``types``, numeric ranges)
live here. Vocabulary checks run in the service layer through
:func:`app.ledger.validation.validate_session`.
"""

import datetime
import uuid
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class InjuryData(CamelModel):
    """A pain / injury location reported for a session."""

    location: str = Field(..., max_length=255, description="Body location, e.g. 'finger' or 'left elbow'")
    note: Optional[str] = Field(None, description="Optional free-text note")
    severity: Optional[int] = Field(
        None, ge=1, le=5,
        description="1 Tweak, 2 Minor, 3 Moderate, 4 Limiting, 5 Severe",
    )


class InjuryResponse(InjuryData):
    id: uuid.UUID


# Shared properties
class ClimbingSessionBase(CamelModel):
    """Fields supplied by the client on create and update."""

    date: datetime.date = Field(..., description="Calendar date of the session (YYYY-MM-DD)")
    types: list[str] = Field(..., min_length=1, description="Session type tags, at least one")
    intensity: str = Field(..., min_length=1, description="easy, moderate or hard")
    performance: str = Field(..., min_length=1, description="weak, normal or strong")
    productivity: str = Field(..., min_length=1, description="low, normal or high")
    duration_minutes: Optional[int] = Field(None, ge=0, le=1440)
    notes: Optional[str] = None
    max_grade: Optional[str] = Field(None, max_length=20, description="Hardest grade climbed, e.g. '7A'")
    hard_attempts: Optional[int] = Field(None, ge=0)
    venue: Optional[str] = Field(None, max_length=255)
    injuries: list[InjuryData] = Field(default_factory=list)


# Request schemas
class ClimbingSessionCreate(ClimbingSessionBase):
    """Schema for recording a session."""
    pass


class ClimbingSessionUpdate(ClimbingSessionBase):
    """Schema for updating a session. Every mutable field is replaced."""
    pass


# Response schemas
class ClimbingSessionResponse(ClimbingSessionBase):
    """Schema for a session in API responses."""

    id: uuid.UUID
    injuries: list[InjuryResponse] = Field(default_factory=list)
    created_at: datetime.datetime
    updated_at: datetime.datetime
