"""Coach insight API schemas."""

import datetime
import uuid

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class CoachInsightBase(CamelModel):
    content: str = Field(..., description="Insight text")
    pinned: bool = Field(False, description="Pinned insights are listed first")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Content is required")
        return value


class CoachInsightCreate(CoachInsightBase):
    pass


class CoachInsightUpdate(CoachInsightBase):
    pass


class CoachInsightResponse(CoachInsightBase):
    id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime
