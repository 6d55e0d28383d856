"""Distinct-value lookups used to populate form suggestions."""

from sqlmodel import Session

from app.db.repositories.climbing_session import ClimbingSessionRepository


class LookupService:
    """Venue and injury-location suggestions drawn from past sessions."""

    def __init__(self, session: Session):
        self.repository = ClimbingSessionRepository(session)

    def venues(self) -> list[str]:
        return self.repository.distinct_venues()

    def injury_locations(self) -> list[str]:
        return self.repository.distinct_injury_locations()
