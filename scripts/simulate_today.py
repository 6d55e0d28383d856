"""What does the analytics dashboard show for a sample training block?

Loads a few weeks of sessions into an in-memory SQLite database and
prints the analytics bundle as of ``TODAY``.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.ledger.analytics import compute_analytics
from app.schemas.climbing_session import ClimbingSessionCreate, InjuryData
from app.services.climbing_session_service import ClimbingSessionService

TODAY = datetime.date(2026, 1, 28)

# (days before TODAY, types, intensity, performance, productivity, injuries)
SAMPLE_LOG = [
    (0, ["boulder"], "hard", "strong", "high", []),
    (1, ["hangboard", "prehab"], "moderate", "normal", "normal", [("finger", "A2 felt tight")]),
    (2, ["board"], "hard", "weak", "low", [("finger", None), ("elbow", None)]),
    (4, ["routes"], "easy", "normal", "normal", []),
    (5, ["strength"], "moderate", "normal", "high", []),
    (9, ["boulder"], "hard", "strong", "normal", [("shoulder", "left, after dynos")]),
    (12, ["routes"], "moderate", "normal", "normal", []),
    (16, ["board"], "hard", "weak", "low", [("finger", None)]),
    (23, ["boulder", "strength"], "moderate", "normal", "high", []),
    (30, ["routes"], "easy", "strong", "normal", []),
]


def main() -> None:
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)

    with Session(engine) as db:
        service = ClimbingSessionService(db)
        for days_ago, types, intensity, performance, productivity, injuries in SAMPLE_LOG:
            service.create(ClimbingSessionCreate(
                date=TODAY - datetime.timedelta(days=days_ago),
                types=types,
                intensity=intensity,
                performance=performance,
                productivity=productivity,
                venue="Home Wall" if "board" in types else "Bloc Gym",
                injuries=[InjuryData(location=loc, note=note) for loc, note in injuries],
            ))

        bundle = compute_analytics(db, TODAY)

    print("=" * 60)
    print(f"cledger analytics as of {TODAY.isoformat()} ({TODAY.strftime('%A')})")
    print("=" * 60)
    print(json.dumps(bundle.model_dump(mode="json", by_alias=True), indent=2))


if __name__ == "__main__":
    main()
