"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Any, Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.sqlalchemy_database_uri


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 5,         # Connection pool size
        "max_overflow": 10,     # Max connections beyond pool_size
    }


engine = create_engine(DATABASE_URL, echo=settings.SQL_ECHO, **_engine_options(DATABASE_URL))


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @router.get("/sessions")
        def list_sessions(db: Session = Depends(get_db)):
            return ClimbingSessionService(db).get_all()
    """
    with Session(engine) as session:
        yield session
