"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, insights, lookups, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Sessions"]
)
api_router.include_router(
    insights.router, prefix="/insights", tags=["Coach insights"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(lookups.router)
