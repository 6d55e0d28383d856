"""cledger core: session vocabulary rules and training analytics."""

from app.ledger.analytics import AnalyticsConfig, compute_analytics
from app.ledger.validation import FieldViolation, validate_session

__all__ = ["AnalyticsConfig", "compute_analytics", "FieldViolation", "validate_session"]
