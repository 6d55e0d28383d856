"""Time helpers shared by models and services."""

import datetime


def utcnow() -> datetime.datetime:
    """Timezone-aware UTC timestamp for the ``TIMESTAMP WITH TIME ZONE`` columns."""
    return datetime.datetime.now(datetime.timezone.utc)
