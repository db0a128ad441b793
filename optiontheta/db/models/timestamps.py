"""Timezone-aware UTC timestamps shared by the position tables."""

from datetime import datetime, timezone

import sqlalchemy as sa


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_column() -> sa.DateTime:
    """``TIMESTAMP WITH TIME ZONE``, set explicitly on every timestamp column."""
    return sa.DateTime(timezone=True)
