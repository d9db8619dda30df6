"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class CreatedAtMixin:
    """Mixin to add a created_at timestamp column.

    The value is set on the Python side so rows inserted within the same
    second still order by insertion.
    """

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
