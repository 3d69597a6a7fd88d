"""SQLAlchemy declarative base for keyforge_auth models.

The consuming application creates the tables from ``AuthBase.metadata``,
either on startup or through its migration tooling.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from keyforge_auth.shared.time import utc_now


class AuthBase(DeclarativeBase):
    """Declarative base for keyforge_auth models."""


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
