"""Base model and mixins for SQLAlchemy models."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from blogwise.core.ids import generate_content_id


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class IdMixin:
    """Mixin that adds a sortable string primary key."""

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_content_id,
    )


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
