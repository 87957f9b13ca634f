"""Base model and mixins for database entities.

- BaseModel: id (UUID primary key) and created_at
- TimestampMixin: adds updated_at
- BaseMutableModel: BaseModel + TimestampMixin in the right MRO order

Domain entities do NOT inherit from these; repositories map between the
two. Column types stay database-agnostic (SQLAlchemy Uuid, timezone-aware
DateTime) so the same models run on PostgreSQL and SQLite.
"""

from datetime import datetime
from uuid import UUID as PythonUUID
from uuid_extensions import uuid7

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True
