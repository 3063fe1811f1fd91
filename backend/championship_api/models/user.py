"""User ORM - one row per championship record.

Invariants:
    - id is a UUID primary key generated at creation
    - university, point_differential, championship_year are non-nullable
    - created_at and updated_at are UTC and always populated

Design Decisions:
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite test databases
    - Index on created_at: the collection is always listed newest first
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from championship_api.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A university's championship record."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    university: Mapped[str] = mapped_column(Text, nullable=False)
    point_differential: Mapped[float] = mapped_column(Float, nullable=False)
    championship_year: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
