"""
Base Model for SQLModel ORM

Provides common fields shared by all table models.
Every table uses a store-assigned integer key and a creation timestamp.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from voice_admin.domain.models import utc_now
from voice_admin.infrastructure.db.models.types import UTCDateTime


class IntIdMixin(SQLModel):
    """
    Mixin providing an autoincrement integer primary key.

    ``None`` until the row is flushed.
    """

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="Store-assigned identifier"
    )


class CreatedAtMixin(SQLModel):
    """
    Mixin providing the insert timestamp.

    Aware UTC, stored as TIMESTAMP WITH TIME ZONE.
    """

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UTCDateTime,
        nullable=False,
        description="Record creation timestamp (UTC)"
    )


class BaseModel(IntIdMixin, CreatedAtMixin):
    """
    Base model combining id and created_at mixins.

    Table models inherit from this class.
    """
    pass
