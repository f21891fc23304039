"""
Custom Column Types for Voice Admin

UTCDateTime stores TIMESTAMP WITH TIME ZONE and always hands back aware
UTC datetimes, including on SQLite, which drops the offset on write.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, TypeDecorator
from sqlalchemy.engine import Dialect

from voice_admin.domain.models import to_utc


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp normalized to UTC in both directions.

    Example:
        class CallSession(SQLModel, table=True):
            start_time: datetime = Field(sa_type=UTCDateTime)
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: Optional[datetime], dialect: Dialect
    ) -> Optional[datetime]:
        return to_utc(value)

    def process_result_value(
        self, value: Optional[datetime], dialect: Dialect
    ) -> Optional[datetime]:
        return to_utc(value)
