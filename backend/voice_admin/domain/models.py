"""
Domain Models for Voice Admin

Pure Python value types with no framework dependencies.
These define the closed role set, money handling and time normalization
shared by the persistence and API layers.
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Union


MONEY_QUANTUM = Decimal("0.01")


class TurnRole(str, Enum):
    """Speaker attributed to a conversation turn."""
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


def to_money(value: Union[Decimal, float, int, str]) -> Decimal:
    """
    Convert a price to a two-place Decimal.

    Floats go through ``str`` so 9.99 stays 9.99 instead of
    9.9900000000000002131628...
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def money_to_number(value: Decimal) -> float:
    """Serialize a stored price as a plain JSON number."""
    return float(to_money(value))


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize to aware UTC; naive input is taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
