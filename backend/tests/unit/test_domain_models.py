"""
Unit tests for domain value helpers.

Money quantization and UTC normalization shared by every layer.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from voice_admin.domain.models import (
    TurnRole,
    money_to_number,
    to_money,
    to_utc,
    utc_now,
)


class TestMoney:
    """Tests for price conversion."""

    def test_float_keeps_two_decimal_places(self):
        """9.99 as a float must not pick up binary noise."""
        assert to_money(9.99) == Decimal("9.99")
        assert str(to_money(9.99)) == "9.99"

    def test_integer_price_gets_cents(self):
        assert str(to_money(10)) == "10.00"

    def test_rounds_half_up(self):
        assert to_money("0.005") == Decimal("0.01")
        assert to_money(Decimal("1.234")) == Decimal("1.23")

    def test_number_serialization(self):
        """Stored Decimal becomes a plain float for JSON."""
        value = money_to_number(Decimal("9.99"))
        assert isinstance(value, float)
        assert value == 9.99


class TestTimestamps:
    """Tests for aware-UTC normalization."""

    def test_utc_now_is_aware_utc(self):
        assert utc_now().utcoffset() == timedelta(0)

    def test_aware_datetime_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 5, 1, 12, 0, tzinfo=plus_two)

        result = to_utc(value)

        assert result == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_naive_datetime_taken_as_utc(self):
        value = datetime(2024, 5, 1, 12, 0)
        assert to_utc(value) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_none_passes_through(self):
        assert to_utc(None) is None


class TestTurnRole:

    def test_closed_role_set(self):
        assert {r.value for r in TurnRole} == {"user", "assistant", "tool"}
