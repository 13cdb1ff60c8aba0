"""Tests for domain models, core helpers, settings and the stub provider."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tripledger.domain.models import Expense, Split, SplitPolicy, Trip, TripMember
from tripledger.core.money import (
    round_money,
    round_rate,
    has_cent_precision,
    normalize_currency,
    is_currency_code,
    to_decimal,
)
from tripledger.core.timezone import UTC, to_utc, parse_datetime_utc
from tripledger.config.settings import Settings
from tripledger.providers import StubRateProvider, RateProviderError


class TestDomainModels:
    """Test domain model creation."""

    def test_create_trip_with_member(self):
        trip = Trip(trip_id="trip-1", name="Lisbon")
        member = TripMember(trip_id=trip.trip_id, member_id="alice", display_name="Alice")

        assert trip.description is None
        assert member.trip_id == "trip-1"
        assert member.display_name == "Alice"

    def test_split_accepts_policy_value(self):
        split = Split(member_id="alice", amount=Decimal("10.00"), policy="ratio", ratio=Decimal("2"))

        assert split.policy == SplitPolicy.RATIO

    def test_expense_split_total(self):
        expense = Expense(
            expense_id="exp-1",
            trip_id="trip-1",
            payer_id="alice",
            description="Taxi",
            canonical_amount=Decimal("20.00"),
            original_amount=Decimal("20.00"),
            original_currency="CAD",
            exchange_rate=Decimal("1"),
            splits=[
                Split("alice", Decimal("10.01"), SplitPolicy.EQUAL),
                Split("bob", Decimal("9.99"), SplitPolicy.EQUAL),
            ],
        )

        assert expense.split_total == Decimal("20.00")

    def test_expense_without_splits_totals_zero(self):
        expense = Expense(
            expense_id="exp-1",
            trip_id="trip-1",
            payer_id="alice",
            description="Taxi",
            canonical_amount=Decimal("20.00"),
            original_amount=Decimal("20.00"),
            original_currency="CAD",
            exchange_rate=Decimal("1"),
        )

        assert expense.split_total == Decimal("0")


class TestMoney:
    """Rounding and currency code helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.705", "2.71"),
            ("2.704", "2.70"),
            ("-2.705", "-2.71"),
            ("0.005", "0.01"),
        ],
    )
    def test_round_money_half_away_from_zero(self, value, expected):
        assert round_money(Decimal(value)) == Decimal(expected)

    def test_round_rate_six_places(self):
        assert round_rate(Decimal("1.23456750")) == Decimal("1.234568")

    def test_to_decimal_avoids_float_artifacts(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_rejects_text(self):
        with pytest.raises(ValueError):
            to_decimal("abc")

    def test_cent_precision(self):
        assert has_cent_precision(Decimal("10.10"))
        assert has_cent_precision(Decimal("10"))
        assert not has_cent_precision(Decimal("10.101"))

    def test_cent_precision_of_huge_value_is_false(self):
        assert not has_cent_precision(Decimal("1E+30"))

    def test_currency_codes(self):
        assert normalize_currency(" eur ") == "EUR"
        assert is_currency_code("EUR")
        assert not is_currency_code("EU")
        assert not is_currency_code("E1R")


class TestTimezone:
    """UTC helpers."""

    def test_naive_datetime_is_treated_as_utc(self):
        value = to_utc(datetime(2024, 6, 1, 12, 0))

        assert value.tzinfo is not None
        assert value.utcoffset() == timedelta(0)
        assert value.hour == 12

    def test_aware_datetime_is_converted(self):
        value = to_utc(datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=-4))))

        assert value == UTC.localize(datetime(2024, 6, 1, 16, 0))

    def test_parse_rfc_2822(self):
        value = parse_datetime_utc("Sat, 15 Jun 2024 00:00:01 +0000")

        assert value == UTC.localize(datetime(2024, 6, 15, 0, 0, 1))

    def test_parse_iso_8601(self):
        value = parse_datetime_utc("2024-06-15T02:00:00+02:00")

        assert value == UTC.localize(datetime(2024, 6, 15, 0, 0, 0))


class TestSettings:
    """Settings defaults and derived values."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACCOUNTING_CURRENCY", raising=False)
        monkeypatch.delenv("RATE_CACHE_MAX_AGE_HOURS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.get_accounting_currency() == "CAD"
        assert settings.rate_cache_max_age_hours == 24

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ACCOUNTING_CURRENCY", "eur")
        monkeypatch.setenv("EXCHANGE_RATE_API_KEY", "secret")

        settings = Settings(_env_file=None)

        assert settings.get_accounting_currency() == "EUR"
        assert settings.exchange_rate_api_key == "secret"

    def test_invalid_accounting_currency_rejected(self):
        with pytest.raises(ValueError, match="3-letter"):
            Settings(_env_file=None, accounting_currency="dollars")

    def test_database_url_derived_from_data_dir(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path / "ledger", database_url=None)

        assert settings.get_database_url() == f"sqlite:///{tmp_path / 'ledger' / 'trip_ledger.db'}"
        assert (tmp_path / "ledger").is_dir()


class TestStubRateProvider:
    """Offline rate table."""

    def test_cad_table(self):
        table = StubRateProvider().get_latest_rates("CAD")

        assert table.base_currency == "CAD"
        assert table.rates["CAD"] == Decimal("1")
        assert table.rates["USD"] == Decimal("0.73")
        assert table.as_of is not None

    def test_rebased_table(self):
        provider = StubRateProvider(rates={"CAD": Decimal("1"), "USD": Decimal("0.5")})

        table = provider.get_latest_rates("usd")

        assert table.base_currency == "USD"
        assert table.rates["USD"] == Decimal("1")
        assert table.rates["CAD"] == Decimal("2")

    def test_unknown_base(self):
        with pytest.raises(RateProviderError):
            StubRateProvider().get_latest_rates("XYZ")
