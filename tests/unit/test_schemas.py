"""
Unit Tests for Request Schemas

These tests verify that the request models:
- Emit only the query parameters that are set
- Join currency lists with commas in caller order
- Always emit the historical `date` parameter as YYYY-MM-DD

Run with:
    pytest tests/unit/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError
from datetime import date, datetime, timezone, timedelta

from core.schemas import LatestRequest, CurrenciesRequest, HistoricalRequest
from core.utils.time import format_api_date, parse_api_date


# ============================================
# Tests for LatestRequest
# ============================================

class TestLatestRequest:
    """Tests for LatestRequest.to_params"""

    def test_empty_request_has_no_params(self):
        assert LatestRequest().to_params() == {}

    def test_base_currency_only(self):
        assert LatestRequest(base_currency="EUR").to_params() == {"base_currency": "EUR"}

    def test_empty_base_currency_is_omitted(self):
        assert LatestRequest(base_currency="").to_params() == {}

    def test_currencies_joined_in_order(self):
        params = LatestRequest(currencies=["GBP", "EUR", "JPY"]).to_params()

        assert params == {"currencies": "GBP,EUR,JPY"}

    def test_all_fields(self):
        params = LatestRequest(base_currency="USD", currencies=["EUR", "GBP"]).to_params()

        assert params == {"base_currency": "USD", "currencies": "EUR,GBP"}

    def test_codes_are_passed_through_unvalidated(self):
        """Malformed codes are the server's problem"""
        params = LatestRequest(base_currency="usd", currencies=["not-a-code"]).to_params()

        assert params == {"base_currency": "usd", "currencies": "not-a-code"}


# ============================================
# Tests for CurrenciesRequest
# ============================================

class TestCurrenciesRequest:
    """Tests for CurrenciesRequest.to_params"""

    def test_empty_request_has_no_params(self):
        assert CurrenciesRequest().to_params() == {}

    def test_currencies_filter(self):
        assert CurrenciesRequest(currencies=["EUR", "GBP"]).to_params() == {"currencies": "EUR,GBP"}

    def test_single_currency(self):
        assert CurrenciesRequest(currencies=["AED"]).to_params() == {"currencies": "AED"}


# ============================================
# Tests for HistoricalRequest
# ============================================

class TestHistoricalRequest:
    """Tests for HistoricalRequest.to_params"""

    def test_unset_date_uses_zero_date(self):
        """The date parameter is always sent, even when unset"""
        assert HistoricalRequest().to_params() == {"date": "0001-01-01"}

    def test_date_formatting(self):
        params = HistoricalRequest(date=date(2022, 1, 1)).to_params()

        assert params == {"date": "2022-01-01"}

    def test_datetime_uses_its_own_calendar_date(self):
        tz = timezone(timedelta(hours=-5))
        params = HistoricalRequest(date=datetime(2022, 3, 9, 23, 30, tzinfo=tz)).to_params()

        assert params["date"] == "2022-03-09"

    def test_iso_string_is_accepted(self):
        params = HistoricalRequest(date="2021-12-31").to_params()

        assert params["date"] == "2021-12-31"

    def test_all_fields(self):
        params = HistoricalRequest(
            date=date(2022, 1, 1),
            base_currency="USD",
            currencies=["AED", "AFN"],
        ).to_params()

        assert params == {
            "date": "2022-01-01",
            "base_currency": "USD",
            "currencies": "AED,AFN",
        }


# ============================================
# Tests for Request Immutability
# ============================================

class TestRequestsAreFrozen:
    """Requests are values and cannot be mutated after construction"""

    def test_latest_request_is_frozen(self):
        request = LatestRequest(base_currency="USD")

        with pytest.raises(ValidationError):
            request.base_currency = "EUR"


# ============================================
# Tests for Date Helpers
# ============================================

class TestDateHelpers:
    """Tests for core.utils.time"""

    def test_format_none(self):
        assert format_api_date(None) == "0001-01-01"

    def test_format_pads_small_years(self):
        assert format_api_date(date(999, 2, 3)) == "0999-02-03"

    def test_parse_round_trip(self):
        assert parse_api_date("2022-01-01") == date(2022, 1, 1)

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_api_date("01/01/2022")
