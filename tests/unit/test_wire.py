"""
Unit Tests for Wire Models

These tests verify that the wire models:
- Decode the JSON bodies returned by each endpoint
- Project them onto the public result models without computing anything
- Raise pydantic.ValidationError on malformed bodies

Run with:
    pytest tests/unit/test_wire.py -v
"""

import pytest
from pydantic import ValidationError

from core.schemas import CurrencyInfo, QuotaPeriod
from freecurrencyapi.wire import LatestWire, CurrenciesWire, HistoricalWire, StatusWire


CURRENCIES_BODY = (
    '{"data":{"AED":{"symbol":"AED","name":"United Arab Emirates Dirham",'
    '"symbol_native":"د.إ","decimal_digits":2,"rounding":0,"code":"AED",'
    '"name_plural":"UAE dirhams"},"AFN":{"symbol":"Af","name":"Afghan Afghani",'
    '"symbol_native":"؋","decimal_digits":0,"rounding":0,"code":"AFN",'
    '"name_plural":"Afghan Afghanis"}}}'
)


class TestLatestWire:
    """Tests for latest body decoding"""

    def test_rates_are_mapped_exactly(self):
        wire = LatestWire.model_validate_json('{"data":{"AED":3.67306,"AFN":91.80254}}')

        assert wire.to_result().rates == {"AED": 3.67306, "AFN": 91.80254}

    def test_missing_data_decodes_to_empty(self):
        assert LatestWire.model_validate_json("{}").to_result().rates == {}

    def test_unknown_keys_are_ignored(self):
        wire = LatestWire.model_validate_json('{"meta":{"x":1},"data":{"EUR":0.9}}')

        assert wire.to_result().rates == {"EUR": 0.9}

    def test_truncated_body_raises(self):
        with pytest.raises(ValidationError):
            LatestWire.model_validate_json('{"data":{"AED":3.67306')

    def test_wrong_type_raises(self):
        with pytest.raises(ValidationError):
            LatestWire.model_validate_json('{"data":{"AED":"lots"}}')


class TestCurrenciesWire:
    """Tests for currencies body decoding"""

    def test_metadata_is_mapped(self):
        result = CurrenciesWire.model_validate_json(CURRENCIES_BODY).to_result()

        assert set(result.currencies) == {"AED", "AFN"}
        assert result.currencies["AED"] == CurrencyInfo(
            symbol="AED",
            name="United Arab Emirates Dirham",
            symbol_native="د.إ",
            decimal_digits=2,
            rounding=0,
            code="AED",
            name_plural="UAE dirhams",
        )
        assert result.currencies["AFN"].decimal_digits == 0
        assert result.currencies["AFN"].name_plural == "Afghan Afghanis"


class TestHistoricalWire:
    """Tests for historical body decoding"""

    def test_single_date_is_flattened(self):
        body = '{"data":{"2022-01-01":{"AED":3.67306,"AFN":91.80254}}}'

        result = HistoricalWire.model_validate_json(body).to_result()

        assert result.rates == {"AED": 3.67306, "AFN": 91.80254}

    def test_first_date_wins_when_several_are_returned(self):
        body = '{"data":{"2022-01-02":{"EUR":0.88},"2022-01-01":{"EUR":0.87}}}'

        result = HistoricalWire.model_validate_json(body).to_result()

        assert result.rates == {"EUR": 0.88}

    def test_empty_data_gives_empty_rates(self):
        assert HistoricalWire.model_validate_json('{"data":{}}').to_result().rates == {}


class TestStatusWire:
    """Tests for status body decoding"""

    def test_quota_is_mapped(self):
        body = '{"quotas":{"month":{"total":300,"used":71,"remaining":229}}}'

        result = StatusWire.model_validate_json(body).to_result()

        assert result.month == QuotaPeriod(total=300, used=71, remaining=229)

    def test_truncated_body_raises(self):
        with pytest.raises(ValidationError):
            StatusWire.model_validate_json('{"quotas":{"month":{"total":300,"used":71,"remaining":229}')


# ============================================
# Tests for Strict Decoding
# ============================================

class TestStrictDecoding:
    """Mistyped JSON values are rejected instead of coerced"""

    def test_quoted_rate_raises(self):
        with pytest.raises(ValidationError):
            LatestWire.model_validate_json('{"data":{"AED":"3.67306"}}')

    def test_quoted_historical_rate_raises(self):
        with pytest.raises(ValidationError):
            HistoricalWire.model_validate_json('{"data":{"2022-01-01":{"AED":"3.67306"}}}')

    def test_integer_rate_is_accepted(self):
        wire = LatestWire.model_validate_json('{"data":{"EUR":1}}')

        assert wire.to_result().rates == {"EUR": 1.0}

    def test_quoted_quota_raises(self):
        with pytest.raises(ValidationError):
            StatusWire.model_validate_json('{"quotas":{"month":{"total":"300","used":71,"remaining":229}}}')

    def test_boolean_quota_raises(self):
        with pytest.raises(ValidationError):
            StatusWire.model_validate_json('{"quotas":{"month":{"total":300,"used":true,"remaining":229}}}')

    def test_fractional_quota_raises(self):
        with pytest.raises(ValidationError):
            StatusWire.model_validate_json('{"quotas":{"month":{"total":300,"used":71,"remaining":229.5}}}')

    def test_quoted_decimal_digits_raises(self):
        body = '{"data":{"AED":{"symbol":"AED","decimal_digits":"2"}}}'

        with pytest.raises(ValidationError):
            CurrenciesWire.model_validate_json(body)
