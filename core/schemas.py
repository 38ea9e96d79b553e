"""
Request and Result Schemas

This module defines the Pydantic models callers use to talk to the
Free Currency API client.

Request models:
    - LatestRequest: Filters for the latest-rates endpoint
    - CurrenciesRequest: Filters for the currency-metadata endpoint
    - HistoricalRequest: Date and filters for the historical-rates endpoint

Each request model knows how to turn itself into query parameters via
`to_params()`. Unset or empty fields are left out, except the historical
`date`, which is always sent.

Result models:
    - LatestRates: currency code -> rate
    - CurrencyInfo / CurrencyCatalog: currency code -> metadata
    - HistoricalRates: currency code -> rate for the requested date
    - QuotaPeriod / QuotaStatus: account call allowance for the current month

Result models are the public projection of the wire models in
freecurrencyapi.wire. They carry the same information, only reshaped.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from core.utils.time import DateLike, format_api_date


def _join_codes(codes: List[str]) -> str:
    """Join currency codes with commas, keeping caller order."""
    return ",".join(codes)


# ============================================
# Request Models
# ============================================

class LatestRequest(BaseModel):
    """
    Filters for GET latest.

    Attributes:
        base_currency: Currency the rates are quoted against (server default: USD)
        currencies: Restrict the result to these currency codes

    Example:
        >>> LatestRequest(base_currency="EUR", currencies=["USD", "GBP"]).to_params()
        {'base_currency': 'EUR', 'currencies': 'USD,GBP'}
    """

    model_config = ConfigDict(frozen=True)

    base_currency: Optional[str] = Field(
        default=None,
        description="Base currency code",
        examples=["USD", "EUR"]
    )

    currencies: List[str] = Field(
        default_factory=list,
        description="Currency codes to include in the result",
        examples=[["EUR", "GBP"]]
    )

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}

        if self.base_currency:
            params["base_currency"] = self.base_currency

        if self.currencies:
            params["currencies"] = _join_codes(self.currencies)

        return params


class CurrenciesRequest(BaseModel):
    """
    Filters for GET currencies.

    Example:
        >>> CurrenciesRequest(currencies=["EUR", "GBP"]).to_params()
        {'currencies': 'EUR,GBP'}
    """

    model_config = ConfigDict(frozen=True)

    currencies: List[str] = Field(
        default_factory=list,
        description="Currency codes to include in the result"
    )

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}

        if self.currencies:
            params["currencies"] = _join_codes(self.currencies)

        return params


class HistoricalRequest(BaseModel):
    """
    Date and filters for GET historical.

    The `date` parameter is always emitted. Leaving it unset sends the
    zero date (0001-01-01), which the server rejects with a non-200 status.

    Example:
        >>> HistoricalRequest(date=date(2022, 1, 1), currencies=["AED"]).to_params()
        {'date': '2022-01-01', 'currencies': 'AED'}
    """

    model_config = ConfigDict(frozen=True)

    date: Optional[DateLike] = Field(
        default=None,
        description="Calendar date to fetch rates for"
    )

    base_currency: Optional[str] = Field(
        default=None,
        description="Base currency code"
    )

    currencies: List[str] = Field(
        default_factory=list,
        description="Currency codes to include in the result"
    )

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {"date": format_api_date(self.date)}

        if self.base_currency:
            params["base_currency"] = self.base_currency

        if self.currencies:
            params["currencies"] = _join_codes(self.currencies)

        return params


# ============================================
# Result Models
# ============================================

class LatestRates(BaseModel):
    """Latest exchange rates, keyed by currency code."""

    model_config = ConfigDict(frozen=True)

    rates: Dict[str, float] = Field(default_factory=dict)


class CurrencyInfo(BaseModel):
    """
    Metadata for a single currency.

    Attributes:
        symbol: Display symbol (e.g., "$", "AED")
        name: English name (e.g., "United Arab Emirates Dirham")
        symbol_native: Symbol in the currency's own locale
        decimal_digits: Number of minor-unit digits
        rounding: Rounding increment
        code: ISO 4217 code
        name_plural: Plural English name
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = ""
    name: str = ""
    symbol_native: str = ""
    decimal_digits: int = 0
    rounding: int = 0
    code: str = ""
    name_plural: str = ""


class CurrencyCatalog(BaseModel):
    """Currency metadata, keyed by currency code."""

    model_config = ConfigDict(frozen=True)

    currencies: Dict[str, CurrencyInfo] = Field(default_factory=dict)


class HistoricalRates(BaseModel):
    """Exchange rates for the requested historical date, keyed by currency code."""

    model_config = ConfigDict(frozen=True)

    rates: Dict[str, float] = Field(default_factory=dict)


class QuotaPeriod(BaseModel):
    """Call allowance for one quota period."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    used: int = 0
    remaining: int = 0


class QuotaStatus(BaseModel):
    """Account quota status as reported by GET status."""

    model_config = ConfigDict(frozen=True)

    month: QuotaPeriod = Field(default_factory=QuotaPeriod)
