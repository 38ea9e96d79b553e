"""
Wire Models

Pydantic models matching the JSON bodies returned by the Free Currency API,
one per endpoint. Each model decodes the raw body with `model_validate_json`
and projects itself onto the public result model from core.schemas.

Response formats:
    latest:      {"data": {"AED": 3.67306, ...}}
    currencies:  {"data": {"AED": {"symbol": "AED", "name": ..., ...}, ...}}
    historical:  {"data": {"2022-01-01": {"AED": 3.67306, ...}}}
    status:      {"quotas": {"month": {"total": 300, "used": 71, "remaining": 229}}}

Absent keys decode to empty values. Decoding is strict: malformed JSON or
mistyped values (a quoted number, a boolean where an int is expected)
raise pydantic.ValidationError. JSON integers are accepted for float fields.
"""

from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

from core.schemas import (
    LatestRates,
    CurrencyInfo,
    CurrencyCatalog,
    HistoricalRates,
    QuotaPeriod,
    QuotaStatus,
)


class LatestWire(BaseModel):
    model_config = ConfigDict(strict=True)

    data: Dict[str, float] = Field(default_factory=dict)

    def to_result(self) -> LatestRates:
        return LatestRates(rates=self.data)


class CurrencyWireItem(BaseModel):
    model_config = ConfigDict(strict=True)

    symbol: str = ""
    name: str = ""
    symbol_native: str = ""
    decimal_digits: int = 0
    rounding: int = 0
    code: str = ""
    name_plural: str = ""


class CurrenciesWire(BaseModel):
    model_config = ConfigDict(strict=True)

    data: Dict[str, CurrencyWireItem] = Field(default_factory=dict)

    def to_result(self) -> CurrencyCatalog:
        return CurrencyCatalog(
            currencies={
                code: CurrencyInfo(
                    symbol=item.symbol,
                    name=item.name,
                    symbol_native=item.symbol_native,
                    decimal_digits=item.decimal_digits,
                    rounding=item.rounding,
                    code=item.code,
                    name_plural=item.name_plural,
                )
                for code, item in self.data.items()
            }
        )


class HistoricalWire(BaseModel):
    model_config = ConfigDict(strict=True)

    data: Dict[str, Dict[str, float]] = Field(default_factory=dict)

    def to_result(self) -> HistoricalRates:
        """
        Flatten the date-keyed map into a single rate map.

        Only one date is ever requested, so `data` normally has one key.
        If the server returns several, the first one in body order wins.
        """
        first_date = next(iter(self.data), None)
        if first_date is None:
            return HistoricalRates()
        return HistoricalRates(rates=self.data[first_date])


class QuotaWirePeriod(BaseModel):
    model_config = ConfigDict(strict=True)

    total: int = 0
    used: int = 0
    remaining: int = 0


class QuotaWireQuotas(BaseModel):
    model_config = ConfigDict(strict=True)

    month: QuotaWirePeriod = Field(default_factory=QuotaWirePeriod)


class StatusWire(BaseModel):
    model_config = ConfigDict(strict=True)

    quotas: QuotaWireQuotas = Field(default_factory=QuotaWireQuotas)

    def to_result(self) -> QuotaStatus:
        month = self.quotas.month
        return QuotaStatus(
            month=QuotaPeriod(
                total=month.total,
                used=month.used,
                remaining=month.remaining,
            )
        )
