"""
Free Currency API Client Package

Async client for the freecurrencyapi.com v1 REST API.

Structure:
    freecurrencyapi/
    ├── __init__.py      # Public exports
    ├── api_client.py    # FreeCurrencyAPIClient (HTTP call, status classification)
    └── wire.py          # Wire models matching the JSON response bodies

Endpoints Used:
    - GET latest      - Latest exchange rates
    - GET currencies  - Currency metadata
    - GET historical  - Exchange rates for a past date
    - GET status      - Account quota
"""

from core.exceptions import FreeCurrencyAPIError, UnauthorizedError, InvalidStatusCodeError
from core.schemas import (
    LatestRequest,
    CurrenciesRequest,
    HistoricalRequest,
    LatestRates,
    CurrencyInfo,
    CurrencyCatalog,
    HistoricalRates,
    QuotaPeriod,
    QuotaStatus,
)
from .api_client import FreeCurrencyAPIClient

__all__ = [
    "FreeCurrencyAPIClient",
    "FreeCurrencyAPIError",
    "UnauthorizedError",
    "InvalidStatusCodeError",
    "LatestRequest",
    "CurrenciesRequest",
    "HistoricalRequest",
    "LatestRates",
    "CurrencyInfo",
    "CurrencyCatalog",
    "HistoricalRates",
    "QuotaPeriod",
    "QuotaStatus",
]
