"""
Free Currency API REST Client

This module provides an async HTTP client for the freecurrencyapi.com v1 API.
It handles:
- Query-parameter encoding from typed request models
- The `apikey` header on every call
- Status classification (200 / 401 / anything else)
- Decoding JSON bodies into wire models and projecting them to result models

There is no retry, backoff, caching or client-side timeout. Cancellation and
deadlines belong to the caller's asyncio task:

    rates = await asyncio.wait_for(client.get_latest(), timeout=5)

API Documentation:
    https://freecurrencyapi.com/docs/

Usage:
    async with FreeCurrencyAPIClient("my-api-key") as client:
        latest = await client.get_latest(LatestRequest(base_currency="EUR"))
        status = await client.get_status()
"""

import time
import aiohttp
from typing import Dict, Optional, Type, TypeVar
from pydantic import BaseModel

from core.config import settings, DEFAULT_BASE_URL
from core.exceptions import UnauthorizedError, InvalidStatusCodeError
from core.logging import get_logger, log_api_request, log_api_response
from core.schemas import (
    LatestRequest,
    CurrenciesRequest,
    HistoricalRequest,
    LatestRates,
    CurrencyCatalog,
    HistoricalRates,
    QuotaStatus,
)
from freecurrencyapi.wire import LatestWire, CurrenciesWire, HistoricalWire, StatusWire


WireT = TypeVar("WireT", bound=BaseModel)


class FreeCurrencyAPIClient:
    """
    Async HTTP client for the Free Currency API.

    Attributes:
        api_key: Key sent in the `apikey` header (sent even when empty)
        base_url: Root URL the endpoint paths are appended to
        session: aiohttp ClientSession used as transport

    Example:
        >>> async with FreeCurrencyAPIClient("my-api-key") as client:
        ...     latest = await client.get_latest()
        ...     print(latest.rates["EUR"])

    Notes:
        - Without a session argument, the client creates its own session on
          `async with` entry and closes it on exit
        - A session passed in by the caller is never closed by the client
        - One client can serve many concurrent calls
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize the client.

        Args:
            api_key: API key. None falls back to FREECURRENCYAPI_API_KEY.
            base_url: API root URL ending with "/". None or "" falls back to
                FREECURRENCYAPI_BASE_URL, then to the production root.
            session: Optional caller-owned aiohttp session.
        """
        self._api_key = settings.freecurrencyapi_api_key if api_key is None else api_key
        self._base_url = base_url or settings.freecurrencyapi_base_url or DEFAULT_BASE_URL
        self._session = session
        self._owns_session = session is None
        self.logger = get_logger(__name__)

    @classmethod
    def from_settings(cls, session: Optional[aiohttp.ClientSession] = None) -> "FreeCurrencyAPIClient":
        """Build a client from the global settings (.env / environment)."""
        return cls(
            api_key=settings.freecurrencyapi_api_key,
            base_url=settings.freecurrencyapi_base_url,
            session=session,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        return self._session

    # ============================================
    # Context Manager for Session Management
    # ============================================

    async def __aenter__(self):
        if self._session is None:
            # Deadlines come from the caller's task, not from the session
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None))
            self._owns_session = True
            self.logger.debug("FreeCurrencyAPIClient session created")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self.logger.debug("FreeCurrencyAPIClient session closed")

    # ============================================
    # HTTP Request Handler
    # ============================================

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        Perform one HTTP call and classify its status.

        Args:
            method: HTTP method (e.g., "GET")
            path: Endpoint path relative to base_url (e.g., "latest")
            params: Query parameters

        Returns:
            Raw response body of a 200 response

        Raises:
            UnauthorizedError: On HTTP 401
            InvalidStatusCodeError: On any other non-200 status
            RuntimeError: If no session is open
            aiohttp.ClientError: Transport failures, unwrapped
            asyncio.CancelledError: If the calling task is cancelled
        """
        if self._session is None:
            raise RuntimeError("Client session not initialized. Use 'async with' statement.")

        url = f"{self._base_url}{path}"
        headers = {
            "apikey": self._api_key,
            "Content-Type": "application/json",
        }

        log_api_request(method, path, params)
        started = time.monotonic()

        async with self._session.request(method, url, params=params, headers=headers) as resp:
            log_api_response(method, path, resp.status, time.monotonic() - started)

            if resp.status == 401:
                raise UnauthorizedError()

            if resp.status != 200:
                raise InvalidStatusCodeError(resp.status)

            return await resp.read()

    async def _get(
        self,
        path: str,
        wire_model: Type[WireT],
        params: Optional[Dict[str, str]] = None
    ) -> WireT:
        """
        GET an endpoint and decode the body into its wire model.

        Raises:
            pydantic.ValidationError: If the body is not valid JSON for wire_model
        """
        body = await self._request("GET", path, params)
        return wire_model.model_validate_json(body)

    # ============================================
    # API Methods
    # ============================================

    async def get_latest(self, request: Optional[LatestRequest] = None) -> LatestRates:
        """
        Fetch the latest exchange rates.

        Args:
            request: Optional base currency and currency filter

        Returns:
            LatestRates mapping currency code to rate

        Endpoint:
            GET latest

        Example:
            >>> latest = await client.get_latest(LatestRequest(base_currency="USD", currencies=["EUR"]))
            >>> latest.rates
            {'EUR': 0.92}
        """
        if request is None:
            request = LatestRequest()
        params = request.to_params()

        self.logger.info(
            f"Fetching latest rates (base={request.base_currency or 'default'}, "
            f"currencies={len(request.currencies) or 'all'})"
        )

        wire = await self._get("latest", LatestWire, params)
        result = wire.to_result()

        self.logger.info(f"Fetched {len(result.rates)} latest rates")
        return result

    async def get_currencies(self, request: Optional[CurrenciesRequest] = None) -> CurrencyCatalog:
        """
        Fetch currency metadata.

        Args:
            request: Optional currency filter

        Returns:
            CurrencyCatalog mapping currency code to CurrencyInfo

        Endpoint:
            GET currencies
        """
        if request is None:
            request = CurrenciesRequest()
        params = request.to_params()

        self.logger.info(f"Fetching currencies (currencies={len(request.currencies) or 'all'})")

        wire = await self._get("currencies", CurrenciesWire, params)
        result = wire.to_result()

        self.logger.info(f"Fetched metadata for {len(result.currencies)} currencies")
        return result

    async def get_historical(self, request: HistoricalRequest) -> HistoricalRates:
        """
        Fetch exchange rates for a past date.

        Args:
            request: Date plus optional base currency and currency filter

        Returns:
            HistoricalRates mapping currency code to rate on that date

        Endpoint:
            GET historical

        Notes:
            The response is keyed by date. Only one date is requested, so the
            first date in the body is used.
        """
        params = request.to_params()

        self.logger.info(f"Fetching historical rates for {params['date']}")

        wire = await self._get("historical", HistoricalWire, params)
        result = wire.to_result()

        self.logger.info(f"Fetched {len(result.rates)} historical rates for {params['date']}")
        return result

    async def get_status(self) -> QuotaStatus:
        """
        Fetch the account quota for the current month.

        Returns:
            QuotaStatus with total, used and remaining calls

        Endpoint:
            GET status
        """
        self.logger.info("Fetching account status")

        wire = await self._get("status", StatusWire)
        result = wire.to_result()

        self.logger.info(
            f"Quota: {result.month.used}/{result.month.total} used, "
            f"{result.month.remaining} remaining"
        )
        return result
