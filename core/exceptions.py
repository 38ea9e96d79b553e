"""
Client Exceptions

Status-code failures raised by FreeCurrencyAPIClient. Transport errors
(aiohttp.ClientError), cancellation (asyncio.CancelledError / TimeoutError)
and decode errors (pydantic.ValidationError) are not wrapped and reach the
caller unchanged.
"""


class FreeCurrencyAPIError(Exception):
    """Base exception for all status-code errors returned by the API."""
    def __init__(self, message="The Free Currency API returned an error."):
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(FreeCurrencyAPIError):
    """Raised on HTTP 401, regardless of the response body."""
    def __init__(self, message="unauthorized"):
        self.status = 401
        super().__init__(message)


class InvalidStatusCodeError(FreeCurrencyAPIError):
    """Raised on any non-200 status other than 401."""
    def __init__(self, status: int, message="invalid status code"):
        self.status = status
        super().__init__(f"{message}: {status}")
