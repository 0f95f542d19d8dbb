"""
Errors raised by the FMP client.

Every failure a call can produce is one of the classes below. They share the
FMPError base so callers can catch them all at once, but none of them derives
from another.
"""
from typing import Optional


class FMPError(Exception):
    """Base class for all FMP client errors"""


class ConfigurationError(FMPError):
    """No API key is configured; raised before any request is sent"""

    def __init__(self, reason: str = "credential_not_set", message: Optional[str] = None):
        self.reason = reason
        super().__init__(
            message
            or "FMP_API_KEY is not set. Export it, add it to your .env file, "
               "or call Config.set_fmp_api_key()."
        )


class TransportError(FMPError):
    """The request never got an HTTP response (DNS, connect, TLS, timeout, ...)"""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Request failed: {cause!r}")


class UnexpectedStatusError(FMPError):
    """The API answered with a status code the client does not special-case"""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected status code {status_code}")


class InvalidSubscriptionError(FMPError):
    """HTTP 403: the API key's plan does not cover the requested endpoint"""

    def __init__(self, message: Optional[str] = None):
        self.status_code = 403
        self.message = message
        super().__init__(message or "Endpoint is not available on the current subscription")


class UpstreamError(FMPError):
    """HTTP 200 carrying an "Error Message" payload"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(FMPError):
    """A single record was expected but the API returned no data"""

    def __init__(self, message: str = "No data found"):
        self.message = message
        super().__init__(message)


class DecodeError(FMPError):
    """The response could not be decoded into the expected records"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
