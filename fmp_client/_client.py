"""FMP API Client"""
import time
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from .config import Config
from .errors import (
    ConfigurationError, DecodeError, InvalidSubscriptionError, TransportError,
    UnexpectedStatusError, UpstreamError
)
from .utils.logger import get_logger, log_api_call

logger = get_logger(__name__)

# Key FMP uses for application-level errors returned with HTTP 200
ERROR_MESSAGE_KEY = "Error Message"

_http_client: Optional[httpx.Client] = None


def get_http_client() -> httpx.Client:
    """Lazy-load the shared HTTP client"""
    global _http_client
    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.Client()
    return _http_client


def set_http_client(client: Optional[httpx.Client]) -> None:
    """
    Replace the shared HTTP client (e.g. one built on httpx.MockTransport).

    Passing None drops the current client; a default one is created on the
    next request.
    """
    global _http_client
    _http_client = client


def close_http_client() -> None:
    """Close the shared HTTP client"""
    global _http_client
    if _http_client is not None and not _http_client.is_closed:
        _http_client.close()
    _http_client = None


def _query_value(value: Any) -> Any:
    # FMP expects lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def build_url(url: str, params: Optional[Dict[str, Any]], api_key: str) -> str:
    """
    Append query parameters and the API key to a URL.

    Args:
        url: Endpoint URL, including path segments
        params: Query parameters (None values are dropped)
        api_key: FMP API key, sent as the `apikey` parameter

    Returns:
        str: URL with a percent-encoded query string
    """
    query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
    if query:
        url = f"{url}?{urlencode(query)}"

    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode({'apikey': api_key})}"


def fetch(url: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    Issue one GET against the FMP API and return the decoded JSON body.

    An empty list is returned as-is; whether it means "not found" depends on
    the endpoint and is decided by the caller.

    Args:
        url: Full endpoint URL (e.g. f"{Config.FMP_BASE_URL_V3}/profile/AAPL")
        params: Optional query parameters (e.g. {'period': 'quarter', 'limit': 1})

    Returns:
        dict or list: Decoded JSON response

    Raises:
        ConfigurationError: No API key configured (no request is sent)
        TransportError: Network-level failure
        InvalidSubscriptionError: HTTP 403
        UnexpectedStatusError: Any other non-200 status
        UpstreamError: HTTP 200 with an "Error Message" payload
        DecodeError: HTTP 200 with a body that is not JSON
    """
    if not url:
        raise ValueError("url must not be empty")

    api_key = Config.get_fmp_api_key()
    if not api_key:
        raise ConfigurationError()

    request_url = build_url(url, params, api_key.get())
    safe_url = api_key.mask_in(request_url)

    start = time.perf_counter()
    try:
        response = get_http_client().get(request_url)
    except httpx.RequestError as e:
        logger.debug(f"GET {safe_url} failed: {type(e).__name__}")
        raise TransportError(e) from e

    duration_ms = (time.perf_counter() - start) * 1000
    log_api_call(logger, "GET", safe_url, response.status_code, duration_ms)

    if response.status_code == 403:
        raise InvalidSubscriptionError(_error_message(response))
    if response.status_code != 200:
        raise UnexpectedStatusError(response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise DecodeError(f"Response body is not valid JSON: {e}") from e

    if isinstance(data, dict) and ERROR_MESSAGE_KEY in data:
        raise UpstreamError(str(data[ERROR_MESSAGE_KEY]))

    return data


def _error_message(response: httpx.Response) -> Optional[str]:
    """Best-effort extraction of FMP's error message from a rejected response"""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and ERROR_MESSAGE_KEY in data:
        return str(data[ERROR_MESSAGE_KEY])
    return None
