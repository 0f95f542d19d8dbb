"""Universal FMP API caller"""
from typing import Any, Dict, Optional

from ._client import fetch
from .config import Config


def v3_url(path: str) -> str:
    """Full v3 URL for a path such as '/profile/AAPL'"""
    return f"{Config.FMP_BASE_URL_V3}{path}"


def v4_url(path: str) -> str:
    """Full v4 URL for a path such as '/stock_peers'"""
    return f"{Config.FMP_BASE_URL_V4}{path}"


def fmp(endpoint: str, params: Optional[Dict[str, Any]] = None):
    """
    Call any FMP v3 endpoint and return the undecoded JSON

    Args:
        endpoint: API path (e.g., '/profile/AAPL')
        params: Optional params (e.g., {'period': 'annual', 'limit': 5})

    Returns:
        dict or list: API response

    Examples:
        fmp('/profile/AAPL')
        fmp('/income-statement/AAPL', {'period': 'annual', 'limit': 5})
        fmp('/quote/AAPL,MSFT,GOOGL')  # Batch
    """
    return fetch(v3_url(endpoint), params)


def fmp_v4(endpoint: str, params: Optional[Dict[str, Any]] = None):
    """
    Call any FMP v4 endpoint and return the undecoded JSON

    Args:
        endpoint: API path (e.g., '/score')
        params: Optional params (e.g., {'symbol': 'AAPL'})

    Returns:
        dict or list: API response
    """
    return fetch(v4_url(endpoint), params)
