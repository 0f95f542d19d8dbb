"""Get key metrics - P/E, ROE, debt/equity, per share figures"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many, fetch_one
from ..models import KeyMetrics, KeyMetricsTTM


def get_key_metrics(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[KeyMetrics]:
    """
    Get key metrics per period

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')

    Returns:
        list: KeyMetrics records
    """
    return fetch_many(v3_url(f'/key-metrics/{symbol}'), KeyMetrics, params)


def get_key_metrics_ttm(symbol: str, params: Optional[Dict[str, Any]] = None) -> KeyMetricsTTM:
    """Get trailing-twelve-month key metrics"""
    return fetch_one(v3_url(f'/key-metrics-ttm/{symbol}'), KeyMetricsTTM, params)
