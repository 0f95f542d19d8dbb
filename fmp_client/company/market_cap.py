"""Get market capitalization - latest and historical"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many, fetch_one
from ..models import MarketCap


def get_market_cap(symbol: str) -> MarketCap:
    """
    Get the latest market capitalization

    Args:
        symbol: Stock ticker

    Returns:
        MarketCap: symbol, date, market_cap
    """
    return fetch_one(v3_url(f'/market-capitalization/{symbol}'), MarketCap)


def get_historical_market_cap(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[MarketCap]:
    """
    Get daily market capitalization history

    Args:
        symbol: Stock ticker
        params: Optional filters ('limit', 'from', 'to')

    Returns:
        list: MarketCap records, most recent first
    """
    return fetch_many(v3_url(f'/historical-market-capitalization/{symbol}'), MarketCap, params)
