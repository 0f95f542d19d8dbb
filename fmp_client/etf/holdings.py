"""Get ETF holdings and the ETFs that hold a stock"""
from typing import List

from ..api import v3_url
from .._decode import fetch_many
from ..models import ETFExposure, ETFHolding


def get_etf_holdings(symbol: str) -> List[ETFHolding]:
    """
    Get the positions of an ETF

    Args:
        symbol: ETF ticker

    Returns:
        list: ETFHolding records (asset, shares_number, weight_percentage, market_value)
    """
    return fetch_many(v3_url(f'/etf-holder/{symbol}'), ETFHolding)


def get_etf_stock_exposure(symbol: str) -> List[ETFExposure]:
    """
    Get the ETFs holding a stock

    Args:
        symbol: Stock ticker

    Returns:
        list: ETFExposure records (etf_symbol, shares_number, weight_percentage)
    """
    return fetch_many(v3_url(f'/etf-stock-exposure/{symbol}'), ETFExposure)
