"""Get discounted cash flow valuations - latest, historical, advanced models"""
from typing import Any, Dict, List, Optional

from ..api import v3_url, v4_url
from .._decode import fetch_many, fetch_one
from ..models import AdvancedDiscountedCashFlow, DiscountedCashFlow


def get_discounted_cash_flow(symbol: str) -> DiscountedCashFlow:
    """
    Get the latest DCF fair value

    Args:
        symbol: Stock ticker

    Returns:
        DiscountedCashFlow: date, dcf, stock_price
    """
    return fetch_one(v3_url(f'/discounted-cash-flow/{symbol}'), DiscountedCashFlow)


def get_historical_discounted_cash_flow(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[DiscountedCashFlow]:
    """
    Get DCF values per reporting period

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')
    """
    return fetch_many(v3_url(f'/historical-discounted-cash-flow-statement/{symbol}'), DiscountedCashFlow, params)


def get_historical_daily_discounted_cash_flow(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[DiscountedCashFlow]:
    """Get daily DCF values ('limit' in params caps the number of days)"""
    return fetch_many(v3_url(f'/historical-daily-discounted-cash-flow/{symbol}'), DiscountedCashFlow, params)


def get_advanced_discounted_cash_flow(symbol: str) -> List[AdvancedDiscountedCashFlow]:
    """Get the yearly projections of FMP's unlevered DCF model"""
    return fetch_many(v4_url('/advanced_discounted_cash_flow'), AdvancedDiscountedCashFlow, {'symbol': symbol})


def get_advanced_levered_discounted_cash_flow(symbol: str) -> List[AdvancedDiscountedCashFlow]:
    """Get the yearly projections of FMP's levered DCF model"""
    return fetch_many(v4_url('/advanced_levered_discounted_cash_flow'), AdvancedDiscountedCashFlow, {'symbol': symbol})
