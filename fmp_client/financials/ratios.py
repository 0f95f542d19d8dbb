"""Get financial ratios - liquidity, profitability, leverage, valuation"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import FinancialRatios


def get_financial_ratios(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[FinancialRatios]:
    """
    Get financial ratios per period

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')

    Returns:
        list: FinancialRatios records
    """
    return fetch_many(v3_url(f'/ratios/{symbol}'), FinancialRatios, params)
