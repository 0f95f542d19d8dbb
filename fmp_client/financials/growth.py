"""Get financial growth - revenue, earnings, cash flow growth rates"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import FinancialGrowth


def get_financial_growth(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[FinancialGrowth]:
    """
    Get headline growth rates

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')

    Returns:
        list: FinancialGrowth records
    """
    return fetch_many(v3_url(f'/financial-growth/{symbol}'), FinancialGrowth, params)
