"""Get balance sheet - assets, liabilities, equity"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import BalanceSheet, BalanceSheetGrowth


def get_balance_sheets(cik_or_symbol: str, params: Optional[Dict[str, Any]] = None) -> List[BalanceSheet]:
    """
    Get balance sheets

    Args:
        cik_or_symbol: Stock ticker or SEC CIK
        params: Optional filters ('period': 'annual' or 'quarter', 'limit')

    Returns:
        list: BalanceSheet records
    """
    return fetch_many(v3_url(f'/balance-sheet-statement/{cik_or_symbol}'), BalanceSheet, params)


def get_balance_sheet_growth(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[BalanceSheetGrowth]:
    """Get period-over-period growth of each balance sheet line"""
    return fetch_many(v3_url(f'/balance-sheet-statement-growth/{symbol}'), BalanceSheetGrowth, params)
