"""Get income statement - revenue, expenses, net income"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import IncomeStatement, IncomeStatementGrowth


def get_income_statements(cik_or_symbol: str, params: Optional[Dict[str, Any]] = None) -> List[IncomeStatement]:
    """
    Get income statements

    Args:
        cik_or_symbol: Stock ticker or SEC CIK (e.g., 'AAPL' or '320193')
        params: Optional filters, e.g. {'period': 'quarter', 'limit': 4}

    Returns:
        list: IncomeStatement records, most recent period first
    """
    return fetch_many(v3_url(f'/income-statement/{cik_or_symbol}'), IncomeStatement, params)


def get_income_statement_growth(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[IncomeStatementGrowth]:
    """
    Get period-over-period growth of each income statement line

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')

    Returns:
        list: IncomeStatementGrowth records
    """
    return fetch_many(v3_url(f'/income-statement-growth/{symbol}'), IncomeStatementGrowth, params)
