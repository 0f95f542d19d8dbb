"""Get cash flow statement - operating, investing, financing"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import CashFlowStatement, CashFlowStatementGrowth


def get_cash_flow_statements(cik_or_symbol: str, params: Optional[Dict[str, Any]] = None) -> List[CashFlowStatement]:
    """
    Get cash flow statements

    Args:
        cik_or_symbol: Stock ticker or SEC CIK
        params: Optional filters ('period', 'limit')

    Returns:
        list: CashFlowStatement records
    """
    return fetch_many(v3_url(f'/cash-flow-statement/{cik_or_symbol}'), CashFlowStatement, params)


def get_cash_flow_statement_growth(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[CashFlowStatementGrowth]:
    """Get period-over-period growth of each cash flow line"""
    return fetch_many(v3_url(f'/cash-flow-statement-growth/{symbol}'), CashFlowStatementGrowth, params)
