"""Get financial report dates - links to downloadable 10-K / 10-Q reports"""
from typing import List

from ..api import v4_url
from .._decode import fetch_many
from ..models import FinancialReportDate


def get_financial_reports_dates(symbol: str) -> List[FinancialReportDate]:
    """
    Get the fiscal periods with downloadable reports

    Args:
        symbol: Stock ticker

    Returns:
        list: FinancialReportDate records (date, period, link_xlsx, link_json)
    """
    return fetch_many(v4_url('/financial-reports-dates'), FinancialReportDate, {'symbol': symbol})
