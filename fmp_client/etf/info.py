"""Get ETF information - issuer, AUM, expense ratio, sectors"""
from ..api import v4_url
from .._decode import fetch_one
from ..models import ETF


def get_etf(symbol: str) -> ETF:
    """
    Get ETF descriptor

    Args:
        symbol: ETF ticker (e.g., 'SPY')

    Returns:
        ETF: name, etf_company, aum, expense_ratio, inception_date, sectors_list
    """
    return fetch_one(v4_url('/etf-info'), ETF, {'symbol': symbol})
