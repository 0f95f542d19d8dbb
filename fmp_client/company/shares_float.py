"""Get shares float"""
from ..api import v4_url
from .._decode import fetch_one
from ..models import SharesFloat


def get_shares_float(symbol: str) -> SharesFloat:
    """
    Get free float and outstanding shares

    Args:
        symbol: Stock ticker

    Returns:
        SharesFloat: free_float, float_shares, outstanding_shares
    """
    return fetch_one(v4_url('/shares_float'), SharesFloat, {'symbol': symbol})
