"""Get key executives - title, name, pay"""
from typing import List

from ..api import v3_url
from .._decode import fetch_many
from ..models import KeyExecutive


def get_key_executives(symbol: str) -> List[KeyExecutive]:
    """
    Get key executives

    Args:
        symbol: Stock ticker (e.g., 'AAPL')

    Returns:
        list: KeyExecutive records (title, name, pay, currency_pay, year_born)
    """
    return fetch_many(v3_url(f'/key-executives/{symbol}'), KeyExecutive)
