"""Get stock peers - same exchange, sector and similar market cap"""
from ..api import v4_url
from .._decode import fetch_one
from ..models import Peers


def get_peers(symbol: str) -> Peers:
    """
    Get peer companies

    Args:
        symbol: Stock ticker

    Returns:
        Peers: symbol, peers (list of tickers)
    """
    return fetch_one(v4_url('/stock_peers'), Peers, {'symbol': symbol})
