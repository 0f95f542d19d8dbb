"""Get SEC filings of a company"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import SECFiling


def get_sec_filings(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[SECFiling]:
    """
    Get SEC filings

    Args:
        symbol: Stock ticker
        params: Optional filters ('type': '10-K', 'page')

    Returns:
        list: SECFiling records (type, filling_date, link, final_link)
    """
    return fetch_many(v3_url(f'/sec_filings/{symbol}'), SECFiling, params)
