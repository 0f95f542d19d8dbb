"""Get enterprise value - market cap, cash, debt bridge"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import EnterpriseValue


def get_enterprise_values(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[EnterpriseValue]:
    """
    Get enterprise value per period

    Args:
        symbol: Stock ticker
        params: Optional filters ('period', 'limit')

    Returns:
        list: EnterpriseValue records
    """
    return fetch_many(v3_url(f'/enterprise-values/{symbol}'), EnterpriseValue, params)
