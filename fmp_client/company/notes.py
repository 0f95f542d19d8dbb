"""Get company notes (debt securities)"""
from typing import List

from ..api import v4_url
from .._decode import fetch_many
from ..models import CompanyNote


def get_company_notes(symbol: str) -> List[CompanyNote]:
    """
    Get notes issued by a company

    Args:
        symbol: Stock ticker

    Returns:
        list: CompanyNote records (title, exchange)
    """
    return fetch_many(v4_url('/company-notes'), CompanyNote, {'symbol': symbol})
