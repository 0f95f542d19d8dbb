"""Get company profile - name, sector, market cap, description, CEO, website"""
from ..api import v3_url
from .._decode import fetch_one
from ..models import CompanyProfile


def get_profile(symbol: str) -> CompanyProfile:
    """
    Get company profile

    Args:
        symbol: Stock ticker (e.g., 'AAPL')

    Returns:
        CompanyProfile: company_name, market_cap, sector, industry, description, ceo, ipo_date

    Raises:
        NotFoundError: Unknown symbol
    """
    return fetch_one(v3_url(f'/profile/{symbol}'), CompanyProfile)
