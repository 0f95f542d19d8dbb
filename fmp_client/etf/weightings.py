"""Get ETF country and sector weightings"""
from typing import List

from ..api import v3_url
from .._decode import fetch_many
from ..models import ETFCountryWeight, ETFSectorWeight


def get_etf_country_weightings(symbol: str) -> List[ETFCountryWeight]:
    """Get ETF weight per country"""
    return fetch_many(v3_url(f'/etf-country-weightings/{symbol}'), ETFCountryWeight)


def get_etf_sector_weightings(symbol: str) -> List[ETFSectorWeight]:
    """Get ETF weight per sector"""
    return fetch_many(v3_url(f'/etf-sector-weightings/{symbol}'), ETFSectorWeight)
