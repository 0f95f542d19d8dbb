"""Get ESG data - scores, risk ratings, sector benchmarks"""
from typing import List

from ..api import v4_url
from .._decode import fetch_many
from ..models import ESGRiskRating, ESGScore, ESGSectorBenchmark


def get_esg_scores(symbol: str) -> List[ESGScore]:
    """
    Get ESG scores, one record per disclosure

    Args:
        symbol: Stock ticker

    Returns:
        list: ESGScore records (environmental_score, social_score, governance_score, esg_score)
    """
    return fetch_many(v4_url('/esg-environmental-social-governance-data'), ESGScore, {'symbol': symbol})


def get_esg_risk_ratings(symbol: str) -> List[ESGRiskRating]:
    """Get yearly ESG risk ratings"""
    return fetch_many(v4_url('/esg-environmental-social-governance-data-ratings'), ESGRiskRating, {'symbol': symbol})


def get_esg_sector_benchmarks(year: int) -> List[ESGSectorBenchmark]:
    """
    Get average ESG scores per sector

    Args:
        year: Benchmark year (e.g., 2023)
    """
    return fetch_many(v4_url('/esg-environmental-social-governance-sector-benchmark'), ESGSectorBenchmark, {'year': year})
