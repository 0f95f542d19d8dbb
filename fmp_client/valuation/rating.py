"""Get FMP rating - overall letter grade and sub-scores"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many, fetch_one
from ..models import Rating


def get_rating(symbol: str) -> Rating:
    """
    Get the current rating

    Args:
        symbol: Stock ticker

    Returns:
        Rating: rating, rating_score, rating_recommendation and sub-scores
    """
    return fetch_one(v3_url(f'/rating/{symbol}'), Rating)


def get_historical_rating(symbol: str, params: Optional[Dict[str, Any]] = None) -> List[Rating]:
    """Get daily rating history ('limit' in params caps the number of days)"""
    return fetch_many(v3_url(f'/historical-rating/{symbol}'), Rating, params)
