"""Get revenue segmentation - by product and by geography"""
from typing import List

from ..api import v4_url
from .._decode import fetch_segments
from ..models import RevenueSegment


def get_product_segmentation(symbol: str) -> List[RevenueSegment]:
    """
    Get revenue by product line, per fiscal period

    Args:
        symbol: Stock ticker

    Returns:
        list: RevenueSegment records; items hold (product name, revenue)
    """
    return fetch_segments(v4_url('/revenue-product-segmentation'), {'symbol': symbol, 'structure': 'flat'})


def get_geographic_segmentation(symbol: str) -> List[RevenueSegment]:
    """
    Get revenue by region, per fiscal period

    Args:
        symbol: Stock ticker

    Returns:
        list: RevenueSegment records; items hold (region name, revenue)
    """
    return fetch_segments(v4_url('/revenue-geographic-segmentation'), {'symbol': symbol, 'structure': 'flat'})
