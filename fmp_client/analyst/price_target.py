"""Get analyst price targets and consensus"""
from typing import Any, Dict, List, Optional

from ..api import v4_url
from .._decode import fetch_many, fetch_one
from ..models import PriceTarget, PriceTargetConsensus, PriceTargetSummary


def get_price_targets(symbol: str) -> List[PriceTarget]:
    """
    Get individual analyst price targets

    Args:
        symbol: Stock ticker

    Returns:
        list: PriceTarget records (published_date, analyst_name, analyst_company,
              price_target, price_when_posted)
    """
    return fetch_many(v4_url('/price-target'), PriceTarget, {'symbol': symbol})


def get_price_target_consensus(symbol: str) -> PriceTargetConsensus:
    """
    Get consensus price target

    Args:
        symbol: Stock ticker

    Returns:
        PriceTargetConsensus: target_consensus, target_median, target_high, target_low
    """
    return fetch_one(v4_url('/price-target-consensus'), PriceTargetConsensus, {'symbol': symbol})


def get_price_target_summary(symbol: str) -> PriceTargetSummary:
    """Get price target counts and averages over the last month, quarter, year and all time"""
    return fetch_one(v4_url('/price-target-summary'), PriceTargetSummary, {'symbol': symbol})


def get_price_targets_by_analyst(analyst_name: str) -> List[PriceTarget]:
    """
    Get all price targets published by one analyst

    Args:
        analyst_name: Analyst name (e.g., 'Tim Anderson')
    """
    return fetch_many(v4_url('/price-target-analyst-name'), PriceTarget, {'name': analyst_name})


def get_price_targets_by_analyst_company(company: str) -> List[PriceTarget]:
    """
    Get all price targets published by one firm

    Args:
        company: Firm name (e.g., 'Barclays')
    """
    return fetch_many(v4_url('/price-target-analyst-company'), PriceTarget, {'company': company})


def get_price_targets_rss_feed(params: Optional[Dict[str, Any]] = None) -> List[PriceTarget]:
    """Get the latest price targets across all symbols ('page' in params selects the page)"""
    return fetch_many(v4_url('/price-target-rss-feed'), PriceTarget, params)
