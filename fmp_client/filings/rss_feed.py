"""Get the SEC filings RSS feed"""
from typing import Any, Dict, List, Optional

from ..api import v3_url
from .._decode import fetch_many
from ..models import RSSFeedItem


def get_rss_feed(params: Optional[Dict[str, Any]] = None) -> List[RSSFeedItem]:
    """
    Get the latest SEC filings across all companies

    Args:
        params: Optional filters ('limit', 'type', 'from', 'to', 'isDone')

    Returns:
        list: RSSFeedItem records
    """
    return fetch_many(v3_url('/rss_feed'), RSSFeedItem, params)
