from .rss_feed import get_rss_feed
from .sec_filings import get_sec_filings

__all__ = ['get_sec_filings', 'get_rss_feed']
