from .price_target import (
    get_price_target_consensus, get_price_target_summary, get_price_targets,
    get_price_targets_by_analyst, get_price_targets_by_analyst_company,
    get_price_targets_rss_feed
)

__all__ = [
    'get_price_targets', 'get_price_target_consensus', 'get_price_target_summary',
    'get_price_targets_by_analyst', 'get_price_targets_by_analyst_company',
    'get_price_targets_rss_feed',
]
