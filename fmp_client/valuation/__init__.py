from .discounted_cash_flow import (
    get_advanced_discounted_cash_flow, get_advanced_levered_discounted_cash_flow,
    get_discounted_cash_flow, get_historical_daily_discounted_cash_flow,
    get_historical_discounted_cash_flow
)
from .rating import get_historical_rating, get_rating

__all__ = [
    'get_discounted_cash_flow', 'get_historical_discounted_cash_flow',
    'get_historical_daily_discounted_cash_flow', 'get_advanced_discounted_cash_flow',
    'get_advanced_levered_discounted_cash_flow', 'get_rating', 'get_historical_rating',
]
