from .holdings import get_etf_holdings, get_etf_stock_exposure
from .info import get_etf
from .weightings import get_etf_country_weightings, get_etf_sector_weightings

__all__ = [
    'get_etf', 'get_etf_holdings', 'get_etf_stock_exposure',
    'get_etf_country_weightings', 'get_etf_sector_weightings',
]
