from .executives import get_key_executives
from .market_cap import get_historical_market_cap, get_market_cap
from .notes import get_company_notes
from .peers import get_peers
from .profile import get_profile
from .shares_float import get_shares_float

__all__ = [
    'get_profile', 'get_key_executives', 'get_market_cap', 'get_historical_market_cap',
    'get_peers', 'get_shares_float', 'get_company_notes',
]
