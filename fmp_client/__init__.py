"""
Financial Modeling Prep - Typed Client for Fundamentals, Valuation & Filings

MODULES & FUNCTIONS:

company.profile:        get_profile(symbol) -> CompanyProfile
company.executives:     get_key_executives(symbol) -> list
company.market_cap:     get_market_cap(symbol) -> MarketCap
                        get_historical_market_cap(symbol, params=None) -> list
company.peers:          get_peers(symbol) -> Peers
company.shares_float:   get_shares_float(symbol) -> SharesFloat
company.notes:          get_company_notes(symbol) -> list

financials.income_statement:  get_income_statements(cik_or_symbol, params=None)
                              get_income_statement_growth(symbol, params=None)
financials.balance_sheet:     get_balance_sheets(cik_or_symbol, params=None)
                              get_balance_sheet_growth(symbol, params=None)
financials.cash_flow:         get_cash_flow_statements(cik_or_symbol, params=None)
                              get_cash_flow_statement_growth(symbol, params=None)
financials.growth:            get_financial_growth(symbol, params=None)
financials.reports_dates:     get_financial_reports_dates(symbol)
financials.segmentation:      get_product_segmentation(symbol)  # Reshaped per period
                              get_geographic_segmentation(symbol)
financials.key_metrics:       get_key_metrics(symbol, params=None)
                              get_key_metrics_ttm(symbol, params=None) -> KeyMetricsTTM
financials.ratios:            get_financial_ratios(symbol, params=None)
financials.scores:            get_financial_scores(symbol) -> FinancialScores
financials.enterprise_value:  get_enterprise_values(symbol, params=None)

valuation.discounted_cash_flow: get_discounted_cash_flow(symbol) -> DiscountedCashFlow
                                get_historical_discounted_cash_flow(symbol, params=None)
                                get_historical_daily_discounted_cash_flow(symbol, params=None)
                                get_advanced_discounted_cash_flow(symbol)
                                get_advanced_levered_discounted_cash_flow(symbol)
valuation.rating:               get_rating(symbol) -> Rating
                                get_historical_rating(symbol, params=None)

analyst.price_target:   get_price_targets(symbol) -> list
                        get_price_target_consensus(symbol) -> PriceTargetConsensus
                        get_price_target_summary(symbol) -> PriceTargetSummary
                        get_price_targets_by_analyst(analyst_name) -> list
                        get_price_targets_by_analyst_company(company) -> list
                        get_price_targets_rss_feed(params=None) -> list

esg.esg:                get_esg_scores(symbol) -> list
                        get_esg_risk_ratings(symbol) -> list
                        get_esg_sector_benchmarks(year) -> list

symbols.symbols:        get_symbols() / get_tradable_symbols() / get_etfs() -> list

etf.info:               get_etf(symbol) -> ETF
etf.holdings:           get_etf_holdings(symbol) -> list
                        get_etf_stock_exposure(symbol) -> list
etf.weightings:         get_etf_country_weightings(symbol) -> list
                        get_etf_sector_weightings(symbol) -> list

filings.sec_filings:    get_sec_filings(symbol, params=None) -> list
filings.rss_feed:       get_rss_feed(params=None) -> list

transcripts.earnings_call: get_earnings_call_transcript_dates(symbol) -> list
                           get_earnings_call_transcripts(symbol, year) -> list
                           get_earnings_call_transcript(symbol, year, quarter)

api:                    fmp(endpoint, params=None)     # Raw v3 JSON
                        fmp_v4(endpoint, params=None)  # Raw v4 JSON

Singular endpoints raise NotFoundError when FMP has no data; plural endpoints
return an empty list. Every failure is an FMPError subclass (see errors.py).

EXAMPLES:
  from fmp_client import get_profile
  profile = get_profile('AAPL')
  profile.market_cap

  from fmp_client import get_income_statements
  from fmp_client.models import IncomeStatement
  statements = get_income_statements('AAPL', {'period': 'quarter', 'limit': 4})
  df = IncomeStatement.list_to_df(statements)
"""

from ._client import close_http_client, set_http_client
from .analyst import *  # noqa: F401,F403
from .api import fmp, fmp_v4
from .company import *  # noqa: F401,F403
from .config import Config
from .errors import (
    ConfigurationError, DecodeError, FMPError, InvalidSubscriptionError, NotFoundError,
    TransportError, UnexpectedStatusError, UpstreamError
)
from .esg import *  # noqa: F401,F403
from .etf import *  # noqa: F401,F403
from .filings import *  # noqa: F401,F403
from .financials import *  # noqa: F401,F403
from .symbols import *  # noqa: F401,F403
from .transcripts import *  # noqa: F401,F403
from .valuation import *  # noqa: F401,F403
from .utils.logger import configure_logging

from . import analyst, company, esg, etf, filings, financials, symbols, transcripts, valuation

__all__ = (
    ['fmp', 'fmp_v4', 'Config', 'configure_logging', 'set_http_client', 'close_http_client',
     'FMPError', 'ConfigurationError', 'TransportError', 'UnexpectedStatusError',
     'InvalidSubscriptionError', 'UpstreamError', 'NotFoundError', 'DecodeError']
    + company.__all__ + financials.__all__ + valuation.__all__ + analyst.__all__
    + esg.__all__ + symbols.__all__ + etf.__all__ + filings.__all__ + transcripts.__all__
)
