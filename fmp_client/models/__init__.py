"""
Pydantic records for Financial Modeling Prep responses.

Field names are snake_case; each is aliased to the upstream JSON key, so
records can be built from raw payloads or by field name.
"""
from .analyst import PriceTarget, PriceTargetConsensus, PriceTargetSummary
from .base import FMPDate, FMPModel, parse_fmp_date
from .company import CompanyNote, CompanyProfile, KeyExecutive, MarketCap, Peers, SharesFloat
from .esg import ESGRiskRating, ESGScore, ESGSectorBenchmark
from .etf import ETF, ETFCountryWeight, ETFExposure, ETFHolding, ETFSector, ETFSectorWeight
from .filings import RSSFeedItem, SECFiling
from .metrics import EnterpriseValue, FinancialRatios, FinancialScores, KeyMetrics, KeyMetricsTTM
from .segmentation import RevenueSegment, SegmentItem
from .statements import (
    BalanceSheet, BalanceSheetGrowth, CashFlowStatement, CashFlowStatementGrowth,
    FinancialGrowth, FinancialReportDate, IncomeStatement, IncomeStatementGrowth
)
from .symbols import Symbol
from .transcripts import EarningsCallTranscript, TranscriptDate
from .valuation import AdvancedDiscountedCashFlow, DiscountedCashFlow, Rating

__all__ = [
    'FMPDate', 'FMPModel', 'parse_fmp_date',
    'CompanyProfile', 'KeyExecutive', 'MarketCap', 'Peers', 'SharesFloat', 'CompanyNote',
    'IncomeStatement', 'BalanceSheet', 'CashFlowStatement',
    'IncomeStatementGrowth', 'BalanceSheetGrowth', 'CashFlowStatementGrowth',
    'FinancialGrowth', 'FinancialReportDate',
    'KeyMetrics', 'KeyMetricsTTM', 'FinancialRatios', 'FinancialScores', 'EnterpriseValue',
    'DiscountedCashFlow', 'AdvancedDiscountedCashFlow', 'Rating',
    'PriceTarget', 'PriceTargetConsensus', 'PriceTargetSummary',
    'ESGScore', 'ESGRiskRating', 'ESGSectorBenchmark',
    'Symbol',
    'ETF', 'ETFSector', 'ETFHolding', 'ETFExposure', 'ETFCountryWeight', 'ETFSectorWeight',
    'SECFiling', 'RSSFeedItem',
    'TranscriptDate', 'EarningsCallTranscript',
    'RevenueSegment', 'SegmentItem',
]
