"""
Key metrics, ratios, scores and enterprise value
"""
from typing import List, Optional

import pandas as pd
from pydantic import Field

from .base import FMPDate, FMPModel


# ============================================================================
# KEY METRICS
# ============================================================================

class KeyMetrics(FMPModel):
    """Company key metrics and valuation ratios for one period"""
    date: FMPDate = Field(None, description="Period end date")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    period: Optional[str] = Field(None, description="Period (Q1, Q2, Q3, Q4, FY)")
    calendar_year: Optional[str] = Field(None, description="Calendar year", alias="calendarYear")

    # Per share
    revenue_per_share: Optional[float] = Field(None, alias="revenuePerShare")
    net_income_per_share: Optional[float] = Field(None, alias="netIncomePerShare")
    operating_cash_flow_per_share: Optional[float] = Field(None, alias="operatingCashFlowPerShare")
    free_cash_flow_per_share: Optional[float] = Field(None, alias="freeCashFlowPerShare")
    cash_per_share: Optional[float] = Field(None, alias="cashPerShare")
    book_value_per_share: Optional[float] = Field(None, alias="bookValuePerShare")
    tangible_book_value_per_share: Optional[float] = Field(None, alias="tangibleBookValuePerShare")
    shareholders_equity_per_share: Optional[float] = Field(None, alias="shareholdersEquityPerShare")
    interest_debt_per_share: Optional[float] = Field(None, alias="interestDebtPerShare")

    # Valuation
    market_cap: Optional[float] = Field(None, description="Market capitalization", alias="marketCap")
    enterprise_value: Optional[float] = Field(None, description="Enterprise value", alias="enterpriseValue")
    pe_ratio: Optional[float] = Field(None, description="P/E", alias="peRatio")
    price_to_sales_ratio: Optional[float] = Field(None, description="P/S", alias="priceToSalesRatio")
    pocf_ratio: Optional[float] = Field(None, description="Price to operating cash flow", alias="pocfratio")
    pfcf_ratio: Optional[float] = Field(None, description="Price to free cash flow", alias="pfcfRatio")
    pb_ratio: Optional[float] = Field(None, description="P/B", alias="pbRatio")
    ptb_ratio: Optional[float] = Field(None, description="Price to tangible book", alias="ptbRatio")
    ev_to_sales: Optional[float] = Field(None, description="EV/Sales", alias="evToSales")
    enterprise_value_over_ebitda: Optional[float] = Field(None, description="EV/EBITDA", alias="enterpriseValueOverEBITDA")
    ev_to_operating_cash_flow: Optional[float] = Field(None, alias="evToOperatingCashFlow")
    ev_to_free_cash_flow: Optional[float] = Field(None, alias="evToFreeCashFlow")
    earnings_yield: Optional[float] = Field(None, alias="earningsYield")
    free_cash_flow_yield: Optional[float] = Field(None, alias="freeCashFlowYield")

    # Leverage and quality
    debt_to_equity: Optional[float] = Field(None, alias="debtToEquity")
    debt_to_assets: Optional[float] = Field(None, alias="debtToAssets")
    net_debt_to_ebitda: Optional[float] = Field(None, alias="netDebtToEBITDA")
    current_ratio: Optional[float] = Field(None, alias="currentRatio")
    interest_coverage: Optional[float] = Field(None, alias="interestCoverage")
    income_quality: Optional[float] = Field(None, alias="incomeQuality")
    dividend_yield: Optional[float] = Field(None, alias="dividendYield")
    payout_ratio: Optional[float] = Field(None, alias="payoutRatio")
    sales_general_and_administrative_to_revenue: Optional[float] = Field(None, alias="salesGeneralAndAdministrativeToRevenue")
    research_and_ddevelopement_to_revenue: Optional[float] = Field(None, alias="researchAndDdevelopementToRevenue")
    intangibles_to_total_assets: Optional[float] = Field(None, alias="intangiblesToTotalAssets")
    capex_to_operating_cash_flow: Optional[float] = Field(None, alias="capexToOperatingCashFlow")
    capex_to_revenue: Optional[float] = Field(None, alias="capexToRevenue")
    capex_to_depreciation: Optional[float] = Field(None, alias="capexToDepreciation")
    stock_based_compensation_to_revenue: Optional[float] = Field(None, alias="stockBasedCompensationToRevenue")
    graham_number: Optional[float] = Field(None, alias="grahamNumber")
    roic: Optional[float] = Field(None, description="Return on invested capital")
    return_on_tangible_assets: Optional[float] = Field(None, alias="returnOnTangibleAssets")
    graham_net_net: Optional[float] = Field(None, alias="grahamNetNet")

    # Working capital
    working_capital: Optional[float] = Field(None, alias="workingCapital")
    tangible_asset_value: Optional[float] = Field(None, alias="tangibleAssetValue")
    net_current_asset_value: Optional[float] = Field(None, alias="netCurrentAssetValue")
    invested_capital: Optional[float] = Field(None, alias="investedCapital")
    average_receivables: Optional[float] = Field(None, alias="averageReceivables")
    average_payables: Optional[float] = Field(None, alias="averagePayables")
    average_inventory: Optional[float] = Field(None, alias="averageInventory")
    days_sales_outstanding: Optional[float] = Field(None, alias="daysSalesOutstanding")
    days_payables_outstanding: Optional[float] = Field(None, alias="daysPayablesOutstanding")
    days_of_inventory_on_hand: Optional[float] = Field(None, alias="daysOfInventoryOnHand")
    receivables_turnover: Optional[float] = Field(None, alias="receivablesTurnover")
    payables_turnover: Optional[float] = Field(None, alias="payablesTurnover")
    inventory_turnover: Optional[float] = Field(None, alias="inventoryTurnover")
    roe: Optional[float] = Field(None, description="Return on equity")
    capex_per_share: Optional[float] = Field(None, alias="capexPerShare")

    @classmethod
    def list_to_df(cls, metrics: List['KeyMetrics']) -> pd.DataFrame:
        """Summarize key metrics as a DataFrame, one row per period"""
        return pd.DataFrame([
            {
                "date": m.date,
                "period": m.period or "FY",
                "market_cap": m.market_cap,
                "pe_ratio": m.pe_ratio,
                "pb_ratio": m.pb_ratio,
                "roe": m.roe,
                "roic": m.roic,
                "debt_to_equity": m.debt_to_equity,
                "fcf_yield": m.free_cash_flow_yield,
                "dividend_yield": m.dividend_yield,
            }
            for m in metrics
        ])


class KeyMetricsTTM(FMPModel):
    """Trailing-twelve-month key metrics (upstream keys end in TTM)"""
    revenue_per_share: Optional[float] = Field(None, alias="revenuePerShareTTM")
    net_income_per_share: Optional[float] = Field(None, alias="netIncomePerShareTTM")
    operating_cash_flow_per_share: Optional[float] = Field(None, alias="operatingCashFlowPerShareTTM")
    free_cash_flow_per_share: Optional[float] = Field(None, alias="freeCashFlowPerShareTTM")
    cash_per_share: Optional[float] = Field(None, alias="cashPerShareTTM")
    book_value_per_share: Optional[float] = Field(None, alias="bookValuePerShareTTM")
    market_cap: Optional[float] = Field(None, alias="marketCapTTM")
    enterprise_value: Optional[float] = Field(None, alias="enterpriseValueTTM")
    pe_ratio: Optional[float] = Field(None, alias="peRatioTTM")
    price_to_sales_ratio: Optional[float] = Field(None, alias="priceToSalesRatioTTM")
    pb_ratio: Optional[float] = Field(None, alias="pbRatioTTM")
    enterprise_value_over_ebitda: Optional[float] = Field(None, alias="enterpriseValueOverEBITDATTM")
    earnings_yield: Optional[float] = Field(None, alias="earningsYieldTTM")
    free_cash_flow_yield: Optional[float] = Field(None, alias="freeCashFlowYieldTTM")
    debt_to_equity: Optional[float] = Field(None, alias="debtToEquityTTM")
    current_ratio: Optional[float] = Field(None, alias="currentRatioTTM")
    dividend_yield: Optional[float] = Field(None, alias="dividendYieldTTM")
    payout_ratio: Optional[float] = Field(None, alias="payoutRatioTTM")
    roe: Optional[float] = Field(None, alias="roeTTM")
    roic: Optional[float] = Field(None, alias="roicTTM")
    dividend_per_share: Optional[float] = Field(None, alias="dividendPerShareTTM")


# ============================================================================
# RATIOS
# ============================================================================

class FinancialRatios(FMPModel):
    """Financial ratios for one period"""
    date: FMPDate = Field(None, description="Period end date")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    period: Optional[str] = Field(None, description="Period (Q1, Q2, Q3, Q4, FY)")

    # Liquidity
    current_ratio: Optional[float] = Field(None, alias="currentRatio")
    quick_ratio: Optional[float] = Field(None, alias="quickRatio")
    cash_ratio: Optional[float] = Field(None, alias="cashRatio")
    days_of_sales_outstanding: Optional[float] = Field(None, alias="daysOfSalesOutstanding")
    days_of_inventory_outstanding: Optional[float] = Field(None, alias="daysOfInventoryOutstanding")
    operating_cycle: Optional[float] = Field(None, alias="operatingCycle")
    days_of_payables_outstanding: Optional[float] = Field(None, alias="daysOfPayablesOutstanding")
    cash_conversion_cycle: Optional[float] = Field(None, alias="cashConversionCycle")

    # Profitability
    gross_profit_margin: Optional[float] = Field(None, alias="grossProfitMargin")
    operating_profit_margin: Optional[float] = Field(None, alias="operatingProfitMargin")
    pretax_profit_margin: Optional[float] = Field(None, alias="pretaxProfitMargin")
    net_profit_margin: Optional[float] = Field(None, alias="netProfitMargin")
    effective_tax_rate: Optional[float] = Field(None, alias="effectiveTaxRate")
    return_on_assets: Optional[float] = Field(None, alias="returnOnAssets")
    return_on_equity: Optional[float] = Field(None, alias="returnOnEquity")
    return_on_capital_employed: Optional[float] = Field(None, alias="returnOnCapitalEmployed")
    net_income_per_ebt: Optional[float] = Field(None, alias="netIncomePerEBT")
    ebt_per_ebit: Optional[float] = Field(None, alias="ebtPerEbit")
    ebit_per_revenue: Optional[float] = Field(None, alias="ebitPerRevenue")

    # Leverage
    debt_ratio: Optional[float] = Field(None, alias="debtRatio")
    debt_equity_ratio: Optional[float] = Field(None, alias="debtEquityRatio")
    long_term_debt_to_capitalization: Optional[float] = Field(None, alias="longTermDebtToCapitalization")
    total_debt_to_capitalization: Optional[float] = Field(None, alias="totalDebtToCapitalization")
    interest_coverage: Optional[float] = Field(None, alias="interestCoverage")
    cash_flow_to_debt_ratio: Optional[float] = Field(None, alias="cashFlowToDebtRatio")
    company_equity_multiplier: Optional[float] = Field(None, alias="companyEquityMultiplier")

    # Efficiency
    receivables_turnover: Optional[float] = Field(None, alias="receivablesTurnover")
    payables_turnover: Optional[float] = Field(None, alias="payablesTurnover")
    inventory_turnover: Optional[float] = Field(None, alias="inventoryTurnover")
    fixed_asset_turnover: Optional[float] = Field(None, alias="fixedAssetTurnover")
    asset_turnover: Optional[float] = Field(None, alias="assetTurnover")

    # Cash flow
    operating_cash_flow_per_share: Optional[float] = Field(None, alias="operatingCashFlowPerShare")
    free_cash_flow_per_share: Optional[float] = Field(None, alias="freeCashFlowPerShare")
    cash_per_share: Optional[float] = Field(None, alias="cashPerShare")
    payout_ratio: Optional[float] = Field(None, alias="payoutRatio")
    operating_cash_flow_sales_ratio: Optional[float] = Field(None, alias="operatingCashFlowSalesRatio")
    free_cash_flow_operating_cash_flow_ratio: Optional[float] = Field(None, alias="freeCashFlowOperatingCashFlowRatio")
    cash_flow_coverage_ratios: Optional[float] = Field(None, alias="cashFlowCoverageRatios")
    short_term_coverage_ratios: Optional[float] = Field(None, alias="shortTermCoverageRatios")
    capital_expenditure_coverage_ratio: Optional[float] = Field(None, alias="capitalExpenditureCoverageRatio")
    dividend_paid_and_capex_coverage_ratio: Optional[float] = Field(None, alias="dividendPaidAndCapexCoverageRatio")
    dividend_payout_ratio: Optional[float] = Field(None, alias="dividendPayoutRatio")

    # Market
    price_book_value_ratio: Optional[float] = Field(None, alias="priceBookValueRatio")
    price_to_book_ratio: Optional[float] = Field(None, alias="priceToBookRatio")
    price_to_sales_ratio: Optional[float] = Field(None, alias="priceToSalesRatio")
    price_earnings_ratio: Optional[float] = Field(None, alias="priceEarningsRatio")
    price_to_free_cash_flows_ratio: Optional[float] = Field(None, alias="priceToFreeCashFlowsRatio")
    price_to_operating_cash_flows_ratio: Optional[float] = Field(None, alias="priceToOperatingCashFlowsRatio")
    price_cash_flow_ratio: Optional[float] = Field(None, alias="priceCashFlowRatio")
    price_earnings_to_growth_ratio: Optional[float] = Field(None, alias="priceEarningsToGrowthRatio")
    price_sales_ratio: Optional[float] = Field(None, alias="priceSalesRatio")
    dividend_yield: Optional[float] = Field(None, alias="dividendYield")
    enterprise_value_multiple: Optional[float] = Field(None, alias="enterpriseValueMultiple")
    price_fair_value: Optional[float] = Field(None, alias="priceFairValue")

    @classmethod
    def list_to_df(cls, ratios: List['FinancialRatios']) -> pd.DataFrame:
        """Summarize ratios as a DataFrame, one row per period"""
        return pd.DataFrame([
            {
                "date": r.date,
                "period": r.period or "FY",
                "current_ratio": r.current_ratio,
                "quick_ratio": r.quick_ratio,
                "gross_margin": r.gross_profit_margin,
                "net_margin": r.net_profit_margin,
                "roe": r.return_on_equity,
                "debt_equity": r.debt_equity_ratio,
                "pe_ratio": r.price_earnings_ratio,
            }
            for r in ratios
        ])


# ============================================================================
# SCORES & ENTERPRISE VALUE
# ============================================================================

class FinancialScores(FMPModel):
    """Altman Z-score and Piotroski score with their inputs"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    altman_z_score: Optional[float] = Field(None, description="Altman Z-score", alias="altmanZScore")
    piotroski_score: Optional[int] = Field(None, description="Piotroski F-score (0-9)", alias="piotroskiScore")
    working_capital: Optional[float] = Field(None, alias="workingCapital")
    total_assets: Optional[float] = Field(None, alias="totalAssets")
    retained_earnings: Optional[float] = Field(None, alias="retainedEarnings")
    ebit: Optional[float] = Field(None)
    market_cap: Optional[float] = Field(None, alias="marketCap")
    total_liabilities: Optional[float] = Field(None, alias="totalLiabilities")
    revenue: Optional[float] = Field(None)


class EnterpriseValue(FMPModel):
    """Enterprise value bridge for one period"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: FMPDate = Field(None, description="Period end date")
    stock_price: Optional[float] = Field(None, description="Share price", alias="stockPrice")
    number_of_shares: Optional[float] = Field(None, description="Shares outstanding", alias="numberOfShares")
    market_capitalization: Optional[float] = Field(None, description="Market cap", alias="marketCapitalization")
    minus_cash_and_cash_equivalents: Optional[float] = Field(None, description="Cash subtracted", alias="minusCashAndCashEquivalents")
    add_total_debt: Optional[float] = Field(None, description="Debt added", alias="addTotalDebt")
    enterprise_value: Optional[float] = Field(None, description="Enterprise value", alias="enterpriseValue")
