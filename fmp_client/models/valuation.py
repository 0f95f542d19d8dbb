"""
Discounted cash flow valuations and ratings
"""
from typing import Optional

from pydantic import Field

from .base import FMPDate, FMPModel


class DiscountedCashFlow(FMPModel):
    """DCF fair value estimate on a given date"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: FMPDate = Field(None, description="Valuation date")
    dcf: Optional[float] = Field(None, description="DCF value per share")
    stock_price: Optional[float] = Field(None, description="Share price (latest estimate)", alias="Stock Price")
    price: Optional[float] = Field(None, description="Share price (historical estimates)")


class AdvancedDiscountedCashFlow(FMPModel):
    """One projected year of FMP's unlevered or levered DCF model"""
    year: Optional[str] = Field(None, description="Projection year")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    revenue: Optional[float] = None
    revenue_percentage: Optional[float] = Field(None, alias="revenuePercentage")
    ebitda: Optional[float] = None
    ebitda_percentage: Optional[float] = Field(None, alias="ebitdaPercentage")
    ebit: Optional[float] = None
    ebit_percentage: Optional[float] = Field(None, alias="ebitPercentage")
    depreciation: Optional[float] = None
    capital_expenditure: Optional[float] = Field(None, alias="capitalExpenditure")
    operating_cash_flow: Optional[float] = Field(None, alias="operatingCashFlow")
    free_cash_flow: Optional[float] = Field(None, description="Levered model only", alias="freeCashFlow")
    price: Optional[float] = None
    beta: Optional[float] = None
    diluted_shares_outstanding: Optional[float] = Field(None, alias="dilutedSharesOutstanding")
    cost_of_debt: Optional[float] = Field(None, alias="costofDebt")
    tax_rate: Optional[float] = Field(None, alias="taxRate")
    after_tax_cost_of_debt: Optional[float] = Field(None, alias="afterTaxCostOfDebt")
    risk_free_rate: Optional[float] = Field(None, alias="riskFreeRate")
    market_risk_premium: Optional[float] = Field(None, alias="marketRiskPremium")
    cost_of_equity: Optional[float] = Field(None, alias="costOfEquity")
    total_debt: Optional[float] = Field(None, alias="totalDebt")
    total_equity: Optional[float] = Field(None, alias="totalEquity")
    total_capital: Optional[float] = Field(None, alias="totalCapital")
    debt_weighting: Optional[float] = Field(None, alias="debtWeighting")
    equity_weighting: Optional[float] = Field(None, alias="equityWeighting")
    wacc: Optional[float] = Field(None, description="Weighted average cost of capital")
    ufcf: Optional[float] = Field(None, description="Unlevered free cash flow")
    sum_pv_ufcf: Optional[float] = Field(None, alias="sumPvUfcf")
    long_term_growth_rate: Optional[float] = Field(None, alias="longTermGrowthRate")
    terminal_value: Optional[float] = Field(None, alias="terminalValue")
    present_terminal_value: Optional[float] = Field(None, alias="presentTerminalValue")
    enterprise_value: Optional[float] = Field(None, alias="enterpriseValue")
    net_debt: Optional[float] = Field(None, alias="netDebt")
    equity_value: Optional[float] = Field(None, alias="equityValue")
    equity_value_per_share: Optional[float] = Field(None, alias="equityValuePerShare")


class Rating(FMPModel):
    """FMP rating built from DCF, ROE, ROA, D/E, P/E and P/B sub-scores"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: FMPDate = Field(None, description="Rating date")
    rating: Optional[str] = Field(None, description="Letter rating (e.g. 'S', 'A+', 'B-')")
    rating_score: Optional[int] = Field(None, description="Overall score (1-5)", alias="ratingScore")
    rating_recommendation: Optional[str] = Field(None, alias="ratingRecommendation")
    rating_details_dcf_score: Optional[int] = Field(None, alias="ratingDetailsDCFScore")
    rating_details_dcf_recommendation: Optional[str] = Field(None, alias="ratingDetailsDCFRecommendation")
    rating_details_roe_score: Optional[int] = Field(None, alias="ratingDetailsROEScore")
    rating_details_roe_recommendation: Optional[str] = Field(None, alias="ratingDetailsROERecommendation")
    rating_details_roa_score: Optional[int] = Field(None, alias="ratingDetailsROAScore")
    rating_details_roa_recommendation: Optional[str] = Field(None, alias="ratingDetailsROARecommendation")
    rating_details_de_score: Optional[int] = Field(None, alias="ratingDetailsDEScore")
    rating_details_de_recommendation: Optional[str] = Field(None, alias="ratingDetailsDERecommendation")
    rating_details_pe_score: Optional[int] = Field(None, alias="ratingDetailsPEScore")
    rating_details_pe_recommendation: Optional[str] = Field(None, alias="ratingDetailsPERecommendation")
    rating_details_pb_score: Optional[int] = Field(None, alias="ratingDetailsPBScore")
    rating_details_pb_recommendation: Optional[str] = Field(None, alias="ratingDetailsPBRecommendation")
