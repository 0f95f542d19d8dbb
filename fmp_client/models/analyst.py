"""
Analyst price target records
"""
from typing import Optional

from pydantic import Field

from .base import FMPModel


class PriceTarget(FMPModel):
    """A single analyst price target, as published in the news"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    published_date: Optional[str] = Field(None, description="Publication timestamp", alias="publishedDate")
    news_url: Optional[str] = Field(None, description="Article URL", alias="newsURL")
    news_title: Optional[str] = Field(None, description="Article title", alias="newsTitle")
    analyst_name: Optional[str] = Field(None, description="Analyst", alias="analystName")
    analyst_company: Optional[str] = Field(None, description="Analyst's firm", alias="analystCompany")
    price_target: Optional[float] = Field(None, description="Price target", alias="priceTarget")
    adj_price_target: Optional[float] = Field(None, description="Split-adjusted price target", alias="adjPriceTarget")
    price_when_posted: Optional[float] = Field(None, description="Share price at publication", alias="priceWhenPosted")
    news_publisher: Optional[str] = Field(None, description="Publisher", alias="newsPublisher")
    news_base_url: Optional[str] = Field(None, description="Publisher domain", alias="newsBaseURL")


class PriceTargetConsensus(FMPModel):
    """Consensus of current analyst price targets"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    target_high: Optional[float] = Field(None, description="Highest target", alias="targetHigh")
    target_low: Optional[float] = Field(None, description="Lowest target", alias="targetLow")
    target_consensus: Optional[float] = Field(None, description="Mean target", alias="targetConsensus")
    target_median: Optional[float] = Field(None, description="Median target", alias="targetMedian")


class PriceTargetSummary(FMPModel):
    """Count and average of price targets over trailing windows"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    last_month: Optional[int] = Field(None, alias="lastMonth")
    last_month_avg_price_target: Optional[float] = Field(None, alias="lastMonthAvgPriceTarget")
    last_quarter: Optional[int] = Field(None, alias="lastQuarter")
    last_quarter_avg_price_target: Optional[float] = Field(None, alias="lastQuarterAvgPriceTarget")
    last_year: Optional[int] = Field(None, alias="lastYear")
    last_year_avg_price_target: Optional[float] = Field(None, alias="lastYearAvgPriceTarget")
    all_time: Optional[int] = Field(None, alias="allTime")
    all_time_avg_price_target: Optional[float] = Field(None, alias="allTimeAvgPriceTarget")
    publishers: Optional[str] = Field(None, description="JSON-encoded list of publishers")
