"""
ETF records: descriptor, holdings, exposure and weightings
"""
from typing import List, Optional

from pydantic import Field

from .base import FMPDate, FMPModel


class ETFSector(FMPModel):
    """Sector exposure embedded in the ETF descriptor"""
    industry: Optional[str] = Field(None, description="Sector name")
    exposure: Optional[float] = Field(None, description="Exposure in percent")


class ETF(FMPModel):
    """ETF descriptor"""
    symbol: Optional[str] = Field(None, description="ETF ticker symbol")
    name: Optional[str] = Field(None, description="Fund name")
    asset_class: Optional[str] = Field(None, description="Asset class", alias="assetClass")
    aum: Optional[float] = Field(None, description="Assets under management")
    avg_volume: Optional[float] = Field(None, description="Average volume", alias="avgVolume")
    cusip: Optional[str] = Field(None, description="CUSIP")
    isin: Optional[str] = Field(None, description="ISIN")
    description: Optional[str] = Field(None, description="Fund description")
    domicile: Optional[str] = Field(None, description="Domicile country")
    etf_company: Optional[str] = Field(None, description="Issuer", alias="etfCompany")
    expense_ratio: Optional[float] = Field(None, description="Expense ratio", alias="expenseRatio")
    inception_date: FMPDate = Field(None, description="Inception date", alias="inceptionDate")
    nav: Optional[float] = Field(None, description="Net asset value")
    nav_currency: Optional[str] = Field(None, description="NAV currency", alias="navCurrency")
    sectors_list: Optional[List[ETFSector]] = Field(None, description="Sector exposures", alias="sectorsList")
    website: Optional[str] = Field(None, description="Fund website")
    holdings_count: Optional[int] = Field(None, description="Number of holdings", alias="holdingsCount")


class ETFHolding(FMPModel):
    """One position held by an ETF"""
    asset: Optional[str] = Field(None, description="Holding ticker")
    name: Optional[str] = Field(None, description="Holding name")
    isin: Optional[str] = Field(None, description="ISIN")
    cusip: Optional[str] = Field(None, description="CUSIP")
    shares_number: Optional[float] = Field(None, description="Shares held", alias="sharesNumber")
    weight_percentage: Optional[float] = Field(None, description="Portfolio weight in percent", alias="weightPercentage")
    market_value: Optional[float] = Field(None, description="Position value", alias="marketValue")
    updated: FMPDate = Field(None, description="Holdings as-of date")


class ETFExposure(FMPModel):
    """An ETF that holds a given stock"""
    etf_symbol: Optional[str] = Field(None, description="ETF ticker", alias="etfSymbol")
    asset_exposure: Optional[str] = Field(None, description="Stock ticker", alias="assetExposure")
    shares_number: Optional[float] = Field(None, description="Shares held", alias="sharesNumber")
    weight_percentage: Optional[float] = Field(None, description="Weight in the ETF", alias="weightPercentage")
    market_value: Optional[float] = Field(None, description="Position value", alias="marketValue")


class ETFCountryWeight(FMPModel):
    country: Optional[str] = None
    weight_percentage: Optional[str] = Field(None, description="Weight as sent, e.g. '98.87%'", alias="weightPercentage")


class ETFSectorWeight(FMPModel):
    sector: Optional[str] = None
    weight_percentage: Optional[str] = Field(None, description="Weight as sent, e.g. '27.89%'", alias="weightPercentage")
