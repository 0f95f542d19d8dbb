"""
Company records: profile, executives, market cap, peers, float, notes
"""
from typing import List, Optional

from pydantic import Field, field_validator

from .base import FMPDate, FMPModel


# ============================================================================
# COMPANY PROFILE & EXECUTIVES
# ============================================================================

class CompanyProfile(FMPModel):
    """Company profile and basic information"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    price: Optional[float] = Field(None, description="Current stock price")
    beta: Optional[float] = Field(None, description="Beta (volatility measure)")
    vol_avg: Optional[int] = Field(None, description="Average volume", alias="volAvg")
    market_cap: Optional[int] = Field(None, description="Market capitalization", alias="mktCap")
    last_div: Optional[float] = Field(None, description="Last dividend", alias="lastDiv")
    range: Optional[str] = Field(None, description="52-week range")
    changes: Optional[float] = Field(None, description="Price change")
    company_name: Optional[str] = Field(None, description="Company name", alias="companyName")
    currency: Optional[str] = Field(None, description="Trading currency")
    cik: Optional[str] = Field(None, description="CIK number")
    isin: Optional[str] = Field(None, description="ISIN")
    cusip: Optional[str] = Field(None, description="CUSIP")
    exchange: Optional[str] = Field(None, description="Stock exchange")
    exchange_short_name: Optional[str] = Field(None, description="Exchange short name", alias="exchangeShortName")
    industry: Optional[str] = Field(None, description="Industry")
    website: Optional[str] = Field(None, description="Company website")
    description: Optional[str] = Field(None, description="Company description")
    ceo: Optional[str] = Field(None, description="CEO name")
    sector: Optional[str] = Field(None, description="Sector")
    country: Optional[str] = Field(None, description="Country")
    full_time_employees: Optional[int] = Field(None, description="Number of employees", alias="fullTimeEmployees")
    phone: Optional[str] = Field(None, description="Phone number")
    address: Optional[str] = Field(None, description="Company address")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State")
    zip: Optional[str] = Field(None, description="ZIP code")
    dcf_diff: Optional[float] = Field(None, description="DCF difference", alias="dcfDiff")
    dcf: Optional[float] = Field(None, description="Discounted cash flow")
    image: Optional[str] = Field(None, description="Company logo URL")
    ipo_date: FMPDate = Field(None, description="IPO date", alias="ipoDate")
    default_image: Optional[bool] = Field(None, description="Logo is a placeholder", alias="defaultImage")
    is_etf: Optional[bool] = Field(None, description="Is ETF", alias="isEtf")
    is_actively_trading: Optional[bool] = Field(None, description="Is actively trading", alias="isActivelyTrading")
    is_adr: Optional[bool] = Field(None, description="Is ADR", alias="isAdr")
    is_fund: Optional[bool] = Field(None, description="Is fund", alias="isFund")

    @field_validator("full_time_employees", mode="before")
    @classmethod
    def _blank_employees(cls, value):
        # Sent as a string, "" when unknown
        if value == "":
            return None
        return value


class KeyExecutive(FMPModel):
    """Company executive"""
    title: Optional[str] = Field(None, description="Job title")
    name: Optional[str] = Field(None, description="Executive name")
    pay: Optional[float] = Field(None, description="Compensation")
    currency_pay: Optional[str] = Field(None, description="Pay currency", alias="currencyPay")
    gender: Optional[str] = Field(None, description="Gender")
    year_born: Optional[int] = Field(None, description="Birth year", alias="yearBorn")
    title_since: Optional[int] = Field(None, description="Title start (epoch ms)", alias="titleSince")


# ============================================================================
# MARKET CAP, PEERS, FLOAT
# ============================================================================

class MarketCap(FMPModel):
    """Market capitalization on a given day"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: FMPDate = Field(None, description="Date")
    market_cap: Optional[float] = Field(None, description="Market capitalization", alias="marketCap")


class Peers(FMPModel):
    """Peer group of a company (same exchange, sector and market cap range)"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    peers: Optional[List[str]] = Field(None, description="Peer ticker symbols", alias="peersList")


class SharesFloat(FMPModel):
    """Free float and outstanding shares"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: Optional[str] = Field(None, description="Timestamp of the figures")
    free_float: Optional[float] = Field(None, description="Free float percentage", alias="freeFloat")
    float_shares: Optional[float] = Field(None, description="Floating shares", alias="floatShares")
    outstanding_shares: Optional[float] = Field(None, description="Outstanding shares", alias="outstandingShares")
    source: Optional[str] = Field(None, description="Source filing URL")


class CompanyNote(FMPModel):
    """Note (debt security) issued by a company"""
    cik: Optional[str] = Field(None, description="CIK number")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    title: Optional[str] = Field(None, description="Note title")
    exchange: Optional[str] = Field(None, description="Exchange")
