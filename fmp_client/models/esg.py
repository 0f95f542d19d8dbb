"""
ESG (environmental, social, governance) records
"""
from typing import Optional

from pydantic import Field

from .base import FMPModel


class ESGScore(FMPModel):
    """ESG scores disclosed with one filing"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    cik: Optional[str] = Field(None, description="CIK number")
    company_name: Optional[str] = Field(None, alias="companyName")
    form_type: Optional[str] = Field(None, alias="formType")
    accepted_date: Optional[str] = Field(None, alias="acceptedDate")
    date: Optional[str] = Field(None, description="Filing date")
    environmental_score: Optional[float] = Field(None, alias="environmentalScore")
    social_score: Optional[float] = Field(None, alias="socialScore")
    governance_score: Optional[float] = Field(None, alias="governanceScore")
    esg_score: Optional[float] = Field(None, alias="ESGScore")
    url: Optional[str] = Field(None, description="Filing URL")


class ESGRiskRating(FMPModel):
    """Yearly ESG risk rating and industry rank"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    cik: Optional[str] = Field(None, description="CIK number")
    company_name: Optional[str] = Field(None, alias="companyName")
    industry: Optional[str] = None
    year: Optional[int] = None
    esg_risk_rating: Optional[str] = Field(None, description="Letter rating", alias="ESGRiskRating")
    industry_rank: Optional[str] = Field(None, description="e.g. '4 out of 5'", alias="industryRank")


class ESGSectorBenchmark(FMPModel):
    """Average ESG scores of a sector for one year"""
    year: Optional[int] = None
    sector: Optional[str] = None
    environmental_score: Optional[float] = Field(None, alias="environmentalScore")
    social_score: Optional[float] = Field(None, alias="socialScore")
    governance_score: Optional[float] = Field(None, alias="governanceScore")
    esg_score: Optional[float] = Field(None, alias="ESGScore")
