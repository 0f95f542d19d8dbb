"""
SEC filing and RSS feed records
"""
from typing import Optional

from pydantic import Field

from .base import FMPModel


class SECFiling(FMPModel):
    """A filing listed for a company"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    filling_date: Optional[str] = Field(None, description="Filing timestamp", alias="fillingDate")
    accepted_date: Optional[str] = Field(None, description="Acceptance timestamp", alias="acceptedDate")
    cik: Optional[str] = Field(None, description="CIK number")
    type: Optional[str] = Field(None, description="Form type (10-K, 8-K, ...)")
    link: Optional[str] = Field(None, description="Filing index URL")
    final_link: Optional[str] = Field(None, description="Filing document URL", alias="finalLink")


class RSSFeedItem(FMPModel):
    """An entry of the SEC filings RSS feed"""
    title: Optional[str] = None
    date: Optional[str] = Field(None, description="Publication timestamp")
    link: Optional[str] = None
    cik: Optional[str] = None
    form_type: Optional[str] = None
    ticker: Optional[str] = None
    done: Optional[bool] = Field(None, description="Whether FMP has processed the filing")
