"""
Symbol list entries
"""
from typing import Optional

from pydantic import Field

from .base import FMPModel


class Symbol(FMPModel):
    """A listed security (stock, ETF, fund, trust)"""
    symbol: Optional[str] = Field(None, description="Ticker symbol")
    name: Optional[str] = Field(None, description="Security name")
    price: Optional[float] = Field(None, description="Last price")
    exchange: Optional[str] = Field(None, description="Exchange")
    exchange_short_name: Optional[str] = Field(None, description="Exchange short name", alias="exchangeShortName")
    type: Optional[str] = Field(None, description="Security type (stock, etf, trust, fund)")
