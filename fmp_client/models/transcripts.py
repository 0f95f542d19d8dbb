"""
Earnings call transcript records
"""
from typing import Optional

from pydantic import Field, model_validator

from .base import FMPModel


class TranscriptDate(FMPModel):
    """
    An available transcript, identified by fiscal quarter and year.

    The listing endpoint sends bare [quarter, year, datetime] rows instead of
    objects; both shapes are accepted.
    """
    quarter: Optional[int] = None
    year: Optional[int] = None
    date: Optional[str] = Field(None, description="Call timestamp")

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data):
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"expected [quarter, year, date], got {data!r}")
            quarter, year, date = data
            return {"quarter": quarter, "year": year, "date": date}
        return data


class EarningsCallTranscript(FMPModel):
    """Full text of one earnings call"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    quarter: Optional[int] = Field(None, description="Fiscal quarter")
    year: Optional[int] = Field(None, description="Fiscal year")
    date: Optional[str] = Field(None, description="Call timestamp")
    content: Optional[str] = Field(None, description="Transcript text")
