"""
Revenue segmentation records (by product or by geography)
"""
from typing import List, Optional

from pydantic import Field

from .base import FMPModel


class SegmentItem(FMPModel):
    name: str = Field(description="Product line or region")
    value: Optional[float] = Field(None, description="Revenue")


class RevenueSegment(FMPModel):
    """Revenue split for one fiscal period end"""
    date: str = Field(description="Fiscal period end, as sent (YYYY-MM-DD)")
    items: List[SegmentItem] = Field(default_factory=list, description="Segments in upstream order")
