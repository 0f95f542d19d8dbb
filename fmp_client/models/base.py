"""
Shared base for FMP record models
"""
from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def parse_fmp_date(value: Any) -> Optional[date]:
    """
    Parse an FMP calendar date (YYYY-MM-DD).

    None and "" mean the upstream has no value. Anything else that is not a
    valid calendar date in that exact format is rejected.
    """
    if value is None or value == "":
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str) or len(value) != 10:
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


FMPDate = Annotated[Optional[date], BeforeValidator(parse_fmp_date)]


class FMPModel(BaseModel):
    """Immutable record decoded from an FMP response; unknown keys are ignored"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)
