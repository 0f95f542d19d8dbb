"""
Turn decoded JSON into records.

Singular endpoints answer with a one-element list: an empty list means
NotFoundError. Plural endpoints answer with zero or more elements: an empty
list is a valid, empty result.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import ValidationError

from ._client import fetch
from .errors import DecodeError, NotFoundError
from .models.base import FMPModel
from .models.segmentation import RevenueSegment, SegmentItem
from .utils.logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=FMPModel)


def _require_list(data: Any, model: Type[FMPModel]) -> list:
    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a list of {model.__name__} records, got {type(data).__name__}"
        )
    return data


def _validate(item: Any, model: Type[M], index: int) -> M:
    try:
        return model.model_validate(item)
    except ValidationError as e:
        raise DecodeError(f"Invalid {model.__name__} record at index {index}: {e}") from e


def decode_one(data: Any, model: Type[M]) -> M:
    """
    Decode the single record of a singular endpoint.

    Raises:
        NotFoundError: The list is empty
        DecodeError: Not a list, or the record does not fit the model
    """
    items = _require_list(data, model)
    if not items:
        raise NotFoundError(f"No {model.__name__} found")
    if len(items) > 1:
        logger.warning(
            f"Expected one {model.__name__} record, got {len(items)}; using the first"
        )
    return _validate(items[0], model, 0)


def decode_many(data: Any, model: Type[M]) -> List[M]:
    """
    Decode every record of a plural endpoint, keeping upstream order.

    Raises:
        DecodeError: Not a list, or a record does not fit the model
    """
    items = _require_list(data, model)
    return [_validate(item, model, idx) for idx, item in enumerate(items)]


def reshape_segments(data: Any) -> List[RevenueSegment]:
    """
    Reshape segmentation payloads into dated line items.

    The upstream sends one single-key object per period, keyed by the period
    end date:

        [{"2022-09-24": {"Mac": 40177000000, "iPhone": 205489000000}}]

    which becomes

        [RevenueSegment(date="2022-09-24", items=[
            SegmentItem(name="Mac", value=40177000000),
            SegmentItem(name="iPhone", value=205489000000)])]

    Raises:
        DecodeError: An element is not an object, has more than one date key,
            or maps its date to something other than an object
    """
    if not isinstance(data, list):
        raise DecodeError(f"Expected a list of segmentation objects, got {type(data).__name__}")

    segments = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict) or len(entry) != 1:
            raise DecodeError(
                f"Segmentation entry {idx} must be an object with exactly one date key, got {entry!r}"
            )
        (period, values), = entry.items()
        if not isinstance(values, dict):
            raise DecodeError(
                f"Segmentation entry {idx} ({period}) must map to an object, got {type(values).__name__}"
            )
        try:
            segments.append(RevenueSegment(
                date=str(period),
                items=[SegmentItem(name=str(name), value=value) for name, value in values.items()],
            ))
        except ValidationError as e:
            raise DecodeError(f"Invalid segmentation entry {idx} ({period}): {e}") from e
    return segments


def fetch_one(url: str, model: Type[M], params: Optional[Dict[str, Any]] = None) -> M:
    """Fetch a singular endpoint and decode its record"""
    return decode_one(fetch(url, params), model)


def fetch_many(url: str, model: Type[M], params: Optional[Dict[str, Any]] = None) -> List[M]:
    """Fetch a plural endpoint and decode its records"""
    return decode_many(fetch(url, params), model)


def fetch_segments(url: str, params: Optional[Dict[str, Any]] = None) -> List[RevenueSegment]:
    """Fetch a segmentation endpoint and reshape it"""
    return reshape_segments(fetch(url, params))
