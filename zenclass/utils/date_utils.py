"""Date helpers - stored dates are naive UTC datetimes"""
from datetime import datetime, timezone
from typing import Optional, Tuple

from dateutil.parser import isoparse

from zenclass.config.settings import REPORT_WINDOW
from zenclass.exceptions.exceptions import ValidationError


def to_naive_utc(value: datetime) -> datetime:
    """Drop tzinfo after converting to UTC; naive values are taken as UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 string, raising ValidationError when it is not one"""
    try:
        return to_naive_utc(isoparse(value.strip()))
    except (ValueError, OverflowError, AttributeError):
        raise ValidationError("Invalid date format")


def resolve_date_range(start: Optional[str], end: Optional[str]) -> Tuple[datetime, datetime]:
    """Both bounds parsed, or the default report window when either is missing"""
    if not start or not end:
        return REPORT_WINDOW
    return parse_iso_datetime(start), parse_iso_datetime(end)


def is_in_month(value: Optional[datetime], month: int) -> bool:
    """Calendar month match, independent of year"""
    if not isinstance(value, datetime):
        return False
    return to_naive_utc(value).month == month
