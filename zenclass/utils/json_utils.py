"""JSON serialization utilities for MongoDB ObjectId handling"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from bson import ObjectId


def format_utc_datetime(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2020-10-20T00:00:00.000Z"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def serialize_objectid(obj: Any) -> Any:
    """Convert ObjectId and datetime objects to JSON serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return format_utc_datetime(obj)
    elif isinstance(obj, dict):
        return {key: serialize_objectid(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_objectid(item) for item in obj]
    return obj


def sanitize_mongo_document(doc: Union[Dict, List, None]) -> Union[Dict, List, None]:
    """Sanitize MongoDB document(s) for JSON serialization"""
    if doc is None:
        return None
    return serialize_objectid(doc)
