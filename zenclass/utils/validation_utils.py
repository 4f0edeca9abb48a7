"""Security / validation utilities - DRY principle"""
from typing import Any

from bson import ObjectId

from zenclass.exceptions.exceptions import ValidationError


def validate_object_id(obj_id: Any, message: str = "Invalid ObjectId format") -> ObjectId:
    """Validate and return an ObjectId built from a 24-hex string"""
    if isinstance(obj_id, dict):
        raise ValidationError("ObjectId cannot be dict (NoSQL injection attempt)")
    if not isinstance(obj_id, str) or not ObjectId.is_valid(obj_id):
        raise ValidationError(message)
    return ObjectId(obj_id)
