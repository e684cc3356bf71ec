from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import MissingField, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise MissingField(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_positive_amount(value: Any, field_name: str) -> float:
    if value is None or value == "":
        raise MissingField(f"{field_name} is required")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return amount


def optional_rate(value: Any, field_name: str = "hourlyRate") -> float | None:
    if value is None or value == "":
        return None
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if rate < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return rate
