from __future__ import annotations

from typing import Any, Optional

from flask import request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidTransition,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (InvalidTransition, 409),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def optional_int(value: Any, field_name: str) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def optional_date(value: Any):
    return parse_iso_date(value) if value else None
