"""Argument guards shared by the interning and rounding helpers."""

from decimal import Decimal
from typing import Any

from bigdecimals.exceptions import InvalidArgumentError


def require_not_none(value: Any, field_name: str = "value") -> Any:
    """Return ``value`` unchanged, or raise if it is missing."""
    if value is None:
        raise InvalidArgumentError(f"{field_name} must not be None", parameter=field_name)
    return value


def require_str(value: Any, field_name: str = "value") -> str:
    """Validate that ``value`` is a string."""
    require_not_none(value, field_name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{field_name} must be str, got {type(value).__name__}",
            parameter=field_name,
            value=value,
        )
    return value


def require_decimal(value: Any, field_name: str = "value") -> Decimal:
    """Validate that ``value`` is a finite Decimal.

    NaN and infinities have no scale, so they are rejected as arguments.
    """
    require_not_none(value, field_name)
    if not isinstance(value, Decimal):
        raise InvalidArgumentError(
            f"{field_name} must be Decimal, got {type(value).__name__}",
            parameter=field_name,
            value=value,
        )
    if not value.is_finite():
        raise InvalidArgumentError(
            f"{field_name} must be a finite Decimal, got {value}",
            parameter=field_name,
            value=value,
        )
    return value


def require_int(value: Any, field_name: str = "value") -> int:
    """Validate that ``value`` is an int (bool is rejected)."""
    require_not_none(value, field_name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{field_name} must be int, got {type(value).__name__}",
            parameter=field_name,
            value=value,
        )
    return value
