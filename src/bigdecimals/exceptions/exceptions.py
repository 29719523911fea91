"""Specific exception classes.

Each concrete error also derives from the built-in exception a caller would
expect from plain ``decimal`` code, so ``except TypeError`` or
``except decimal.InvalidOperation`` keeps working.
"""

from __future__ import annotations

from decimal import InvalidOperation
from typing import Any

from bigdecimals.exceptions.base import BigDecimalsError
from bigdecimals.exceptions.codes import ErrorCode


class InvalidArgumentError(BigDecimalsError, TypeError):
    """Exception for missing or wrongly typed arguments."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", {})
        if parameter:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = repr(value)

        super().__init__(
            message, error_code=ErrorCode.INVALID_ARGUMENT, context=context, **kwargs
        )


class NumberFormatError(BigDecimalsError, InvalidOperation):
    """Exception for strings that are not valid finite decimal literals."""

    def __init__(self, text: str, reason: str = "invalid decimal literal", **kwargs: Any) -> None:
        self.text = text
        context = kwargs.pop("context", {})
        context["text"] = text

        super().__init__(
            f"Cannot parse {text!r} as a decimal: {reason}",
            error_code=ErrorCode.NUMBER_FORMAT,
            context=context,
            **kwargs,
        )


class PrecisionLossError(BigDecimalsError, ArithmeticError):
    """Exception for a rescale that would discard non-zero digits."""

    def __init__(self, value: Any, new_scale: int, **kwargs: Any) -> None:
        self.value = value
        self.new_scale = new_scale
        context = kwargs.pop("context", {})
        context.update({"value": str(value), "new_scale": new_scale})

        super().__init__(
            f"Rounding necessary: {value} cannot be rescaled to scale {new_scale} exactly",
            error_code=ErrorCode.PRECISION_LOSS,
            context=context,
            **kwargs,
        )


class ConfigurationError(BigDecimalsError, ValueError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", {})
        if parameter:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = value

        super().__init__(message, error_code=ErrorCode.INVALID_CONFIG, context=context, **kwargs)
