"""Shared utilities."""

from bigdecimals.utils.logging import JSONFormatter, TextFormatter, get_logger, setup_logging
from bigdecimals.utils.validation import (
    require_decimal,
    require_int,
    require_not_none,
    require_str,
)

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "get_logger",
    "require_decimal",
    "require_int",
    "require_not_none",
    "require_str",
    "setup_logging",
]
