"""Error codes for bigdecimals exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for error tracking."""

    # Argument errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Parsing errors
    NUMBER_FORMAT = "NUMBER_FORMAT"

    # Arithmetic errors
    PRECISION_LOSS = "PRECISION_LOSS"

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
