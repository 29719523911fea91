"""Exception hierarchy with structured error codes.

All errors raised by bigdecimals derive from :class:`BigDecimalsError` and carry
an :class:`ErrorCode` plus context information.
"""

from bigdecimals.exceptions.base import BigDecimalsError
from bigdecimals.exceptions.codes import ErrorCode
from bigdecimals.exceptions.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NumberFormatError,
    PrecisionLossError,
)

__all__ = [
    "BigDecimalsError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidArgumentError",
    "NumberFormatError",
    "PrecisionLossError",
]
