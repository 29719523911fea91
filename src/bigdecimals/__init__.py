"""bigdecimals - canonical Decimal instances and two-phase rescaling.

Helpers around :class:`decimal.Decimal`: an interning cache that shares one
instance per string form, eight pre-registered named constants, and
:func:`set_scale` with truncate-then-round semantics.
"""

__version__ = "0.1.0"

from bigdecimals.config import Settings, get_settings
from bigdecimals.exceptions import (
    BigDecimalsError,
    ConfigurationError,
    ErrorCode,
    InvalidArgumentError,
    NumberFormatError,
    PrecisionLossError,
)
from bigdecimals.interning import (
    E,
    LOG_2,
    LOG_10,
    ONE,
    PI,
    SQRT_2,
    TWO,
    ZERO,
    DecimalInterner,
    get_interner,
    intern,
    set_interner,
)
from bigdecimals.rounding import RoundingMode, scale_of, set_scale
from bigdecimals.utils.logging import get_logger, setup_logging

__all__ = [
    # Interning
    "DecimalInterner",
    "get_interner",
    "set_interner",
    "intern",
    # Named constants
    "ZERO",
    "ONE",
    "TWO",
    "E",
    "PI",
    "LOG_2",
    "LOG_10",
    "SQRT_2",
    # Rounding
    "RoundingMode",
    "scale_of",
    "set_scale",
    # Configuration
    "Settings",
    "get_settings",
    # Utilities
    "get_logger",
    "setup_logging",
    # Exceptions
    "BigDecimalsError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidArgumentError",
    "NumberFormatError",
    "PrecisionLossError",
]
