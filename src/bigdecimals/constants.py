"""Float seeds for the named decimal constants."""

from math import e as E
from math import pi as PI

# Natural logarithm of 2
LOG_2 = 0.6931471805599453

# Natural logarithm of 10
LOG_10 = 2.302585092994046

# Square root of 2
SQRT_2 = 1.414213562373095

__all__ = ["E", "LOG_2", "LOG_10", "PI", "SQRT_2"]
