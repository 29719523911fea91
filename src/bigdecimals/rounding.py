"""Rescaling with a two-phase rounding discipline.

``set_scale`` differs from a plain ``Decimal.quantize`` in how the rounding
mode is applied. When more than one digit has to be dropped, the value is
first truncated to ``new_scale + 1`` digits and only then rounded to
``new_scale`` with the requested mode, so the decision hinges on the single
digit right after the target position:

    >>> set_scale(Decimal("1.001"), 0, RoundingMode.UP)
    Decimal('1')
    >>> Decimal("1.001").quantize(Decimal("1"), rounding=ROUND_UP)
    Decimal('2')
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
)
from enum import Enum
from typing import Any

from bigdecimals.exceptions import InvalidArgumentError, PrecisionLossError
from bigdecimals.utils.validation import require_decimal, require_int


class RoundingMode(str, Enum):
    """Rounding modes accepted by :func:`set_scale`.

    Values are the matching ``decimal`` module constants, except for
    ``UNNECESSARY`` which asserts that no rounding is needed.
    """

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    ZERO_FIVE_UP = ROUND_05UP
    UNNECESSARY = "ROUND_UNNECESSARY"

    @classmethod
    def coerce(cls, rounding: Any) -> RoundingMode:
        """Resolve a member, a member name or a ``decimal.ROUND_*`` constant.

        Args:
            rounding: Value to resolve

        Returns:
            Matching RoundingMode

        Raises:
            InvalidArgumentError: If the value names no rounding mode
        """
        if isinstance(rounding, cls):
            return rounding
        if isinstance(rounding, str):
            try:
                return cls(rounding)
            except ValueError:
                member = cls.__members__.get(rounding.upper())
                if member is not None:
                    return member
        raise InvalidArgumentError(
            f"Unknown rounding mode: {rounding!r}", parameter="rounding", value=rounding
        )


def scale_of(value: Decimal) -> int:
    """Number of digits to the right of the decimal point.

    Negative for values carrying a positive exponent, e.g. ``Decimal("1E+3")``.
    """
    require_decimal(value)
    return -value.as_tuple().exponent


def _rescale(value: Decimal, new_scale: int, mode: RoundingMode) -> Decimal:
    # Enough precision for the exact result plus a carry digit, so the ambient
    # context never rounds behind our back.
    digits = len(value.as_tuple().digits)
    precision = digits + max(0, new_scale - scale_of(value)) + 1

    unnecessary = mode is RoundingMode.UNNECESSARY
    context = Context(
        prec=precision,
        rounding=ROUND_DOWN if unnecessary else mode.value,
        Emin=MIN_EMIN,
        Emax=MAX_EMAX,
        traps=[InvalidOperation, Inexact] if unnecessary else [InvalidOperation],
    )
    try:
        return value.quantize(Decimal((0, (1,), -new_scale)), context=context)
    except Inexact as err:
        raise PrecisionLossError(value, new_scale) from err


def set_scale(value: Decimal, new_scale: int, rounding: RoundingMode | str) -> Decimal:
    """Return ``value`` rescaled to exactly ``new_scale`` fractional digits.

    If the value carries at most one digit beyond ``new_scale``, it is
    rescaled directly. Otherwise it is first truncated to ``new_scale + 1``
    and then rounded to ``new_scale`` with ``rounding``, so only the digit
    immediately after the target position affects the result.
    ``UNNECESSARY`` never truncates first.

    Args:
        value: Finite Decimal to rescale
        new_scale: Target scale; may be zero or negative
        rounding: RoundingMode, member name or ``decimal.ROUND_*`` constant

    Returns:
        Decimal whose scale is ``new_scale``

    Raises:
        InvalidArgumentError: On a missing or wrongly typed argument
        PrecisionLossError: If ``rounding`` is UNNECESSARY and a non-zero digit
            would be discarded
    """
    require_decimal(value, "value")
    require_int(new_scale, "new_scale")
    mode = RoundingMode.coerce(rounding)

    if scale_of(value) <= new_scale + 1:
        return _rescale(value, new_scale, mode)

    if mode is not RoundingMode.UNNECESSARY:
        value = _rescale(value, new_scale + 1, RoundingMode.DOWN)

    return _rescale(value, new_scale, mode)
