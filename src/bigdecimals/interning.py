"""Canonical shared Decimal instances keyed by their string form.

A :class:`DecimalInterner` maps ``str(value)`` to one shared ``Decimal``, so
callers may compare interned values by identity. The key is the string form,
not the numeric value: ``Decimal("2")`` and ``Decimal("2.0")`` are distinct
entries because scale is significant.

The store only grows. Do not intern high-cardinality or untrusted input.
"""

from __future__ import annotations

import threading
from decimal import Decimal, InvalidOperation

from bigdecimals import constants
from bigdecimals.config import get_settings
from bigdecimals.exceptions import ConfigurationError, InvalidArgumentError, NumberFormatError
from bigdecimals.utils.logging import get_logger
from bigdecimals.utils.validation import require_decimal, require_str

logger = get_logger(__name__)

# Named constants, registered in every interner under these keys
ZERO = Decimal("0")
ONE = Decimal("1")
TWO = Decimal("2")
E = Decimal(str(constants.E))
PI = Decimal(str(constants.PI))
LOG_2 = Decimal(str(constants.LOG_2))
LOG_10 = Decimal(str(constants.LOG_10))
SQRT_2 = Decimal(str(constants.SQRT_2))

NAMED_CONSTANTS: dict[str, Decimal] = {
    "0": ZERO,
    "1": ONE,
    "2": TWO,
    str(constants.E): E,
    str(constants.PI): PI,
    str(constants.LOG_2): LOG_2,
    str(constants.LOG_10): LOG_10,
    str(constants.SQRT_2): SQRT_2,
}


def parse_decimal(text: str) -> Decimal:
    """Parse ``text`` as a finite Decimal.

    Raises:
        NumberFormatError: If ``text`` is not a decimal literal, or names NaN
            or an infinity
    """
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError) as err:
        raise NumberFormatError(text, cause=err) from err
    if not value.is_finite():
        raise NumberFormatError(text, reason="not a finite number")
    return value


class DecimalInterner:
    """Thread-safe, append-only cache of canonical Decimal instances."""

    def __init__(
        self,
        *,
        warn_size: int | None = None,
        atomic_string_intern: bool | None = None,
    ) -> None:
        """Create an interner pre-loaded with the named constants.

        Args:
            warn_size: Log a warning once the store grows past this size;
                0 disables it. Defaults to ``Settings.intern_warn_size``.
            atomic_string_intern: Resolve string interning races with
                insert-if-absent instead of last-writer-wins. Defaults to
                ``Settings.atomic_string_intern``.

        Raises:
            ConfigurationError: If ``warn_size`` is negative
        """
        settings = get_settings()
        if warn_size is None:
            warn_size = settings.intern_warn_size
        if atomic_string_intern is None:
            atomic_string_intern = settings.atomic_string_intern
        if warn_size < 0:
            raise ConfigurationError(
                "warn_size must be >= 0", parameter="warn_size", value=warn_size
            )

        self._warn_size = warn_size
        self._atomic_string_intern = atomic_string_intern
        self._warned = False
        self._lock = threading.Lock()
        self._instances: dict[str, Decimal] = dict(NAMED_CONSTANTS)

        logger.debug(
            "Decimal interner created with %d named constants",
            len(self._instances),
            extra={"extra": {"atomic_string_intern": atomic_string_intern}},
        )

    def intern_string(self, text: str) -> Decimal:
        """Return the canonical Decimal for the string ``text``.

        Without ``atomic_string_intern`` two threads interning the same new
        string may each get their own instance; the last store wins the cache
        entry.

        Args:
            text: Decimal literal

        Returns:
            Shared Decimal instance for ``text``

        Raises:
            InvalidArgumentError: If ``text`` is None or not a str
            NumberFormatError: If ``text`` is not a finite decimal literal
        """
        require_str(text, "text")
        instance = self._instances.get(text)
        if instance is not None:
            return instance

        value = parse_decimal(text)
        if self._atomic_string_intern:
            return self._put_if_absent(text, value)
        self._put(text, value)
        return value

    def intern_decimal(self, value: Decimal) -> Decimal:
        """Return the canonical instance for ``value``, keyed by ``str(value)``.

        If an instance is already cached the argument is discarded. Concurrent
        callers racing on a new key all receive the same winner.

        Raises:
            InvalidArgumentError: If ``value`` is None, not a Decimal or not finite
        """
        require_decimal(value, "value")
        return self._put_if_absent(str(value), value)

    def intern(self, value: str | Decimal) -> Decimal:
        """Intern a decimal literal or a Decimal."""
        if isinstance(value, str):
            return self.intern_string(value)
        if isinstance(value, Decimal):
            return self.intern_decimal(value)
        if value is None:
            raise InvalidArgumentError("value must not be None", parameter="value")
        raise InvalidArgumentError(
            f"value must be str or Decimal, got {type(value).__name__}",
            parameter="value",
            value=value,
        )

    def get(self, key: str) -> Decimal | None:
        """Look up ``key`` without inserting."""
        return self._instances.get(key)

    def keys(self) -> list[str]:
        """Snapshot of the cached keys."""
        with self._lock:
            return list(self._instances)

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"

    def _put(self, key: str, value: Decimal) -> None:
        with self._lock:
            is_new = key not in self._instances
            self._instances[key] = value
            size = len(self._instances)
        if is_new:
            self._on_insert(key, size)

    def _put_if_absent(self, key: str, value: Decimal) -> Decimal:
        with self._lock:
            instance = self._instances.setdefault(key, value)
            size = len(self._instances)
        if instance is value:
            self._on_insert(key, size)
        return instance

    def _on_insert(self, key: str, size: int) -> None:
        logger.debug("Interned %s", key, extra={"extra": {"key": key, "size": size}})
        if self._warn_size and size > self._warn_size and not self._warned:
            self._warned = True
            logger.warning(
                "Decimal interner holds %d entries (warn_size=%d); entries are never evicted",
                size,
                self._warn_size,
                extra={"extra": {"size": size, "warn_size": self._warn_size}},
            )


# Global interner instance
_interner: DecimalInterner | None = None
_interner_lock = threading.Lock()


def get_interner() -> DecimalInterner:
    """Get the process-wide interner, creating it on first use."""
    global _interner
    if _interner is None:
        with _interner_lock:
            if _interner is None:
                _interner = DecimalInterner()
    return _interner


def set_interner(interner: DecimalInterner) -> None:
    """Replace the process-wide interner."""
    global _interner
    if not isinstance(interner, DecimalInterner):
        raise InvalidArgumentError(
            f"interner must be DecimalInterner, got {type(interner).__name__}",
            parameter="interner",
        )
    with _interner_lock:
        _interner = interner


def intern(value: str | Decimal) -> Decimal:
    """Intern ``value`` in the process-wide interner."""
    return get_interner().intern(value)
