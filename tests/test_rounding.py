"""Test two-phase rescaling."""

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP, Decimal, getcontext, localcontext

import pytest

from bigdecimals.exceptions import InvalidArgumentError, PrecisionLossError
from bigdecimals.rounding import RoundingMode, scale_of, set_scale


class TestScaleOf:
    """Test scale_of."""

    @pytest.mark.parametrize(
        ("text", "scale"),
        [("1.23", 2), ("0", 0), ("100", 0), ("1E+3", -3), ("0.000", 3), ("-5.5", 1)],
    )
    def test_scale(self, text: str, scale: int) -> None:
        assert scale_of(Decimal(text)) == scale

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(InvalidArgumentError):
            scale_of(Decimal("Infinity"))


class TestRoundingMode:
    """Test RoundingMode resolution."""

    def test_members_are_decimal_constants(self) -> None:
        assert RoundingMode.HALF_UP == ROUND_HALF_UP
        assert RoundingMode.HALF_EVEN.value == ROUND_HALF_EVEN

    @pytest.mark.parametrize(
        "value", [RoundingMode.HALF_UP, "HALF_UP", "half_up", ROUND_HALF_UP]
    )
    def test_coerce(self, value: object) -> None:
        assert RoundingMode.coerce(value) is RoundingMode.HALF_UP

    def test_coerce_unnecessary(self) -> None:
        assert RoundingMode.coerce("UNNECESSARY") is RoundingMode.UNNECESSARY

    @pytest.mark.parametrize("value", [None, "SIDEWAYS", 3])
    def test_coerce_rejects_unknown(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError):
            RoundingMode.coerce(value)


class TestScalePaths:
    """Test which path set_scale takes around the one-digit boundary."""

    def test_single_step_when_one_digit_dropped(self) -> None:
        """Scale 5 to 4 rounds on the whole remainder directly."""
        assert set_scale(Decimal("1.00001"), 4, RoundingMode.UP) == Decimal("1.0001")

    def test_two_step_when_more_digits_dropped(self) -> None:
        """Scale 6 to 4 truncates to 5 digits first; the 0 at position 5 decides."""
        result = set_scale(Decimal("1.000001"), 4, RoundingMode.UP)

        assert result == Decimal("1.0000")
        assert str(result) == "1.0000"

    def test_half_up_single_step(self) -> None:
        assert set_scale(Decimal("1.23455"), 4, RoundingMode.HALF_UP) == Decimal("1.2346")

    def test_half_up_two_step(self) -> None:
        assert set_scale(Decimal("1.234550"), 4, RoundingMode.HALF_UP) == Decimal("1.2346")

    def test_increasing_scale_pads_zeros(self) -> None:
        result = set_scale(Decimal("1.5"), 3, RoundingMode.HALF_UP)

        assert str(result) == "1.500"
        assert scale_of(result) == 3


class TestTruncateThenRound:
    """Test results against single-step quantize."""

    def test_4999_tail_rounds_down_under_half_up(self) -> None:
        """Truncation leaves 4, which rounds down, as single-step also does."""
        value = Decimal("1.234999")

        result = set_scale(value, 2, RoundingMode.HALF_UP)

        assert result == Decimal("1.23")
        assert result == value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def test_up_ignores_digits_past_the_next(self) -> None:
        value = Decimal("1.001")

        assert set_scale(value, 0, RoundingMode.UP) == Decimal("1")
        assert value.quantize(Decimal("1"), rounding=ROUND_UP) == Decimal("2")

    @pytest.mark.parametrize(
        ("text", "mode", "expected"),
        [
            ("2.51", RoundingMode.HALF_EVEN, "2"),
            ("2.51", RoundingMode.HALF_DOWN, "2"),
            ("1.01", RoundingMode.CEILING, "1"),
            ("-1.01", RoundingMode.FLOOR, "-1"),
            ("3.56", RoundingMode.HALF_EVEN, "4"),
            ("-2.59", RoundingMode.DOWN, "-2"),
        ],
    )
    def test_diverging_modes(self, text: str, mode: RoundingMode, expected: str) -> None:
        assert set_scale(Decimal(text), 0, mode) == Decimal(expected)

    def test_carry_into_new_digit(self) -> None:
        result = set_scale(Decimal("9.9951"), 2, RoundingMode.HALF_UP)

        assert str(result) == "10.00"

    def test_negative_scale(self) -> None:
        result = set_scale(Decimal("1250"), -2, RoundingMode.HALF_UP)

        assert result == Decimal("1.3E+3")
        assert scale_of(result) == -2

    def test_negative_scale_truncates_first(self) -> None:
        """1234.5 truncates to 123E1, then 3 rounds down under HALF_UP."""
        result = set_scale(Decimal("1234.5"), -2, RoundingMode.HALF_UP)

        assert str(result) == "1.2E+3"

    def test_zero(self) -> None:
        assert str(set_scale(Decimal("0.000"), 1, RoundingMode.HALF_UP)) == "0.0"

    def test_accepts_decimal_constant(self) -> None:
        assert set_scale(Decimal("2.25"), 1, ROUND_HALF_EVEN) == Decimal("2.2")


class TestPrecision:
    """Test independence from the ambient decimal context."""

    def test_exceeds_default_context_precision(self) -> None:
        value = Decimal("1234567890123456789012345678901234567890.12345")

        result = set_scale(value, 2, RoundingMode.HALF_UP)

        assert result == Decimal("1234567890123456789012345678901234567890.12")

    def test_low_ambient_precision(self) -> None:
        with localcontext() as ctx:
            ctx.prec = 2
            result = set_scale(Decimal("123.456"), 2, RoundingMode.HALF_UP)

        assert str(result) == "123.46"

    def test_ambient_context_untouched(self) -> None:
        before = getcontext().prec

        set_scale(Decimal("1.23456789"), 3, RoundingMode.HALF_EVEN)

        assert getcontext().prec == before


class TestUnnecessary:
    """Test the error-if-inexact mode."""

    @pytest.mark.parametrize(
        ("text", "new_scale", "expected"),
        [("1.2300", 2, "1.23"), ("1.23", 4, "1.2300"), ("1200", -2, "1.2E+3"), ("0.000", 0, "0")],
    )
    def test_exact(self, text: str, new_scale: int, expected: str) -> None:
        result = set_scale(Decimal(text), new_scale, RoundingMode.UNNECESSARY)

        assert str(result) == expected

    @pytest.mark.parametrize(
        ("text", "new_scale"),
        [("1.231", 2), ("1.2301", 2), ("1.2300001", 2), ("1250", -2), ("-0.5", 0)],
    )
    def test_inexact_raises(self, text: str, new_scale: int) -> None:
        with pytest.raises(PrecisionLossError) as exc_info:
            set_scale(Decimal(text), new_scale, RoundingMode.UNNECESSARY)

        assert isinstance(exc_info.value, ArithmeticError)
        assert exc_info.value.new_scale == new_scale

    def test_no_truncation_pre_step(self) -> None:
        """A non-zero digit far past the next position still fails."""
        with pytest.raises(PrecisionLossError):
            set_scale(Decimal("5.000000001"), 2, "UNNECESSARY")


class TestArguments:
    """Test argument validation."""

    @pytest.mark.parametrize("value", [None, 1.5, "1.5", Decimal("NaN")])
    def test_bad_value(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError):
            set_scale(value, 2, RoundingMode.HALF_UP)  # type: ignore[arg-type]

    @pytest.mark.parametrize("new_scale", [None, 2.0, "2", True])
    def test_bad_scale(self, new_scale: object) -> None:
        with pytest.raises(InvalidArgumentError):
            set_scale(Decimal("1.5"), new_scale, RoundingMode.HALF_UP)  # type: ignore[arg-type]

    def test_bad_rounding(self) -> None:
        with pytest.raises(InvalidArgumentError):
            set_scale(Decimal("1.5"), 0, "SIDEWAYS")
