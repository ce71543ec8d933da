"""Unit tests for validator functions."""

import pytest

from shunting_yard import InvalidOperandError, InvalidResultError
from shunting_yard.validators import parse_operand, validate_result


class TestParseOperand:
    """Tests for parse_operand function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", 0.0),
            ("42", 42.0),
            ("3.14", 3.14),
            ("007", 7.0),
            ("12.", 12.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("2.5e-1", 0.25),
            ("1e+2", 100.0),
            (".5e1", 5.0),
        ],
    )
    def test_accepts_decimal_literals(self, text, expected):
        assert parse_operand(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "", ".", "a", "x1", "1a", "1E5", "1e", "e5", "1e+",
            "inf", "nan", "Infinity", "1_000", "1.2.3", "٣",
        ],
    )
    def test_rejects_non_decimal_text(self, text):
        with pytest.raises(InvalidOperandError) as exc_info:
            parse_operand(text)
        assert exc_info.value.text == text

    def test_rejects_digits_that_overflow(self):
        with pytest.raises(InvalidOperandError):
            parse_operand("9" * 400)

    def test_rejects_exponent_that_overflows(self):
        with pytest.raises(InvalidOperandError):
            parse_operand("1e400")

    def test_rejects_non_string(self):
        with pytest.raises(InvalidOperandError):
            parse_operand(42)  # type: ignore

    def test_error_message_omits_operand(self):
        with pytest.raises(InvalidOperandError) as exc_info:
            parse_operand("abc")
        assert str(exc_info.value) == "Invalid operand"
        assert exc_info.value.value == "abc"


class TestValidateResult:
    """Tests for validate_result function."""

    def test_accepts_finite(self):
        assert validate_result(1.5, "+", 1.0, 0.5) == 1.5

    def test_accepts_zero(self):
        assert validate_result(0.0, "*", 0.0, 3.0) == 0.0

    def test_rejects_nan(self):
        with pytest.raises(InvalidResultError) as exc_info:
            validate_result(float("nan"), "-", 1.0, 2.0)
        assert "NaN" in str(exc_info.value)

    def test_rejects_positive_inf(self):
        with pytest.raises(InvalidResultError) as exc_info:
            validate_result(float("inf"), "*", 1e308, 10.0)
        assert "Infinity" in str(exc_info.value)
        assert exc_info.value.symbol == "*"

    def test_rejects_negative_inf(self):
        with pytest.raises(InvalidResultError):
            validate_result(float("-inf"), "-", -1e308, 1e308)
