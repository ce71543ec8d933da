"""Operand parsing and result validation for the postfix evaluator."""

import math
import re

from shunting_yard.exceptions import InvalidOperandError, InvalidResultError

# Decimal literal with optional lowercase exponent: "12", "12.", ".5", "1.5e-3"
DECIMAL_PATTERN = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?")


def parse_operand(text: str) -> float:
    """
    Parse operand text into a float.

    Decimal literals are accepted, with an optional exponent written with a
    lowercase ``e`` (``"1e3"``, ``"2.5e-1"``). Uppercase ``E`` never reaches
    here because the tokenizer splits on it. ``float()`` alone would also take
    ``"inf"``, ``"nan"`` and ``"1_000"``; none of those are operands, since a
    non-finite operand would poison every later result.

    Args:
        text: Raw operand text collected by the tokenizer

    Returns:
        The parsed value

    Raises:
        InvalidOperandError: If text is not a decimal literal, or is too
            large to represent as a finite float
    """
    if not isinstance(text, str) or DECIMAL_PATTERN.fullmatch(text) is None:
        raise InvalidOperandError(text)

    value = float(text)
    # a long digit string or a large exponent rounds to infinity
    if math.isinf(value):
        raise InvalidOperandError(text)

    return value


def validate_result(value: float, symbol: str, a: float, b: float) -> float:
    """
    Validate that an operation produced a finite number.

    Args:
        value: The computed result
        symbol: Symbol of the operator that produced it
        a: Left operand
        b: Right operand

    Returns:
        The validated value

    Raises:
        InvalidResultError: If value is NaN or infinite
    """
    if math.isnan(value):
        raise InvalidResultError(symbol, a, b, "NaN is not allowed")
    if math.isinf(value):
        raise InvalidResultError(symbol, a, b, "Infinity is not allowed")

    return value
