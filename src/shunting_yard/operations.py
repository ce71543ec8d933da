"""Binary arithmetic applied by the postfix evaluator.

Every function takes the left operand ``a`` and the right operand ``b`` and
either returns a finite float or raises ``InvalidResultError``.
"""

import math

from shunting_yard.exceptions import InvalidResultError
from shunting_yard.validators import validate_result


def add(a: float, b: float) -> float:
    """Return a + b."""
    return validate_result(float(a + b), "+", a, b)


def subtract(a: float, b: float) -> float:
    """Return a - b."""
    return validate_result(float(a - b), "-", a, b)


def multiply(a: float, b: float) -> float:
    """Return a * b."""
    return validate_result(float(a * b), "*", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Raises:
        InvalidResultError: If b is zero or the quotient overflows
    """
    if b == 0:
        raise InvalidResultError("/", a, b, "division by zero")

    return validate_result(a / b, "/", a, b)


def modulo(a: float, b: float) -> float:
    """
    Floating-point remainder of a divided by b.

    Uses ``math.fmod``, so the result takes the sign of the dividend:
    ``modulo(-10, 3) == -1.0``. Python's ``%`` operator would follow the
    divisor instead.

    Properties:
        - Range: abs(modulo(a, b)) < abs(b)
        - Sign: modulo(a, b) is zero or has the sign of a

    Raises:
        InvalidResultError: If b is zero
    """
    if b == 0:
        raise InvalidResultError("%", a, b, "modulo by zero")

    return validate_result(math.fmod(a, b), "%", a, b)


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Uses ``math.pow``, which refuses results outside the reals instead of
    returning a complex number the way ``**`` does.

    Raises:
        InvalidResultError: For a negative base with a non-integer exponent,
            zero raised to a negative power, or overflow
    """
    try:
        result = math.pow(base, exponent)
    except ValueError as e:
        raise InvalidResultError("^", base, exponent, "math domain error") from e
    except OverflowError as e:
        raise InvalidResultError("^", base, exponent, "overflow") from e

    return validate_result(result, "^", base, exponent)


def scale(mantissa: float, exponent: float) -> float:
    """
    Return mantissa * 10 ** exponent (the ``E`` operator).

    >>> scale(2, 3)
    2000.0

    Raises:
        InvalidResultError: If the power of ten or the product overflows
    """
    try:
        factor = math.pow(10.0, exponent)
    except OverflowError as e:
        raise InvalidResultError("E", mantissa, exponent, "overflow") from e

    return validate_result(mantissa * factor, "E", mantissa, exponent)
