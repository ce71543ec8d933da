"""Postfix (reverse Polish) evaluation with a single operand stack."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shunting_yard.exceptions import (
    InsufficientOperandsError,
    InvalidOperatorError,
    MalformedExpressionError,
    PostfixEvalError,
)
from shunting_yard.operators import Operator
from shunting_yard.tokens import Operand
from shunting_yard.validators import parse_operand

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shunting_yard.tokens import Token

logger = logging.getLogger(__name__)


def evaluate(tokens: Iterable[Token]) -> float:
    """
    Evaluate a token sequence in postfix order.

    Operands are parsed as they are reached. An operator pops its right
    operand first, then its left operand, and pushes the result. Exactly one
    value must remain at the end.

    Args:
        tokens: Tokens in postfix order, as produced by ``tokenize``

    Returns:
        The value of the expression

    Raises:
        InvalidOperandError: If operand text is not a number
        InsufficientOperandsError: If an operator has fewer than two operands
        InvalidResultError: If an operation yields a non-finite value
        MalformedExpressionError: If more or fewer than one value remains
        InvalidOperatorError: If a parenthesis marker is present

    Example:
        >>> evaluate([Operand("3"), Operand("4"), Operator.ADD])
        7.0
    """
    try:
        return _run(tokens)
    except PostfixEvalError as e:
        logger.debug("evaluation failed: %s (%r)", e, e.value)
        raise


def _run(tokens: Iterable[Token]) -> float:
    stack: list[float] = []

    for token in tokens:
        if isinstance(token, Operand):
            stack.append(parse_operand(token.text))
            continue

        if not isinstance(token, Operator):
            raise PostfixEvalError("Unknown token", token)
        if token.is_paren:
            raise InvalidOperatorError(token.symbol)
        if len(stack) < 2:
            raise InsufficientOperandsError(token.symbol, len(stack))

        b = stack.pop()
        a = stack.pop()
        stack.append(token.apply(a, b))

    if len(stack) != 1:
        raise MalformedExpressionError(len(stack))

    return stack[0]
