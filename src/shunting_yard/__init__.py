"""
Arithmetic expression evaluation by shunting-yard.

An infix expression is converted to postfix order by ``tokenize`` and the
postfix tokens are reduced to one number by ``evaluate``:

    >>> from shunting_yard import calculate
    >>> calculate("3+4*2")
    11.0
"""

from shunting_yard.core import calculate
from shunting_yard.evaluator import evaluate
from shunting_yard.exceptions import (
    InsufficientOperandsError,
    InvalidOperandError,
    InvalidOperatorError,
    InvalidResultError,
    MalformedExpressionError,
    OperatorConversionError,
    PostfixEvalError,
    ShuntingYardError,
)
from shunting_yard.operators import Operator
from shunting_yard.tokenizer import tokenize
from shunting_yard.tokens import Operand, Token, format_postfix

__all__ = [
    "InsufficientOperandsError",
    "InvalidOperandError",
    "InvalidOperatorError",
    "InvalidResultError",
    "MalformedExpressionError",
    "Operand",
    "Operator",
    "OperatorConversionError",
    "PostfixEvalError",
    "ShuntingYardError",
    "Token",
    "calculate",
    "evaluate",
    "format_postfix",
    "tokenize",
]

__version__ = "0.1.0"
