"""One-call expression evaluation."""

from shunting_yard.evaluator import evaluate
from shunting_yard.tokenizer import tokenize


def calculate(expression: str) -> float:
    """
    Evaluate an infix expression.

    Example:
        >>> calculate("10/(2+3)")
        2.0

    Raises:
        PostfixEvalError: If the expression is malformed or its value is
            not a finite number
    """
    return evaluate(tokenize(expression))
