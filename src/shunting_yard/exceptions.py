"""Custom exceptions for the shunting_yard package."""

from typing import Any


class ShuntingYardError(Exception):
    """Base exception for all expression errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class OperatorConversionError(ShuntingYardError):
    """Raised when a character does not name an operator."""

    def __init__(self, char: str) -> None:
        super().__init__("Invalid character for operator", char)
        self.char = char


class PostfixEvalError(ShuntingYardError):
    """Raised when a postfix token sequence cannot be evaluated.

    Every evaluation failure is an instance of this class, so callers that
    only care whether evaluation succeeded catch ``PostfixEvalError``.
    """

    def __init__(self, message: str = "Invalid postfix expression", value: Any = None) -> None:
        super().__init__(message, value)

    def __str__(self) -> str:
        # the failing token stays on the attributes, never in the message
        return self.message


class InvalidOperandError(PostfixEvalError):
    """Raised when operand text is not a number."""

    def __init__(self, text: str) -> None:
        super().__init__("Invalid operand", text)
        self.text = text


class InsufficientOperandsError(PostfixEvalError):
    """Raised when an operator finds fewer than two operands on the stack."""

    def __init__(self, symbol: str, available: int) -> None:
        super().__init__("Insufficient operands", available)
        self.symbol = symbol
        self.available = available


class InvalidResultError(PostfixEvalError):
    """Raised when an operation yields NaN, infinity, or fails outright."""

    def __init__(self, symbol: str, a: float, b: float, reason: str = "invalid result") -> None:
        super().__init__(f"Invalid result ({reason})", (a, symbol, b))
        self.symbol = symbol
        self.operands = (a, b)
        self.reason = reason


class MalformedExpressionError(PostfixEvalError):
    """Raised when evaluation does not leave exactly one value."""

    def __init__(self, remaining: int) -> None:
        super().__init__("Malformed expression, values left on stack", remaining)
        self.remaining = remaining


class InvalidOperatorError(PostfixEvalError):
    """Raised when a parenthesis marker reaches the evaluator."""

    def __init__(self, symbol: str) -> None:
        super().__init__("Parenthesis is not a binary operator", symbol)
        self.symbol = symbol
