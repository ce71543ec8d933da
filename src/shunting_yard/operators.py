"""The closed set of operator symbols and their precedence."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from shunting_yard.exceptions import InvalidOperatorError, OperatorConversionError
from shunting_yard.operations import add, divide, modulo, multiply, power, scale, subtract

if TYPE_CHECKING:
    from collections.abc import Callable


class Operator(Enum):
    """
    An operator symbol recognized by the tokenizer.

    Member values are the one-character symbols. Equality is plain enum
    identity; compare binding strength through ``precedence``.

    Example:
        >>> Operator.from_symbol("*")
        <Operator.MULT: '*'>
        >>> Operator.POW.precedence > Operator.MULT.precedence
        True
    """

    ADD = "+"
    SUB = "-"
    MULT = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"
    EXP = "E"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"

    @classmethod
    def from_symbol(cls, char: str) -> Operator | None:
        """Return the operator for char, or None if char is not an operator."""
        return _BY_SYMBOL.get(char)

    @classmethod
    def parse(cls, char: str) -> Operator:
        """
        Return the operator for char.

        Raises:
            OperatorConversionError: If char is not an operator symbol
        """
        op = cls.from_symbol(char)
        if op is None:
            raise OperatorConversionError(char)
        return op

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        """Binding strength; 0 for the parenthesis markers."""
        return _PRECEDENCE.get(self, 0)

    @property
    def is_paren(self) -> bool:
        return self in (Operator.OPEN_PAREN, Operator.CLOSE_PAREN)

    def same_tier(self, other: Operator) -> bool:
        """True if both operators bind equally tightly."""
        return self.precedence == other.precedence

    def apply(self, a: float, b: float) -> float:
        """
        Apply the operator to a left operand a and a right operand b.

        Raises:
            InvalidOperatorError: If called on a parenthesis marker
            InvalidResultError: If the result is not a finite number
        """
        function = _FUNCTIONS.get(self)
        if function is None:
            raise InvalidOperatorError(self.symbol)
        return function(a, b)

    def __str__(self) -> str:
        return self.symbol


_BY_SYMBOL: dict[str, Operator] = {op.symbol: op for op in Operator}

_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MULT: 2,
    Operator.DIV: 2,
    Operator.MOD: 2,
    Operator.EXP: 2,
    Operator.POW: 3,
}

_FUNCTIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUB: subtract,
    Operator.MULT: multiply,
    Operator.DIV: divide,
    Operator.MOD: modulo,
    Operator.POW: power,
    Operator.EXP: scale,
}
