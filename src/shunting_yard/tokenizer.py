"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

import logging

from shunting_yard.operators import Operator
from shunting_yard.tokens import Operand, Token, format_postfix

logger = logging.getLogger(__name__)


def tokenize(expression: str) -> list[Token]:
    """
    Convert an infix expression into tokens in postfix order.

    Whitespace is dropped and the expression is wrapped in an outer pair of
    parentheses, so the final ``)`` flushes every pending operator. Any
    character that is not an operator symbol is operand text, letters
    included.

    This never raises. Malformed input (missing operands, doubled operators,
    unbalanced parentheses) yields a sequence that ``evaluate`` rejects, or
    for unbalanced parentheses possibly one that still evaluates: an extra
    ``)`` pops nothing, and operators stranded under an unmatched ``(`` are
    dropped.

    Example:
        >>> tokenize("a+b*c")
        [Operand(text='a'), Operand(text='b'), Operand(text='c'), <Operator.MULT: '*'>, <Operator.ADD: '+'>]
    """
    prepared = "(" + "".join(ch for ch in expression if not ch.isspace()) + ")"

    pending: list[Operator] = []
    output: list[Token] = []
    operand: list[str] = []

    for char in prepared:
        op = Operator.from_symbol(char)
        if op is None:
            operand.append(char)
            continue

        if operand:
            output.append(Operand("".join(operand)))
            operand.clear()

        if op is Operator.OPEN_PAREN:
            pending.append(op)
        elif op is Operator.CLOSE_PAREN:
            while pending:
                top = pending.pop()
                if top is Operator.OPEN_PAREN:
                    break
                output.append(top)
        else:
            # >= keeps same-tier operators left-associative
            while (
                pending
                and pending[-1] is not Operator.OPEN_PAREN
                and pending[-1].precedence >= op.precedence
            ):
                output.append(pending.pop())
            pending.append(op)

    logger.debug("tokenized %r as %r", expression, format_postfix(output))
    return output
