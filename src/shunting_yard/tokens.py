"""Token types produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from shunting_yard.operators import Operator

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class Operand:
    """Raw operand text, parsed to a number only when evaluated."""

    text: str

    def __str__(self) -> str:
        return self.text


Token = Union[Operand, Operator]


def format_postfix(tokens: Iterable[Token]) -> str:
    """Render tokens space-separated, e.g. ``"3 4 2 * +"``."""
    return " ".join(str(token) for token in tokens)
