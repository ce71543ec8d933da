"""Command-line calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from shunting_yard import __version__
from shunting_yard.core import calculate
from shunting_yard.exceptions import ShuntingYardError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

PROMPT = "> "
QUIT_COMMANDS = ("quit", "exit")


def format_result(value: float) -> str:
    """Render a result, dropping the fractional part of integral values."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shunting-yard",
        description="Evaluate an arithmetic expression.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operators, loosest to tightest binding:
  + -        addition, subtraction
  * / % E    multiplication, division, remainder, a*10^b
  ^          power
Parentheses group sub-expressions.

Examples:
  %(prog)s "3+4*2"
  %(prog)s "10/(2+3)"
  %(prog)s --interactive
        """,
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate; omit to start interactive mode",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Read expressions line by line until quit, exit or EOF",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log tokenizer and evaluator details to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_once(expression: str) -> int:
    """Evaluate one expression and print the outcome. Returns an exit status."""
    try:
        result = calculate(expression)
    except ShuntingYardError as e:
        print(f"Error: {e}")
        return 1

    print(f"Result: {format_result(result)}")
    return 0


def interactive() -> int:
    """Evaluate expressions read from stdin until the user quits."""
    while True:
        try:
            line = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not line:
            continue
        if line.lower() in QUIT_COMMANDS:
            return 0

        run_once(line)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.interactive or args.expression is None:
        logger.debug("starting interactive mode")
        return interactive()

    return run_once(args.expression)
