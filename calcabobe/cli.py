"""Command-line front end for the calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from calcabobe.calculator import Calculator


def greet(name: str) -> str:
    """Return a greeting for the given name."""
    return f"Hello, {name}! You've been greeted from Python!"


def _keys(line: str) -> Iterable[str]:
    for token in line.split():
        if token.isdigit():
            yield from token
        else:
            yield token


def run(lines: Iterable[str], out: TextIO) -> Calculator:
    """Feed each line's keys to a calculator, writing the display after each line."""
    calc = Calculator()
    for line in lines:
        if not line.strip():
            continue
        for key in _keys(line):
            calc.press(key)
        out.write(f"{calc.display()}\n")
    return calc


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on standard input, or print a greeting."""
    parser = argparse.ArgumentParser(
        prog="calcabobe",
        description="Integer calculator reading keys (digits, + - * /, =, AC) per line.",
    )
    parser.add_argument("--greet", metavar="NAME", help="print a greeting and exit")
    args = parser.parse_args(argv)

    if args.greet is not None:
        print(greet(args.greet))
        return 0

    try:
        run(sys.stdin, sys.stdout)
    except (ValueError, ArithmeticError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0