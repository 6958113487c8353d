"""A four-function integer calculator driven by key presses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

DIGITS: tuple[int, ...] = (7, 8, 9, 4, 5, 6, 1, 2, 3)
"""The digit keys, in keypad order."""


class Op(Enum):
    """An arithmetic operation key."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"

    def symbol(self) -> str:
        """Return the label shown on the operation's key."""
        return self.value


class InputState(Enum):
    """Which operand the digit keys currently edit."""

    FIRST = "first"
    SECOND = "second"


def _checked(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError(f"result {value} does not fit in a 64-bit integer")
    return value


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass
class Calculator:
    """Holds two operands, the pending operation and which operand is being typed."""

    a: int = 0
    b: int = 0
    state: InputState = InputState.FIRST
    op: Op = Op.PLUS

    def display(self) -> int:
        """Return the operand currently shown in the input field."""
        return self.a if self.state is InputState.FIRST else self.b

    def press_digit(self, digit: int) -> None:
        """Append a digit to the operand being typed."""
        if digit not in DIGITS:
            raise ValueError(f"no key for digit {digit!r}")
        current = self.display()
        try:
            value = _checked(int(f"{current}{digit}"))
        except OverflowError as exc:
            raise OverflowError("Can't concatenate numbers.") from exc
        if self.state is InputState.FIRST:
            self.a = value
        else:
            self.b = value

    def press_op(self, op: Op) -> None:
        """Choose an operation and switch to typing the second operand."""
        self.op = op
        self.state = InputState.SECOND

    def press_equals(self) -> None:
        """Apply the operation to the operands, storing the result in the first."""
        a, b = self.a, self.b
        if self.op is Op.PLUS:
            result = a + b
        elif self.op is Op.MINUS:
            result = a - b
        elif self.op is Op.MUL:
            result = a * b
        else:
            result = _truncating_div(a, b)
        self.a = _checked(result)
        self.b = 0
        self.state = InputState.FIRST

    def press_clear(self) -> None:
        """Reset both operands and go back to typing the first."""
        self.a = 0
        self.b = 0
        self.state = InputState.FIRST

    def press(self, key: str) -> int:
        """Press the key with the given label and return the displayed value."""
        if key == "=":
            self.press_equals()
        elif key.upper() == "AC":
            self.press_clear()
        elif len(key) == 1 and key.isdigit():
            self.press_digit(int(key))
        else:
            try:
                op = Op(key)
            except ValueError:
                raise ValueError(f"unknown key {key!r}") from None
            self.press_op(op)
        return self.display()