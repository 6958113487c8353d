# calcabobe

A small integer calculator with a keypad. The keys are the digits 1–9,
the operators `+ - * /`, `=` for the result and `AC` to clear everything.

The calculator keeps two numbers. Digits go into the first number until
an operator is pressed, and into the second number after that. Pressing
`=` applies the operator and stores the result as the first number. It
then sets the second number to 0 and returns to entering the first.

All arithmetic is on whole numbers that must fit in a signed 64-bit
integer. Division truncates toward zero. Division by zero raises
`ZeroDivisionError`. A result or a typed number that does not fit raises
`OverflowError`. There is no `0` key, and pressing one raises
`ValueError`.

## Installation

```
pip install .
```

## Command line

```
calcabobe
```

The command reads key presses from standard input and prints the value
on the display after each non-blank line. A line may hold one key or
several keys separated by spaces. A run of digits counts as one press
per digit.

```
$ printf '7\n8\n+\n5\n=\n' | calcabobe
7
78
78
5
83
$ echo '12 * 3 =' | calcabobe
36
```

An unknown key, a division by zero or an overflow prints `error: ...` to
standard error, and the command exits with status 1.

```
calcabobe --greet NAME
```

This prints a greeting for `NAME` and exits.

## Library use

```python
from calcabobe.calculator import Calculator, Op

calc = Calculator()
for key in "12":
    calc.press(key)
calc.press_op(Op.MUL)
calc.press_digit(3)
calc.press_equals()
print(calc.display())   # 36

calc.press_clear()
print(calc.display())   # 0
```

`Calculator` is a dataclass with these fields:

- `a` and `b`: the two operands.
- `state`: an `InputState`, either `FIRST` or `SECOND`.
- `op`: an `Op`, one of `PLUS`, `MINUS`, `MUL` or `DIV`.

`Op.symbol()` returns the key label of an operation.

`Calculator.press(key)` accepts a digit, one of `+ - * /`, `=` or `AC`.
`AC` may be in any letter case. It returns the value that is then on the
display, and raises `ValueError` for any other key.

`calcabobe.cli.run(lines, out)` feeds lines of keys to a fresh
calculator. It writes the display to `out` after each non-blank line and
returns the calculator. `calcabobe.cli.greet(name)` returns the greeting
string.

## What it does not do

There is no graphical keypad or window. The calculator works only
through the command line and the Python API above.

## Tests

```
pip install .[test]
pytest
```