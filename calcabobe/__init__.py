"""A keypad-driven integer calculator with a line-oriented command interface."""

__version__ = "0.1.0"
__all__ = ["calculator", "cli"]