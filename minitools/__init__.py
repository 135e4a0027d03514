"""Mini Tools: watch, counter, password generator and guessing game."""

__version__ = "0.1.0"
