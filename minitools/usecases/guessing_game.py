"""Guess parsing and evaluation for the number-guessing page.

Call context:
    ``ApplyEvent`` calls :func:`evaluate_guess` for ``CheckGuess`` events and
    writes the returned outcome/feedback back into the session.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..domain.session import GuessOutcome

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(_INT64_MAX))

FEEDBACK_CORRECT = "Correct! The hidden number is {number}."
FEEDBACK_GO_HIGHER = "Go higher! My number is bigger."
FEEDBACK_GO_LOWER = "Go lower! My number is smaller."
FEEDBACK_INVALID = "Invalid input: enter a whole number."


def parse_guess(text: str) -> Optional[int]:
    """Parse ``text`` as a signed base-10 64-bit integer.

    Only ASCII digits with an optional leading sign are accepted; whitespace,
    ``_`` separators and values outside the signed 64-bit range yield ``None``.
    Leading zeros are ignored however many there are.
    """
    if not _INT_PATTERN.fullmatch(text or ""):
        return None
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _INT64_MAX_DIGITS:
        return None
    value = sign * int(digits)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def evaluate_guess(text: str, secret: int) -> Tuple[GuessOutcome, str]:
    """Return the outcome and feedback text for a raw guess."""
    value = parse_guess(text)
    if value is None:
        return GuessOutcome.INVALID, FEEDBACK_INVALID
    if value == secret:
        return GuessOutcome.CORRECT, FEEDBACK_CORRECT.format(number=secret)
    if value < secret:
        return GuessOutcome.GO_HIGHER, FEEDBACK_GO_HIGHER
    return GuessOutcome.GO_LOWER, FEEDBACK_GO_LOWER


__all__ = [
    "FEEDBACK_CORRECT",
    "FEEDBACK_GO_HIGHER",
    "FEEDBACK_GO_LOWER",
    "FEEDBACK_INVALID",
    "evaluate_guess",
    "parse_guess",
]
