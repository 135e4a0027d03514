"""Session aggregate holding all mutable application state.

The runtime owns exactly one ``Session``; the dispatcher in
``minitools.usecases.apply_event`` is its only writer. Views never see the
aggregate itself, only the frozen ``SessionSnapshot`` which omits the
secret number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .ports import RandomPort

PASSWORD_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
PASSWORD_LENGTH = 16
SECRET_MIN = 1
SECRET_MAX = 100

INITIAL_PROMPT = f"A number from {SECRET_MIN} to {SECRET_MAX} is hidden. Guess it!"
NEW_GAME_PROMPT = "A new number has been hidden. Guess it!"


class GuessOutcome(str, Enum):
    """Machine-readable result of the last guess."""

    PENDING = "pending"
    CORRECT = "correct"
    GO_HIGHER = "go_higher"
    GO_LOWER = "go_lower"
    INVALID = "invalid"


def draw_secret_number(rng: RandomPort) -> int:
    """Return a uniform integer in ``[SECRET_MIN, SECRET_MAX]``."""
    return rng.next_uniform(SECRET_MIN, SECRET_MAX + 1)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only projection of a session handed to the rendering layer."""

    elapsed_seconds: int
    timer_active: bool
    counter: int
    password: str
    guess_input: str
    feedback: str
    attempts: int
    last_outcome: GuessOutcome


@dataclass
class Session:
    """Mutable session record; see module docstring for ownership rules."""

    secret_number: int
    elapsed_seconds: int = 0
    timer_active: bool = False
    counter: int = 0
    password: str = ""
    guess_input: str = ""
    feedback: str = INITIAL_PROMPT
    attempts: int = 0
    last_outcome: GuessOutcome = GuessOutcome.PENDING

    @classmethod
    def start(cls, rng: RandomPort) -> "Session":
        """Create a fresh session with a randomized secret and zeroed counters."""
        return cls(secret_number=draw_secret_number(rng))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            elapsed_seconds=self.elapsed_seconds,
            timer_active=self.timer_active,
            counter=self.counter,
            password=self.password,
            guess_input=self.guess_input,
            feedback=self.feedback,
            attempts=self.attempts,
            last_outcome=self.last_outcome,
        )


__all__ = [
    "GuessOutcome",
    "INITIAL_PROMPT",
    "NEW_GAME_PROMPT",
    "PASSWORD_ALPHABET",
    "PASSWORD_LENGTH",
    "SECRET_MAX",
    "SECRET_MIN",
    "Session",
    "SessionSnapshot",
    "draw_secret_number",
]
