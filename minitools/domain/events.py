"""Event and effect types consumed and produced by the dispatcher.

Events are immutable messages submitted by views (or by the watch
producer). Effects are requests for work outside the session, returned by
the dispatcher and executed by the runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IncrementCounter:
    pass


@dataclass(frozen=True)
class DecrementCounter:
    pass


@dataclass(frozen=True)
class SetPasswordField:
    text: str


@dataclass(frozen=True)
class ClearPassword:
    pass


@dataclass(frozen=True)
class GeneratePassword:
    pass


@dataclass(frozen=True)
class SetGuessField:
    text: str


@dataclass(frozen=True)
class ClearGuessField:
    pass


@dataclass(frozen=True)
class CheckGuess:
    pass


@dataclass(frozen=True)
class NewGame:
    pass


@dataclass(frozen=True)
class ToggleTimer:
    pass


@dataclass(frozen=True)
class TimerTick:
    """Tick emitted by the watch producer; ``elapsed`` starts at 1 per run."""

    elapsed: int


@dataclass(frozen=True)
class OpenLink:
    url: str


Event = Union[
    IncrementCounter,
    DecrementCounter,
    SetPasswordField,
    ClearPassword,
    GeneratePassword,
    SetGuessField,
    ClearGuessField,
    CheckGuess,
    NewGame,
    ToggleTimer,
    TimerTick,
    OpenLink,
]


# ---- Effects ----
@dataclass(frozen=True)
class OpenUrl:
    """Ask the runtime to open ``url`` with the platform handler."""

    url: str


Effect = OpenUrl


__all__ = [
    "CheckGuess",
    "ClearGuessField",
    "ClearPassword",
    "DecrementCounter",
    "Effect",
    "Event",
    "GeneratePassword",
    "IncrementCounter",
    "NewGame",
    "OpenLink",
    "OpenUrl",
    "SetGuessField",
    "SetPasswordField",
    "TimerTick",
    "ToggleTimer",
]
