"""Domain package exports for the session aggregate, events and ports."""

from .errors import UrlOpenError, UseCaseError
from .events import (
    CheckGuess,
    ClearGuessField,
    ClearPassword,
    DecrementCounter,
    Effect,
    Event,
    GeneratePassword,
    IncrementCounter,
    NewGame,
    OpenLink,
    OpenUrl,
    SetGuessField,
    SetPasswordField,
    TimerTick,
    ToggleTimer,
)
from .pages import PAGE_ORDER, Page
from .session import GuessOutcome, Session, SessionSnapshot

__all__ = [
    "CheckGuess",
    "ClearGuessField",
    "ClearPassword",
    "DecrementCounter",
    "Effect",
    "Event",
    "GeneratePassword",
    "GuessOutcome",
    "IncrementCounter",
    "NewGame",
    "OpenLink",
    "OpenUrl",
    "PAGE_ORDER",
    "Page",
    "Session",
    "SessionSnapshot",
    "SetGuessField",
    "SetPasswordField",
    "TimerTick",
    "ToggleTimer",
    "UrlOpenError",
    "UseCaseError",
]
