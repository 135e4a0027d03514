"""Session dispatcher: apply one event to the session in place.

Call context:
    ``minitools.app.runtime.AppRuntime.pump`` calls :class:`ApplyEvent` once
    per queued event, on the UI thread, in arrival order. The returned effects
    are executed by the runtime after the transition has been applied.

Every transition is total: arbitrary text in ``SetPasswordField`` or
``SetGuessField`` never raises, and a guess that does not parse only updates
the feedback text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..domain.errors import UseCaseError
from ..domain.events import (
    CheckGuess,
    ClearGuessField,
    ClearPassword,
    DecrementCounter,
    Effect,
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
from ..domain.ports import RandomPort
from ..domain.session import (
    NEW_GAME_PROMPT,
    GuessOutcome,
    Session,
    draw_secret_number,
)
from .generate_password import GeneratePasswordText
from .guessing_game import evaluate_guess

_log = logging.getLogger(__name__)


@dataclass
class ApplyEvent:
    rng: RandomPort
    _generate_password: GeneratePasswordText = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._generate_password = GeneratePasswordText(self.rng)

    def __call__(self, session: Session, event: object) -> List[Effect]:
        """Mutate ``session`` for ``event`` and return the effects to perform.

        Raises:
            UseCaseError: ``UNKNOWN_EVENT`` when ``event`` is not a known type.
        """
        if isinstance(event, IncrementCounter):
            session.counter += 1
        elif isinstance(event, DecrementCounter):
            session.counter -= 1
        elif isinstance(event, SetPasswordField):
            session.password = event.text
        elif isinstance(event, ClearPassword):
            session.password = ""
        elif isinstance(event, GeneratePassword):
            session.password = self._generate_password()
        elif isinstance(event, SetGuessField):
            session.guess_input = event.text
        elif isinstance(event, ClearGuessField):
            session.guess_input = ""
        elif isinstance(event, CheckGuess):
            self._check_guess(session)
        elif isinstance(event, NewGame):
            self._new_game(session)
        elif isinstance(event, ToggleTimer):
            session.timer_active = not session.timer_active
            _log.debug(
                "Watch %s at %ds",
                "started" if session.timer_active else "stopped",
                session.elapsed_seconds,
            )
        elif isinstance(event, TimerTick):
            session.elapsed_seconds = event.elapsed
        elif isinstance(event, OpenLink):
            return [OpenUrl(event.url)]
        else:
            raise UseCaseError("UNKNOWN_EVENT", f"Unsupported event: {event!r}")
        return []

    # ------------------------------------------------------------------
    def _check_guess(self, session: Session) -> None:
        outcome, feedback = evaluate_guess(session.guess_input, session.secret_number)
        session.last_outcome = outcome
        session.feedback = feedback
        if outcome is not GuessOutcome.INVALID:
            session.attempts += 1

    def _new_game(self, session: Session) -> None:
        session.secret_number = draw_secret_number(self.rng)
        session.guess_input = ""
        session.attempts = 0
        session.feedback = NEW_GAME_PROMPT
        session.last_outcome = GuessOutcome.PENDING


__all__ = ["ApplyEvent"]
