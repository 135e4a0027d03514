"""Command surface and display projection for the four tool pages.

Call context:
    Page views call the ``cmd_*``/``set_*`` methods from widget callbacks;
    the composition root registers :meth:`SessionVM.apply_snapshot` as a
    runtime listener and forwards the resulting :class:`SessionView` to the
    views.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from minitools.domain.events import (
    CheckGuess,
    ClearGuessField,
    ClearPassword,
    DecrementCounter,
    Event,
    GeneratePassword,
    IncrementCounter,
    NewGame,
    OpenLink,
    SetGuessField,
    SetPasswordField,
    ToggleTimer,
)
from minitools.domain.session import GuessOutcome, SessionSnapshot

PASSWORD_PLACEHOLDER = "Your password will be here!"
GUESS_PLACEHOLDER = "Enter your number"


@dataclass(frozen=True)
class SessionView:
    """Display-ready labels derived from a session snapshot."""

    watch_label: str
    watch_button: str
    counter_text: str
    password: str
    guess_input: str
    feedback: str
    attempts_label: str
    outcome: GuessOutcome


def project(snapshot: SessionSnapshot) -> SessionView:
    return SessionView(
        watch_label=f"Watch: {snapshot.elapsed_seconds}",
        watch_button="Stop" if snapshot.timer_active else "Start",
        counter_text=str(snapshot.counter),
        password=snapshot.password,
        guess_input=snapshot.guess_input,
        feedback=snapshot.feedback,
        attempts_label=f"Number of attempts: {snapshot.attempts}",
        outcome=snapshot.last_outcome,
    )


class SessionVM:
    """Translate widget intents into session events; no I/O here."""

    def __init__(
        self,
        submit: Callable[[Event], None],
        *,
        on_view_changed: Optional[Callable[[SessionView], None]] = None,
    ) -> None:
        self._submit = submit
        self.on_view_changed = on_view_changed
        self.view: Optional[SessionView] = None

    def apply_snapshot(self, snapshot: SessionSnapshot) -> SessionView:
        view = project(snapshot)
        changed = view != self.view
        self.view = view
        if changed and self.on_view_changed:
            self.on_view_changed(view)
        return view

    # ---- Watch ----
    def cmd_toggle_watch(self) -> None:
        self._submit(ToggleTimer())

    # ---- Counter ----
    def cmd_increment(self) -> None:
        self._submit(IncrementCounter())

    def cmd_decrement(self) -> None:
        self._submit(DecrementCounter())

    # ---- Password ----
    def set_password_text(self, text: str) -> None:
        self._submit(SetPasswordField(str(text)))

    def cmd_clear_password(self) -> None:
        self._submit(ClearPassword())

    def cmd_generate_password(self) -> None:
        self._submit(GeneratePassword())

    # ---- Guessing game ----
    def set_guess_text(self, text: str) -> None:
        self._submit(SetGuessField(str(text)))

    def cmd_clear_guess(self) -> None:
        self._submit(ClearGuessField())

    def cmd_check_guess(self) -> None:
        self._submit(CheckGuess())

    def cmd_new_game(self) -> None:
        self._submit(NewGame())

    # ---- Links ----
    def cmd_open_link(self, url: str) -> None:
        self._submit(OpenLink(str(url)))


__all__ = [
    "GUESS_PLACEHOLDER",
    "PASSWORD_PLACEHOLDER",
    "SessionVM",
    "SessionView",
    "project",
]
