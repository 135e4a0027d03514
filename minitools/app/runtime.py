"""Single owner of the session, its event inbox and its subscriptions.

Call chain:
    Views call ``AppRuntime.submit`` through ``SessionVM`` commands; the
    watch producer thread calls it through the emit closure built in
    :meth:`AppRuntime._build_watch`. The UI loop (Tk ``after`` or a NiceGUI
    timer) calls :meth:`AppRuntime.pump`, which applies queued events in
    arrival order on the UI thread, runs effects, re-synchronises
    subscriptions and notifies listeners with a fresh snapshot.
"""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..domain.errors import UseCaseError
from ..domain.events import Effect, Event, OpenUrl
from ..domain.ports import RandomPort, UrlOpenerPort
from ..domain.session import Session, SessionSnapshot
from ..usecases.apply_event import ApplyEvent
from ..usecases.open_link import OpenLink
from .subscriptions import SubscriptionFactory, SubscriptionSet, WatchSubscription

WATCH_KEY = "watch"
CLOSE_WAIT_S = 1.0

Listener = Callable[[SessionSnapshot], None]


@dataclass(frozen=True)
class _Queued:
    event: Event
    source: Optional[int] = None


class AppRuntime:
    """Cooperative event loop core shared by the Tk and NiceGUI front-ends."""

    def __init__(
        self,
        *,
        rng: RandomPort,
        opener: UrlOpenerPort,
        watch_interval_s: float = 1.0,
        session: Optional[Session] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.session = session or Session.start(rng)
        self._apply = ApplyEvent(rng)
        self._open_link = OpenLink(opener)
        self._inbox: "queue.Queue[_Queued]" = queue.Queue()
        self._subscriptions = SubscriptionSet()
        self._listeners: List[Listener] = []
        self._watch_interval_s = watch_interval_s
        self._watch_source: Optional[int] = None
        self._next_source = 0
        self._closed = False

    # ------------------------------------------------------------------
    # Exposed surface
    # ------------------------------------------------------------------
    def submit(self, event: Event) -> None:
        """Queue an event from any thread; applied on the next ``pump``."""
        self._inbox.put(_Queued(event))

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot()

    def watch_should_run(self) -> bool:
        return bool(self.session.timer_active) and not self._closed

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def pump(self, max_events: Optional[int] = None) -> int:
        """Apply queued events in order and return how many were applied."""
        applied = 0
        while max_events is None or applied < max_events:
            try:
                item = self._inbox.get_nowait()
            except queue.Empty:
                break
            if item.source is not None and item.source != self._watch_source:
                self._log.debug("Dropped tick from stopped producer: %s", item.event)
                continue
            self._dispatch(item.event)
            applied += 1
            self._sync_subscriptions()
        if applied:
            self._notify()
        return applied

    def close(self, wait_s: float = CLOSE_WAIT_S) -> None:
        """Stop all producers and wait up to ``wait_s`` for their threads.

        Later events are still accepted but no producer is started again.
        """
        self._closed = True
        self._subscriptions.cancel_all(wait_s)
        self._watch_source = None

    @property
    def active_subscriptions(self) -> List[str]:
        return self._subscriptions.active_keys()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _dispatch(self, event: Event) -> None:
        try:
            effects = self._apply(self.session, event)
        except UseCaseError as exc:
            self._log.error("Event rejected (%s): %s", exc.code, exc.message)
            return
        except Exception:
            self._log.exception("Event failed: %r", event)
            return
        for effect in effects:
            self._perform(effect)

    def _perform(self, effect: Effect) -> None:
        if isinstance(effect, OpenUrl):
            self._open_link(effect.url)
            return
        self._log.warning("Unhandled effect: %r", effect)

    def _sync_subscriptions(self) -> None:
        desired: Dict[str, SubscriptionFactory] = {}
        if self.watch_should_run():
            desired[WATCH_KEY] = self._build_watch
        self._subscriptions.sync(desired)
        if WATCH_KEY not in desired:
            self._watch_source = None

    def _build_watch(self) -> WatchSubscription:
        self._next_source += 1
        source = self._next_source
        self._watch_source = source

        def emit(event: Event) -> None:
            self._inbox.put(_Queued(event, source))

        return WatchSubscription(emit, interval_s=self._watch_interval_s)

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                self._log.exception("Snapshot listener failed")


__all__ = ["AppRuntime", "WATCH_KEY"]
