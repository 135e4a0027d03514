"""Background producers that feed events into the runtime inbox.

The runtime computes which subscriptions should be running after every pump
and passes that set to :class:`SubscriptionSet`, which starts missing
producers and stops the ones no longer wanted. Producers only ever call the
thread-safe ``emit`` callable they were built with.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Protocol

from ..domain.events import Event, TimerTick

EmitFn = Callable[[Event], None]

_log = logging.getLogger(__name__)


class Subscription(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def is_running(self) -> bool: ...
    def join(self, timeout: Optional[float] = None) -> None: ...


SubscriptionFactory = Callable[[], Subscription]


class WatchSubscription:
    """Emit ``TimerTick(1)``, ``TimerTick(2)``, ... once per interval.

    The sequence restarts at 1 for every new producer; it does not read the
    session to resume. Deadlines advance by a fixed interval from the start
    time, so a late wake-up neither skips nor repeats a tick.
    """

    def __init__(self, emit: EmitFn, *, interval_s: float = 1.0) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be positive.")
        self._emit = emit
        self._interval = float(interval_s)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="watch-subscription", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Signal the producer to exit; returns without waiting for the thread."""
        self._stop.set()

    def join(self, timeout: Optional[float] = None) -> None:
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    def _run(self) -> None:
        count = 1
        deadline = time.monotonic() + self._interval
        while not self._stop.wait(max(0.0, deadline - time.monotonic())):
            if self._stop.is_set():
                break
            self._emit(TimerTick(count))
            count += 1
            deadline += self._interval
        _log.debug("Watch producer exited after %d ticks", count - 1)


@dataclass
class SubscriptionHandle:
    """Running producer associated with a single subscription key."""

    key: str
    subscription: Subscription


class SubscriptionSet:
    """Keep the set of running producers equal to the desired set."""

    def __init__(self) -> None:
        self._handles: Dict[str, SubscriptionHandle] = {}

    def sync(self, desired: Mapping[str, SubscriptionFactory]) -> None:
        """Start producers for new keys and stop producers for dropped keys.

        Args:
            desired: Mapping of subscription key to a factory building a
                fresh (not yet started) producer.
        """
        for key in list(self._handles.keys()):
            if key not in desired:
                self.cancel(key)
        for key, factory in desired.items():
            if key in self._handles:
                continue
            subscription = factory()
            subscription.start()
            self._handles[key] = SubscriptionHandle(key=key, subscription=subscription)
            _log.debug("Subscription started: %s", key)

    def cancel(self, key: str) -> None:
        handle = self._handles.pop(key, None)
        if not handle:
            return
        handle.subscription.stop()
        _log.debug("Subscription stopped: %s", key)

    def cancel_all(self, wait_s: Optional[float] = None) -> None:
        """Stop every producer; with ``wait_s`` also wait for their threads."""
        handles = list(self._handles.values())
        for handle in handles:
            self.cancel(handle.key)
        if wait_s is not None:
            for handle in handles:
                handle.subscription.join(wait_s)

    def active_keys(self) -> list[str]:
        return sorted(self._handles.keys())


__all__ = [
    "Subscription",
    "SubscriptionHandle",
    "SubscriptionSet",
    "WatchSubscription",
]
