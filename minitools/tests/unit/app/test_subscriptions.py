import threading
import time

import pytest

from minitools.app.subscriptions import SubscriptionSet, WatchSubscription
from minitools.domain.events import TimerTick


class _FakeSubscription:
    def __init__(self, name, log):
        self.name = name
        self.log = log
        self.running = False

    def start(self):
        self.running = True
        self.log.append(("start", self.name))

    def stop(self):
        self.running = False
        self.log.append(("stop", self.name))

    def is_running(self):
        return self.running

    def join(self, timeout=None):
        self.log.append(("join", self.name))


def _collect_ticks(interval_s, count, timeout_s=5.0):
    ticks = []
    done = threading.Event()

    def emit(event):
        ticks.append(event)
        if len(ticks) >= count:
            done.set()

    sub = WatchSubscription(emit, interval_s=interval_s)
    sub.start()
    assert done.wait(timeout_s)
    sub.stop()
    sub.join(timeout_s)
    return sub, ticks


def test_watch_emits_counting_ticks_from_one():
    sub, ticks = _collect_ticks(0.01, 3)

    assert ticks[:3] == [TimerTick(1), TimerTick(2), TimerTick(3)]
    assert sub.is_running() is False


def test_new_watch_producer_restarts_at_one():
    _, first = _collect_ticks(0.01, 2)
    _, second = _collect_ticks(0.01, 1)

    assert first[0] == TimerTick(1)
    assert second[0] == TimerTick(1)


def test_watch_stop_prevents_further_ticks():
    ticks = []
    sub = WatchSubscription(ticks.append, interval_s=0.05)
    sub.start()
    assert sub.is_running() is True

    sub.stop()
    sub.join(1.0)
    emitted = len(ticks)
    time.sleep(0.15)

    assert len(ticks) == emitted
    assert sub.is_running() is False


def test_watch_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        WatchSubscription(lambda event: None, interval_s=0)


def test_subscription_set_starts_and_stops_by_key():
    log = []
    subs = SubscriptionSet()

    subs.sync({"watch": lambda: _FakeSubscription("a", log)})
    assert subs.active_keys() == ["watch"]

    subs.sync({"watch": lambda: _FakeSubscription("b", log)})
    assert log == [("start", "a")]

    subs.sync({})
    assert subs.active_keys() == []
    assert log == [("start", "a"), ("stop", "a")]


def test_subscription_set_cancel_all():
    log = []
    subs = SubscriptionSet()
    subs.sync({
        "one": lambda: _FakeSubscription("one", log),
        "two": lambda: _FakeSubscription("two", log),
    })

    subs.cancel_all()
    subs.cancel("missing")

    assert subs.active_keys() == []
    assert sorted(entry for entry in log if entry[0] == "stop") == [("stop", "one"), ("stop", "two")]


def test_cancel_all_waits_for_stopped_producers():
    log = []
    subs = SubscriptionSet()
    subs.sync({"watch": lambda: _FakeSubscription("w", log)})

    subs.cancel_all(wait_s=0.5)

    assert log == [("start", "w"), ("stop", "w"), ("join", "w")]


def test_watch_thread_finishes_after_cancel_all():
    started = []

    def _factory():
        watch = WatchSubscription(lambda event: None, interval_s=0.01)
        started.append(watch)
        return watch

    subs = SubscriptionSet()
    subs.sync({"watch": _factory})

    subs.cancel_all(wait_s=2.0)

    assert started[0].is_running() is False
    assert "watch-subscription" not in [t.name for t in threading.enumerate()]
