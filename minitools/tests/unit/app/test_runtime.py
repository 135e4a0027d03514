import logging
import time

from minitools.adapters.random_source import RandomSource
from minitools.app import runtime as runtime_module
from minitools.app.runtime import WATCH_KEY, AppRuntime
from minitools.domain.errors import UrlOpenError
from minitools.domain.events import (
    CheckGuess,
    IncrementCounter,
    NewGame,
    OpenLink,
    SetGuessField,
    TimerTick,
    ToggleTimer,
)
from minitools.domain.session import GuessOutcome, Session
from minitools.viewmodels.about_vm import AboutVM
from minitools.viewmodels.session_vm import SessionVM


class _RecordingOpener:
    def __init__(self):
        self.urls = []

    def open(self, url):
        self.urls.append(url)


class _FailingOpener:
    def open(self, url):
        raise UrlOpenError(url, "no handler")


class _ManualWatch:
    """Stands in for the threaded producer; tests call ``emit`` directly."""

    instances = []

    def __init__(self, emit, *, interval_s=1.0):
        self.emit = emit
        self.interval_s = interval_s
        self.running = False
        self.joined = []
        _ManualWatch.instances.append(self)

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def is_running(self):
        return self.running

    def join(self, timeout=None):
        self.joined.append(timeout)


def _runtime(opener=None, **kwargs):
    return AppRuntime(rng=RandomSource(seed=7), opener=opener or _RecordingOpener(), **kwargs)


def _manual_runtime(monkeypatch, **kwargs):
    _ManualWatch.instances = []
    monkeypatch.setattr(runtime_module, "WatchSubscription", _ManualWatch)
    return _runtime(**kwargs)


def test_events_apply_in_submission_order():
    runtime = _runtime(session=Session(secret_number=50))

    runtime.submit(SetGuessField("20"))
    runtime.submit(CheckGuess())
    runtime.submit(SetGuessField("80"))
    runtime.submit(CheckGuess())

    assert runtime.pump() == 4
    snap = runtime.snapshot()
    assert snap.attempts == 2
    assert snap.feedback.startswith("Go lower")
    assert snap.guess_input == "80"


def test_pump_respects_max_events():
    runtime = _runtime()
    for _ in range(3):
        runtime.submit(IncrementCounter())

    assert runtime.pump(max_events=2) == 2
    assert runtime.snapshot().counter == 2
    assert runtime.pump() == 1
    assert runtime.pump() == 0


def test_listeners_receive_snapshot_once_per_pump():
    runtime = _runtime()
    seen = []
    runtime.add_listener(seen.append)

    runtime.submit(IncrementCounter())
    runtime.submit(IncrementCounter())
    runtime.pump()
    runtime.pump()

    assert [snap.counter for snap in seen] == [2]


def test_failing_listener_does_not_block_others(caplog):
    runtime = _runtime()
    seen = []

    def _broken(snapshot):
        raise RuntimeError("boom")

    runtime.add_listener(_broken)
    runtime.add_listener(seen.append)
    runtime.submit(IncrementCounter())

    with caplog.at_level(logging.ERROR, logger="minitools.app.runtime"):
        runtime.pump()

    assert len(seen) == 1
    assert "Snapshot listener failed" in caplog.text


def test_watch_subscription_follows_timer_flag(monkeypatch):
    runtime = _manual_runtime(monkeypatch, watch_interval_s=0.5)

    runtime.submit(ToggleTimer())
    runtime.pump()
    assert runtime.active_subscriptions == [WATCH_KEY]
    producer = _ManualWatch.instances[0]
    assert producer.running is True
    assert producer.interval_s == 0.5

    producer.emit(TimerTick(1))
    producer.emit(TimerTick(2))
    runtime.pump()
    assert runtime.snapshot().elapsed_seconds == 2

    runtime.submit(ToggleTimer())
    runtime.pump()
    assert runtime.active_subscriptions == []
    assert producer.running is False
    assert runtime.snapshot().elapsed_seconds == 2


def test_ticks_from_stopped_producer_are_dropped(monkeypatch):
    runtime = _manual_runtime(monkeypatch)

    runtime.submit(ToggleTimer())
    runtime.pump()
    old = _ManualWatch.instances[0]
    runtime.submit(ToggleTimer())
    runtime.submit(ToggleTimer())
    runtime.pump()
    new = _ManualWatch.instances[1]

    old.emit(TimerTick(9))
    new.emit(TimerTick(1))
    runtime.pump()

    assert runtime.snapshot().elapsed_seconds == 1


def test_late_tick_after_stop_is_ignored(monkeypatch):
    runtime = _manual_runtime(monkeypatch)

    runtime.submit(ToggleTimer())
    runtime.pump()
    producer = _ManualWatch.instances[0]
    producer.emit(TimerTick(1))
    runtime.submit(ToggleTimer())
    runtime.pump()

    producer.emit(TimerTick(2))
    assert runtime.pump() == 0
    assert runtime.snapshot().elapsed_seconds == 1


def test_real_watch_ticks_reach_session():
    runtime = _runtime(watch_interval_s=0.01)
    runtime.submit(ToggleTimer())
    runtime.pump()

    deadline = time.monotonic() + 5.0
    while runtime.snapshot().elapsed_seconds < 3 and time.monotonic() < deadline:
        runtime.pump()
        time.sleep(0.005)
    runtime.close()

    assert runtime.snapshot().elapsed_seconds >= 3
    assert runtime.active_subscriptions == []


def test_close_stops_watch_and_blocks_restart(monkeypatch):
    runtime = _manual_runtime(monkeypatch)
    runtime.submit(ToggleTimer())
    runtime.pump()

    producer = _ManualWatch.instances[0]

    runtime.close(wait_s=0.5)
    assert runtime.active_subscriptions == []
    assert runtime.watch_should_run() is False
    assert producer.running is False
    assert producer.joined == [0.5]

    runtime.submit(IncrementCounter())
    runtime.pump()
    assert runtime.active_subscriptions == []


def test_open_link_effect_reaches_opener():
    opener = _RecordingOpener()
    runtime = _runtime(opener=opener)

    runtime.submit(OpenLink("https://example.org"))
    runtime.pump()

    assert opener.urls == ["https://example.org"]


def test_opener_failure_leaves_session_untouched(caplog):
    runtime = _runtime(opener=_FailingOpener())
    before = runtime.snapshot()

    runtime.submit(OpenLink("https://example.org"))
    with caplog.at_level(logging.WARNING):
        runtime.pump()

    assert runtime.snapshot() == before
    assert "failed to open" in caplog.text


def test_unknown_event_is_logged_and_skipped(caplog):
    runtime = _runtime()

    runtime.submit(object())
    runtime.submit(IncrementCounter())
    with caplog.at_level(logging.ERROR, logger="minitools.app.runtime"):
        applied = runtime.pump()

    assert applied == 2
    assert runtime.snapshot().counter == 1
    assert "UNKNOWN_EVENT" in caplog.text



def test_huge_guess_does_not_stall_the_pump():
    runtime = _runtime(session=Session(secret_number=50))

    runtime.submit(SetGuessField("9" * 5000))
    runtime.submit(CheckGuess())
    runtime.submit(IncrementCounter())

    assert runtime.pump() == 3
    snap = runtime.snapshot()
    assert snap.last_outcome is GuessOutcome.INVALID
    assert snap.attempts == 0
    assert snap.counter == 1


class _BrokenRandom:
    def next_uniform(self, low, high):
        raise RuntimeError("entropy pool empty")


def test_unexpected_dispatch_error_is_logged_and_later_events_apply(caplog):
    runtime = AppRuntime(rng=_BrokenRandom(), opener=_RecordingOpener(), session=Session(secret_number=5))

    runtime.submit(NewGame())
    runtime.submit(IncrementCounter())
    with caplog.at_level(logging.ERROR, logger="minitools.app.runtime"):
        applied = runtime.pump()

    assert applied == 2
    assert runtime.snapshot().counter == 1
    assert "Event failed" in caplog.text


def test_about_link_click_reaches_opener():
    opener = _RecordingOpener()
    runtime = _runtime(opener=opener)
    session_vm = SessionVM(runtime.submit)
    _, url = AboutVM().links[-1]

    session_vm.cmd_open_link(url)
    runtime.pump()

    assert opener.urls == [url]
