import threading
import time

from powerstat_core.cache import PowerDataCache


class CountingFetch:
    def __init__(self, outputs):
        self.outputs = list(outputs)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.outputs.pop(0) if self.outputs else None


def test_reuses_value_within_ttl(fake_clock):
    fetch = CountingFetch(["first", "second"])
    cache = PowerDataCache(fetch, ttl=30.0, clock=fake_clock)

    assert cache.get() == "first"
    fake_clock.advance(29.9)
    assert cache.get() == "first"
    assert fetch.calls == 1


def test_refreshes_once_after_expiry(fake_clock):
    fetch = CountingFetch(["first", "second", "third"])
    cache = PowerDataCache(fetch, ttl=30.0, clock=fake_clock)

    cache.get()
    fake_clock.advance(30.0)
    assert cache.get() == "second"
    assert cache.get() == "second"
    assert fetch.calls == 2


def test_failed_refresh_keeps_previous_value(fake_clock):
    fetch = CountingFetch(["first", None])
    cache = PowerDataCache(fetch, ttl=30.0, clock=fake_clock)

    cache.get()
    fake_clock.advance(31)
    assert cache.get() == "first"
    assert fetch.calls == 2


def test_never_captured_is_empty(fake_clock):
    fetch = CountingFetch([None, None])
    cache = PowerDataCache(fetch, ttl=30.0, clock=fake_clock)
    assert cache.get() == ""
    # a failure is not cached; the next call tries again
    assert cache.get() == ""
    assert fetch.calls == 2
    assert cache.age() is None


def test_invalidate_and_age(fake_clock):
    fetch = CountingFetch(["first", "second"])
    cache = PowerDataCache(fetch, ttl=30.0, clock=fake_clock)

    cache.get()
    fake_clock.advance(5)
    assert cache.age() == 5
    cache.invalidate()
    assert cache.get() == "second"
    assert fetch.calls == 2


def test_concurrent_callers_share_one_refresh():
    fetch_started = threading.Event()
    calls = []

    def slow_fetch():
        calls.append(1)
        fetch_started.set()
        time.sleep(0.2)
        return "report"

    cache = PowerDataCache(slow_fetch, ttl=30.0)
    results = []

    def worker():
        results.append(cache.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert fetch_started.is_set()
    assert len(calls) == 1
    assert results == ["report"] * 8
