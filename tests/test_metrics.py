"""Tests for the hit counter."""

from concurrent.futures import ThreadPoolExecutor

from chirpy.services.metrics import HitCounter


def test_starts_at_zero():
    assert HitCounter().hits == 0


def test_increment_and_reset():
    counter = HitCounter()
    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.hits == 2
    counter.reset()
    assert counter.hits == 0


def test_concurrent_increments():
    counter = HitCounter()
    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(1000):
            pool.submit(counter.increment)
    assert counter.hits == 1000
