"""
Tests for RateLimiter - minimum spacing between external calls.
"""

import pytest

from metrowatch.services.rate_limiter import RateLimiter
from tests.fixtures.catalogs import FakeClock


class TestRateLimiter:
    """Tests for RateLimiter.wait()."""

    def test_first_call_does_not_sleep(self, fake_clock: FakeClock):
        limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

        limiter.wait()

        assert fake_clock.sleeps == []

    def test_immediate_second_call_sleeps_full_interval(self, fake_clock: FakeClock):
        limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

        limiter.wait()
        limiter.wait()

        assert fake_clock.sleeps == [0.25]

    def test_sleeps_only_the_remainder(self, fake_clock: FakeClock):
        limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

        limiter.wait()
        fake_clock.now += 0.125
        limiter.wait()

        assert fake_clock.sleeps == [0.125]

    def test_no_sleep_when_interval_already_elapsed(self, fake_clock: FakeClock):
        limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

        limiter.wait()
        fake_clock.now += 1.0
        limiter.wait()

        assert fake_clock.sleeps == []

    def test_consecutive_calls_are_spaced(self, fake_clock: FakeClock):
        """Ten calls in a row take at least nine intervals."""
        limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)
        start = fake_clock.now

        for _ in range(10):
            limiter.wait()

        assert fake_clock.now - start >= 9 * 0.25

    @pytest.mark.parametrize("interval", [0.0, -0.25])
    def test_non_positive_interval_is_rejected(self, interval: float):
        with pytest.raises(ValueError):
            RateLimiter(interval)
