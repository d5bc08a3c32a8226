import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from brave_mcp.services.rate_limit import MIN_INTERVAL_MS, RateLimiter, endpoint_from_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://api.search.brave.com/res/v1/web/search?q=a", "web/search"),
        ("https://api.search.brave.com/res/v1/web/search?q=b&count=3", "web/search"),
        ("https://api.search.brave.com/res/v1/local/pois?ids=1&ids=2", "local/pois"),
        ("https://api.search.brave.com/res/v1/local/descriptions", "local/descriptions"),
    ],
)
def test_endpoint_is_last_two_path_segments(url, expected):
    assert endpoint_from_url(url) == expected


def test_second_call_within_a_second_is_rejected():
    limiter = RateLimiter()

    assert limiter.check("web/search", now=10000) is True
    assert limiter.check("web/search", now=10500) is False
    assert limiter.check("web/search", now=11500) is True

    tracker = limiter.tracker("web/search")
    assert tracker.last_call_time == 11500
    assert tracker.call_count == 2


def test_exact_interval_is_allowed():
    limiter = RateLimiter()

    assert limiter.check("local/pois", now=5000)
    assert limiter.check("local/pois", now=5000 + MIN_INTERVAL_MS)


def test_rejection_does_not_move_the_window():
    limiter = RateLimiter()

    limiter.check("web/search", now=10000)
    limiter.check("web/search", now=10900)

    assert limiter.tracker("web/search").last_call_time == 10000
    assert limiter.check("web/search", now=11000) is True


def test_endpoints_have_independent_budgets():
    limiter = RateLimiter()

    assert limiter.check("local/pois", now=20000)
    assert limiter.check("local/descriptions", now=20001)
    assert limiter.check("web/search", now=20002)
    assert limiter.check("local/pois", now=20003) is False


def test_reset_clears_all_trackers():
    limiter = RateLimiter()
    limiter.check("web/search", now=10000)
    limiter.check("local/pois", now=10000)
    assert len(limiter) == 2

    limiter.reset()

    assert len(limiter) == 0
    assert limiter.tracker("web/search") is None
    assert limiter.check("web/search", now=10001) is True


def test_uses_injected_clock_when_now_is_omitted():
    ticks = iter([1000.0, 1200.0, 2500.0])
    limiter = RateLimiter(clock=lambda: next(ticks))

    assert limiter.check("web/search") is True
    assert limiter.check("web/search") is False
    assert limiter.check("web/search") is True
