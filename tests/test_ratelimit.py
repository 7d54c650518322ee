from django.core.cache.backends.locmem import LocMemCache

from apps.core.ratelimit import FixedWindowRateLimiter, limiter_for


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def make_limiter(limit=3, window=60, clock=None):
    cache = LocMemCache('ratelimit-tests', {})
    cache.clear()
    return FixedWindowRateLimiter(limit, window_seconds=window, cache=cache, clock=clock or FakeClock())


def test_allows_up_to_limit_within_window():
    limiter = make_limiter(limit=3)

    assert [limiter.allow('u1') for _ in range(4)] == [True, True, True, False]


def test_keys_are_counted_separately():
    limiter = make_limiter(limit=1)

    assert limiter.allow('u1')
    assert limiter.allow('u2')
    assert not limiter.allow('u1')


def test_new_window_resets_counter():
    clock = FakeClock(now=60.0)
    limiter = make_limiter(limit=1, window=60, clock=clock)

    assert limiter.allow('u1')
    assert not limiter.allow('u1')

    clock.now = 120.0
    assert limiter.allow('u1')


def test_limiter_for_reads_settings(settings):
    settings.STARTUP_HELPER = {'SUPPORT_RATE_LIMIT': {'limit': 2, 'window_seconds': 30}}

    limiter = limiter_for('support')

    assert limiter.limit == 2
    assert limiter.window_seconds == 30
    assert limiter.prefix == 'ratelimit:support'
