# apps/core/ratelimit.py
import logging
import time

from django.core.cache import cache as default_cache

from apps.core.conf import app_setting

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    """
    Limiter "stałe okno": maksymalnie `limit` zdarzeń na klucz w każdym oknie
    `window_seconds`. Licznik trzymamy w cache Django (TTL = długość okna),
    więc przy wspólnym backendzie cache działa też dla wielu procesów.
    """

    def __init__(self, limit: int, window_seconds: int = 60, cache=None, prefix: str = 'ratelimit', clock=time.time):
        self.limit = limit
        self.window_seconds = window_seconds
        self.cache = cache or default_cache
        self.prefix = prefix
        self.clock = clock

    def _cache_key(self, key) -> str:
        window = int(self.clock() // self.window_seconds)
        return f"{self.prefix}:{key}:{window}"

    def allow(self, key) -> bool:
        """Rejestruje próbę i zwraca True, jeśli mieści się w limicie."""
        cache_key = self._cache_key(key)

        # 1. Pierwsze zdarzenie w oknie zakłada licznik
        if self.cache.add(cache_key, 1, timeout=self.window_seconds):
            return True

        # 2. Kolejne zwiększają licznik
        try:
            count = self.cache.incr(cache_key)
        except ValueError:
            # Klucz wygasł między add() a incr()
            self.cache.set(cache_key, 1, timeout=self.window_seconds)
            return True

        if count > self.limit:
            logger.warning("Rate limit exceeded for %s (%s/%s per %ss)", key, count, self.limit, self.window_seconds)
            return False
        return True


def limiter_for(scope: str) -> FixedWindowRateLimiter:
    """Buduje limiter dla danego obszaru na podstawie ustawień (np. SUPPORT_RATE_LIMIT)."""
    conf = app_setting(f"{scope.upper()}_RATE_LIMIT")
    return FixedWindowRateLimiter(
        limit=conf['limit'],
        window_seconds=conf.get('window_seconds', 60),
        prefix=f"ratelimit:{scope}",
    )
