import redis

from ...application.ports.rate_limiter import RateLimiter


class RedisRateLimiter(RateLimiter):
    """Fixed-window counter shared by every worker that points at the same Redis.

    The window starts at a key's first hit; later hits, rejected ones included,
    never push the expiry back.
    """

    def __init__(self, url: str, prefix: str = "dentalcare:rl:") -> None:
        self.client = redis.Redis.from_url(url)
        self.prefix = prefix

    def allow(self, key: str, max_requests: int, window_seconds: int) -> bool:
        rk = f"{self.prefix}{key}:{window_seconds}"
        pipe = self.client.pipeline()
        pipe.incr(rk, 1)
        pipe.ttl(rk)
        count, ttl = pipe.execute()
        # -1: the counter exists but has no expiry yet
        if int(ttl) < 0:
            self.client.expire(rk, window_seconds)
        return int(count) <= int(max_requests)
