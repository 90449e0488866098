"""Redis fallback store for payrollcache."""

from payrollcache_redis.store import RedisLocalStore

__all__ = ["RedisLocalStore"]
